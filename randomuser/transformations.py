#!/usr/bin/env python3
"""
Pandas view of fetched users:
- flatten the nested records
- keep the columns worth exporting
- add the formatted name, address and date of birth
"""

from typing import Iterable, Tuple

import pandas as pd

from .config import DEFAULT_DATE_FORMAT
from .formatters import format_date_of_birth, get_formatted_address, get_full_name
from .models import FormatOptions, UserRecord

# Columns copied as-is from the flattened records (dotted names come from json_normalize).
VIEW_COLUMNS = [
    "login.uuid",
    "gender",
    "nat",
    "email",
    "phone",
    "dob.age",
]


def users_to_frame(
    users: Iterable[UserRecord], date_format: str = DEFAULT_DATE_FORMAT
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    # Returns (df_raw, df_view):
    # df_raw: every field of every record, flattened (name.first, location.street.name, ...)
    # df_view: the exported columns plus full_name, address and dob_formatted
    users = list(users) # iterated twice below, so a generator would be used up after the first pass

    # model_dump(mode="json") turns each record back into plain dicts; exclude_none drops blocks
    # the API did not send, so json_normalize does not create empty columns for them.
    df_raw = pd.json_normalize([u.model_dump(mode="json", exclude_none=True) for u in users])

    # inc/exc may have removed some blocks, so only pick the columns that came back.
    # .copy() makes df_view an independent table, because we add columns to it next.
    df_view = df_raw[[c for c in VIEW_COLUMNS if c in df_raw.columns]].copy()

    # Derived columns, one value per user in the same order as the rows.
    # A record without a name/location block gets None (an empty cell in the CSV).
    options = FormatOptions(date_format=date_format)
    df_view["full_name"] = [get_full_name(u) if u.name else None for u in users]
    df_view["address"] = [get_formatted_address(u) if u.location else None for u in users]
    df_view["dob_formatted"] = [format_date_of_birth(u, options) for u in users]

    return df_raw, df_view
