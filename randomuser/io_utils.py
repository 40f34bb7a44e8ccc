#!/usr/bin/env python3
"""
IO utilities for reading/writing the random_users.csv file.
"""

from pathlib import Path
from typing import Tuple

import pandas as pd

CSV_NAME = "random_users.csv"


def get_data_dir(data_dir: Path) -> Path:
    # Creates the data directory (and any missing parents) if needed and returns it.
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def upsert_users_csv(new_rows: pd.DataFrame, data_dir: Path) -> Tuple[pd.DataFrame, Path]:
    # Appends new rows to random_users.csv, drops duplicate users (same login.uuid, first one wins)
    # and writes the result back. Returns the final DataFrame and the CSV path.
    csv_path = get_data_dir(data_dir) / CSV_NAME

    if csv_path.exists(): # If the CSV file already exists, read existing data and append new rows.
        df_existing = pd.read_csv(csv_path)
        df_final = pd.concat([df_existing, new_rows], ignore_index=True)
        # ignore_index=True renumbers the rows 0..N-1 instead of repeating the old and new row numbers.
    else:
        df_final = new_rows

    # Without login.uuid (excluded via exc) there is no identity to dedup on.
    # keep="first" (the default) means rows already on disk win over newly fetched ones.
    if "login.uuid" in df_final.columns:
        df_final = df_final.drop_duplicates(subset=["login.uuid"])

    # Writes the final table back. index=False avoids writing a numeric index column.
    df_final.to_csv(csv_path, index=False)
    return df_final, csv_path
