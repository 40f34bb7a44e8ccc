#!/usr/bin/env python3
"""
Request options for the /api/ endpoint and their conversion into query parameters.
"""

from dataclasses import dataclass, fields
from typing import Dict, List, Mapping, Optional, Union

QueryParams = Dict[str, Union[str, int]]

GENDERS = ("male", "female")

# Fields the API accepts as comma-separated lists.
LIST_FIELDS = ("nat", "inc", "exc")


@dataclass(frozen=True)
class FetchOptions:
    """
    Filters and shape of a user-listing request. Every field is optional;
    None means "not sent".

    results: how many users to return (>= 1).
    gender:  "male" or "female".
    nat:     nationality code, or a list of codes ("us", ["us", "gb"]).
    seed:    any string; the API returns the same users for the same seed.
    inc:     field name(s) to include in each record.
    exc:     field name(s) to exclude from each record.
    page:    page number, sent as-is (use together with seed).
    """

    results: Optional[int] = None
    gender: Optional[str] = None
    nat: Optional[Union[str, List[str]]] = None
    seed: Optional[str] = None
    inc: Optional[Union[str, List[str]]] = None
    exc: Optional[Union[str, List[str]]] = None
    page: Optional[int] = None

    def __post_init__(self):
        if self.results is not None and self.results < 1:
            raise ValueError(f"results must be >= 1, got {self.results}")
        if self.page is not None and self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.gender is not None and self.gender not in GENDERS:
            raise ValueError(f"gender must be one of {GENDERS}, got {self.gender!r}")


OptionsLike = Union[FetchOptions, Mapping, None]


def _as_mapping(options: OptionsLike) -> Mapping:
    if options is None:
        return {}
    if isinstance(options, FetchOptions):
        return {f.name: getattr(options, f.name) for f in fields(options)}
    return options


def normalize_params(options: OptionsLike = None) -> QueryParams:
    # Lists are joined with "," (order kept, [] -> ""), scalars pass through, None is dropped.
    params: QueryParams = {}
    for key, value in _as_mapping(options).items():
        if value is None:
            continue
        if key in LIST_FIELDS and isinstance(value, (list, tuple)):
            value = ",".join(value)
        params[key] = value
    return params


def single_user_params(options: OptionsLike = None) -> QueryParams:
    """Query parameters for a one-user request: same as normalize_params but results is always 1."""
    params = normalize_params(options)
    params["results"] = 1
    return params
