"""
Client package for the RandomUser API (https://randomuser.me).

This package contains:
- params: FetchOptions and query-parameter normalization
- models: typed, immutable user records (pydantic)
- formatters: full name, address and date-of-birth formatting
- client: HTTP transport, UserService and the RandomUserClient entry point
- transformations: pandas view of fetched users
- io_utils: reading and writing the users CSV
- job: CSV export entry point
"""

from .client import RandomUserClient, UserService, fetch_random_user, fetch_users
from .errors import ApiError, EmptyResultsError, RandomUserError
from .formatters import (
    INVALID_DATE,
    format_date,
    format_date_of_birth,
    format_registered_date,
    get_formatted_address,
    get_full_name,
)
from .models import FormatOptions, RandomUserResponse, UserRecord
from .params import FetchOptions, normalize_params, single_user_params

__all__ = [
    "ApiError",
    "EmptyResultsError",
    "FetchOptions",
    "FormatOptions",
    "INVALID_DATE",
    "RandomUserClient",
    "RandomUserError",
    "RandomUserResponse",
    "UserRecord",
    "UserService",
    "fetch_random_user",
    "fetch_users",
    "format_date",
    "format_date_of_birth",
    "format_registered_date",
    "get_formatted_address",
    "get_full_name",
    "normalize_params",
    "single_user_params",
]
