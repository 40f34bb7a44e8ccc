#!/usr/bin/env python3

# ------------------------------------------------------------------------------------------
# --------------------- HTTP client for the RandomUser API ----------------------------------
# ------------------------------------------------------------------------------------------
import logging
from dataclasses import replace
from typing import Any, Optional, Tuple

import requests
from pydantic import ValidationError

from . import formatters
from .config import Settings, load_settings
from .errors import ApiError, EmptyResultsError
from .models import FormatOptions, RandomUserResponse, UserRecord
from .params import OptionsLike, QueryParams, normalize_params, single_user_params

logger = logging.getLogger(__name__)

USERS_PATH = "/api/"


class HttpClient:
    """
    Thin wrapper around a requests.Session: base URL, timeout, default headers
    and the translation of transport failures into ApiError. No retries.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        if self.settings.headers:
            self.session.headers.update(self.settings.headers)

    def get(self, path: str, params: Optional[QueryParams] = None) -> Any:
        payload, _ = self.get_with_response(path, params)
        return payload

    def get_with_response(self, path: str, params: Optional[QueryParams] = None) -> Tuple[Any, requests.Response]:
        # Returns (decoded JSON, response object). The response is useful for status codes, headers, etc.
        url = self.settings.base_url + path
        try:
            resp = self.session.get(url, params=params, timeout=self.settings.timeout)
            # Fail fast on 4xx/5xx instead of handing back an error page as data.
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise ApiError.from_request_exception(exc) from exc

        logger.debug("GET %s params=%s -> %s", url, params, resp.status_code)
        try:
            return resp.json(), resp
        except ValueError as exc:
            raise ApiError("INVALID_RESPONSE", f"response from {url} is not valid JSON") from exc

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class UserService:
    """User operations on top of an HttpClient."""

    def __init__(self, http: HttpClient):
        self.http = http

    def get_users(self, options: OptionsLike = None) -> RandomUserResponse:
        response, _ = self._fetch(normalize_params(options))
        return response

    def get_users_with_response(self, options: OptionsLike = None) -> Tuple[RandomUserResponse, requests.Response]:
        return self._fetch(normalize_params(options))

    def get_random_user(self, options: OptionsLike = None) -> UserRecord:
        response, _ = self._fetch(single_user_params(options))
        if not response.results:
            raise EmptyResultsError(details={"info": response.info.model_dump()})
        return response.results[0]

    def _fetch(self, params: QueryParams) -> Tuple[RandomUserResponse, requests.Response]:
        try:
            payload, resp = self.http.get_with_response(USERS_PATH, params)
        except ApiError:
            logger.exception("Error fetching users")
            raise
        try:
            return RandomUserResponse.model_validate(payload), resp
        except ValidationError as exc:
            raise ApiError("INVALID_RESPONSE", "response does not match the RandomUser schema",
                           {"errors": exc.errors(include_url=False)}) from exc

    def get_full_name(self, user: UserRecord) -> str:
        return formatters.get_full_name(user)

    def get_formatted_address(self, user: UserRecord) -> str:
        return formatters.get_formatted_address(user)

    def format_date_of_birth(self, user: UserRecord, options: Optional[FormatOptions] = None) -> str:
        return formatters.format_date_of_birth(user, options)


class RandomUserClient:
    """
    Entry point for callers:

        with RandomUserClient() as client:
            user = client.get_random_user({"nat": ["us", "gb"]})
            print(client.get_full_name(user))
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings()
        self.http = HttpClient(self.settings, session=session)
        self.users = UserService(self.http)

    def get_users(self, options: OptionsLike = None) -> RandomUserResponse:
        return self.users.get_users(options)

    def get_users_with_response(self, options: OptionsLike = None) -> Tuple[RandomUserResponse, requests.Response]:
        return self.users.get_users_with_response(options)

    def get_random_user(self, options: OptionsLike = None) -> UserRecord:
        return self.users.get_random_user(options)

    def get_full_name(self, user: UserRecord) -> str:
        return self.users.get_full_name(user)

    def get_formatted_address(self, user: UserRecord) -> str:
        return self.users.get_formatted_address(user)

    def format_date_of_birth(self, user: UserRecord, options: Optional[FormatOptions] = None) -> str:
        return self.users.format_date_of_birth(user, options)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "RandomUserClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def fetch_users(options: OptionsLike = None, timeout: Optional[float] = None) -> RandomUserResponse:
    settings = load_settings()
    if timeout is not None:
        settings = replace(settings, timeout=timeout)
    with RandomUserClient(settings) as client:
        return client.get_users(options)


def fetch_random_user(options: OptionsLike = None, timeout: Optional[float] = None) -> UserRecord:
    settings = load_settings()
    if timeout is not None:
        settings = replace(settings, timeout=timeout)
    with RandomUserClient(settings) as client:
        return client.get_random_user(options)
