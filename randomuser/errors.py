"""Exceptions raised by the RandomUser client."""

from typing import Any, Dict, Optional

import requests


class RandomUserError(Exception):
    """Base class for every error raised by this package."""


class ApiError(RandomUserError):
    """A failed API call: non-2xx status, network failure or an unreadable body."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}

    @classmethod
    def from_request_exception(cls, exc: requests.RequestException) -> "ApiError":
        resp = exc.response
        if resp is None:
            # No response at all: DNS failure, refused connection, timeout...
            return cls("UNKNOWN", str(exc) or "Unknown error occurred")

        body: Any = None
        try:
            body = resp.json()
        except ValueError:
            pass

        message = resp.reason or str(exc) or "Unknown error occurred"
        details: Dict[str, Any] = {}
        if isinstance(body, dict):
            message = body.get("message") or body.get("error") or message
            if isinstance(body.get("details"), dict):
                details = body["details"]
        return cls(str(resp.status_code), str(message), details)


class EmptyResultsError(ApiError, IndexError):
    """The API answered a single-user request with an empty results list."""

    def __init__(self, message: str = "API returned no results", details: Optional[Dict[str, Any]] = None):
        super().__init__("EMPTY_RESULTS", message, details)
