"""Pytest configuration and fixtures."""

import copy
import json

import pytest
import requests

from randomuser.client import RandomUserClient
from randomuser.config import Settings
from randomuser.models import UserRecord

SAMPLE_USER = {
    "gender": "male",
    "name": {"title": "Mr", "first": "John", "last": "Doe"},
    "location": {
        "street": {"number": 123, "name": "Main St"},
        "city": "New York",
        "state": "NY",
        "country": "USA",
        "postcode": "10001",
        "coordinates": {"latitude": "40.7128", "longitude": "-74.0060"},
        "timezone": {"offset": "-4:00", "description": "Eastern Time"},
    },
    "email": "john.doe@example.com",
    "login": {
        "uuid": "1234",
        "username": "johndoe",
        "password": "password",
        "salt": "salt",
        "md5": "md5",
        "sha1": "sha1",
        "sha256": "sha256",
    },
    "dob": {"date": "1990-01-01T00:00:00.000Z", "age": 32},
    "registered": {"date": "2010-01-01T00:00:00.000Z", "age": 12},
    "phone": "123-456-7890",
    "cell": "098-765-4321",
    "id": {"name": "SSN", "value": "123-45-6789"},
    "picture": {
        "large": "https://randomuser.me/api/portraits/men/1.jpg",
        "medium": "https://randomuser.me/api/portraits/med/men/1.jpg",
        "thumbnail": "https://randomuser.me/api/portraits/thumb/men/1.jpg",
    },
    "nat": "US",
}


def make_payload(*users, seed="abc", page=1):
    return {
        "results": list(users),
        "info": {"seed": seed, "results": len(users), "page": page, "version": "1.4"},
    }


def make_response(status_code=200, body=None, reason="OK"):
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.url = "https://randomuser.me/api/"
    resp.encoding = "utf-8"
    resp._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return resp


class FakeSession:
    """Stands in for requests.Session: records every GET and replays queued responses."""

    def __init__(self, *responses):
        self.headers = {}
        self.calls = []
        self.responses = list(responses)
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


@pytest.fixture
def user_dict() -> dict:
    return copy.deepcopy(SAMPLE_USER)


@pytest.fixture
def user(user_dict) -> UserRecord:
    return UserRecord.model_validate(user_dict)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(base_url="https://randomuser.me", timeout=5.0, data_dir=tmp_path / "data")


@pytest.fixture
def fake_client(settings):
    """Build a RandomUserClient whose session replays the given responses."""

    def _build(*responses):
        session = FakeSession(*responses)
        return RandomUserClient(settings, session=session), session

    return _build
