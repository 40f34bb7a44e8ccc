"""
Typed, immutable views of the RandomUser API payload.

The API lets callers include/exclude whole blocks (inc/exc), so every block
of a UserRecord is optional when decoding.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

from .config import DEFAULT_DATE_FORMAT


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Name(_Frozen):
    title: str = ""
    first: str = ""
    last: str = ""


class Street(_Frozen):
    number: Union[int, str] = ""
    name: str = ""


class Coordinates(_Frozen):
    latitude: str
    longitude: str


class Timezone(_Frozen):
    offset: str
    description: str


class Location(_Frozen):
    street: Street = Street()
    city: str = ""
    state: str = ""
    country: str = ""
    postcode: Union[int, str] = ""
    coordinates: Optional[Coordinates] = None
    timezone: Optional[Timezone] = None


class Login(_Frozen):
    uuid: str
    username: str
    password: str
    salt: str
    md5: str
    sha1: str
    sha256: str


class DatedAge(_Frozen):
    # dob and registered share this shape: ISO-8601 timestamp + age in years
    date: str
    age: int


class IdDocument(_Frozen):
    name: str = ""
    value: Optional[str] = None


class Picture(_Frozen):
    large: str
    medium: str
    thumbnail: str


class UserRecord(_Frozen):
    gender: Optional[str] = None
    name: Optional[Name] = None
    location: Optional[Location] = None
    email: Optional[str] = None
    login: Optional[Login] = None
    dob: Optional[DatedAge] = None
    registered: Optional[DatedAge] = None
    phone: Optional[str] = None
    cell: Optional[str] = None
    id: Optional[IdDocument] = None
    picture: Optional[Picture] = None
    nat: Optional[str] = None


class ResponseInfo(_Frozen):
    seed: str
    results: int
    page: int
    version: str


class RandomUserResponse(_Frozen):
    results: List[UserRecord]
    info: ResponseInfo


class FormatOptions(_Frozen):
    date_format: str = DEFAULT_DATE_FORMAT
