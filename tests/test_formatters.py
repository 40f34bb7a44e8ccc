"""Tests for the user formatting helpers."""

import pytest

from randomuser.formatters import (
    INVALID_DATE,
    format_date,
    format_date_of_birth,
    format_registered_date,
    get_formatted_address,
    get_full_name,
)
from randomuser.models import FormatOptions, UserRecord


def _with(user_dict, **blocks):
    return UserRecord.model_validate({**user_dict, **blocks})


@pytest.mark.unit
def test_full_name(user):
    assert get_full_name(user) == "Mr John Doe"


@pytest.mark.unit
@pytest.mark.parametrize(
    "title, last, expected",
    [("", "Doe", "John Doe"), ("Mr", "", "Mr John"), ("", "", "John")],
)
def test_full_name_with_empty_edges(user_dict, title, last, expected):
    user = _with(user_dict, name={"title": title, "first": "John", "last": last})
    assert get_full_name(user) == expected


@pytest.mark.unit
def test_full_name_requires_name_block(user_dict):
    user_dict.pop("name")
    with pytest.raises(ValueError):
        get_full_name(UserRecord.model_validate(user_dict))


@pytest.mark.unit
def test_formatted_address(user):
    assert get_formatted_address(user) == "123 Main St, New York, NY, USA, 10001"


@pytest.mark.unit
def test_formatted_address_with_numeric_postcode(user_dict):
    user_dict["location"]["postcode"] = 10001
    assert get_formatted_address(UserRecord.model_validate(user_dict)) == "123 Main St, New York, NY, USA, 10001"


@pytest.mark.unit
def test_formatted_address_keeps_empty_slots(user_dict):
    user_dict["location"]["state"] = ""
    assert get_formatted_address(UserRecord.model_validate(user_dict)) == "123 Main St, New York, , USA, 10001"


@pytest.mark.unit
def test_dob_default_format(user):
    assert format_date_of_birth(user) == "01/01/1990"


@pytest.mark.unit
@pytest.mark.parametrize(
    "date_format, expected",
    [
        ("DD-MM-YYYY", "01-01-1990"),
        ("MM/DD/YY", "01/01/90"),
        ("YYYY-MM-DD", "1990-01-01"),
        ("M/D/YY", "1/1/90"),
    ],
)
def test_dob_custom_formats(user, date_format, expected):
    assert format_date_of_birth(user, FormatOptions(date_format=date_format)) == expected


@pytest.mark.unit
def test_dob_unpadded_tokens(user_dict):
    user = _with(user_dict, dob={"date": "1990-02-03T00:00:00.000Z", "age": 32})
    assert format_date_of_birth(user, FormatOptions(date_format="M/D/YYYY")) == "2/3/1990"


@pytest.mark.unit
def test_unpadded_iso_input_uses_the_general_parser():
    assert format_date("1990-2-3T00:00:00.000Z", "MM/DD/YYYY") == "02/03/1990"


@pytest.mark.unit
def test_dob_is_read_in_utc():
    # 23:30 at -05:00 is already the next day in UTC
    assert format_date("1990-12-31T23:30:00-05:00", "YYYY-MM-DD") == "1991-01-01"
    assert format_date("1990-06-15T00:00:00", "DD/MM/YYYY") == "15/06/1990"


@pytest.mark.unit
def test_each_token_replaced_once():
    assert format_date("1990-01-05T00:00:00Z", "DD DD") == "05 5D"


@pytest.mark.unit
def test_literal_characters_pass_through():
    assert format_date("2001-09-08T00:00:00Z", "born: DD.MM.YYYY!") == "born: 08.09.2001!"


@pytest.mark.unit
def test_two_digit_year_is_zero_padded():
    assert format_date("2005-03-04T00:00:00Z", "YY") == "05"


@pytest.mark.unit
@pytest.mark.parametrize("value", ["", "garbage", "1990-13-45T00:00:00Z"])
def test_invalid_dates(user_dict, value):
    user = _with(user_dict, dob={"date": value, "age": 0})
    assert format_date_of_birth(user) == INVALID_DATE
    assert format_date_of_birth(user, FormatOptions(date_format="DD-MM-YY")) == INVALID_DATE


@pytest.mark.unit
def test_missing_dob_block_is_invalid(user_dict):
    user_dict.pop("dob")
    assert format_date_of_birth(UserRecord.model_validate(user_dict)) == INVALID_DATE


@pytest.mark.unit
def test_registered_date(user):
    assert format_registered_date(user, FormatOptions(date_format="YYYY")) == "2010"


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("1990", "1990-01-01"),
        ("1990-05", "1990-05-01"),
        ("1990-05-17", "1990-05-17"),
        ("1990-2-3", "1990-02-03"),
    ],
)
def test_partial_iso_dates_start_at_the_first_day(value, expected):
    # missing month/day are the first one, never taken from today's date
    assert format_date(value, "YYYY-MM-DD") == expected


@pytest.mark.unit
@pytest.mark.parametrize("value", ["June", "Monday", "12", "10:30", "March 3rd", "3/4/1990"])
def test_text_without_an_iso_date_is_invalid(value):
    assert format_date(value, "YYYY-MM-DD") == INVALID_DATE


@pytest.mark.unit
@pytest.mark.parametrize("offset", ["+99:00", "+24:00", "-25:30"])
def test_out_of_range_offset_is_invalid(offset):
    assert format_date(f"1990-01-01T00:00:00{offset}", "YYYY-MM-DD") == INVALID_DATE


@pytest.mark.unit
def test_positive_offset_moves_back_a_day():
    assert format_date("1990-01-01T01:00:00+05:00", "YYYY-MM-DD") == "1989-12-31"
