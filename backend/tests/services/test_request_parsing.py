"""Request Parsing — lenient query/path parsing and body decoding, no HTTP."""

import logging

import pytest

from app.api.request_parsing import (
    decode_auth_request, decode_user_payload, parse_filter, parse_int,
    parse_optional_int, parse_page,
)
from app.core.errors import ParseError


@pytest.mark.parametrize("raw, expected", [
    ("7", 7), ("-2", -2), ("abc", 0), ("", 0), (None, 0), ("1.5", 0),
    (" 7", 0), ("7 ", 0), ("1_0", 0), ("\u0663", 0), ("0x10", 0),
    ("+5", 5), ("9223372036854775807", 9223372036854775807),
    ("9223372036854775808", 0), ("-9223372036854775809", 0),
    ("99999999999999999999", 0),
])
def test_parse_int_falls_back_to_default(raw, expected):
    assert parse_int(raw, 0) == expected


def test_parse_optional_int():
    assert parse_optional_int("42") == 42
    assert parse_optional_int("forty") is None
    assert parse_optional_int("") is None
    assert parse_optional_int(None) is None
    assert parse_optional_int("1_0") is None
    assert parse_optional_int("99999999999999999999") is None
    assert parse_optional_int("-9223372036854775808") == -(2 ** 63)


def test_parse_page_defaults_and_offset():
    page = parse_page(None, None)
    assert (page.page, page.limit, page.offset) == (1, 10, 0)

    page = parse_page("3", "5")
    assert (page.page, page.limit, page.offset) == (3, 5, 10)

    page = parse_page("-1", "0")
    assert (page.page, page.limit) == (1, 10)

    page = parse_page("99999999999999999999", "1_0")
    assert (page.page, page.limit, page.offset) == (1, 10, 0)


def test_parse_filter_treats_empty_values_as_absent():
    f = parse_filter("", "nope")
    assert f.name is None
    assert f.age is None

    f = parse_filter("John", "30")
    assert (f.name, f.age) == ("John", 30)


def test_decode_user_payload_reads_fields_and_drops_id():
    payload = decode_user_payload(
        b'{"id": 5, "name": "John", "email": "j@example.com", "age": 30}',
    )
    assert (payload.name, payload.email, payload.age) == ("John", "j@example.com", 30)
    assert not hasattr(payload, "id")


@pytest.mark.parametrize("raw", [b"", b"nope", b"[]", b'{"age": "old"}'])
def test_decode_user_payload_malformed_yields_empty_user(raw):
    payload = decode_user_payload(raw)
    assert (payload.name, payload.email, payload.age) == ("", "", 0)


def test_decode_user_payload_logs_first_error_type(caplog):
    with caplog.at_level(logging.DEBUG, logger="app.api.request_parsing"):
        decode_user_payload(b"{not json")
    assert "json_invalid" in caplog.text
    assert "{not json" not in caplog.text


def test_decode_auth_request_defaults_missing_fields():
    auth = decode_auth_request(b'{"username": "user"}')
    assert (auth.username, auth.password) == ("user", "")


def test_decode_auth_request_malformed_raises_parse_error():
    with pytest.raises(ParseError) as exc_info:
        decode_auth_request(b"{oops")
    assert exc_info.value.http_status == 400
