"""Domain Types — verifies identity wrappers, bounds, and value objects.

Tests:
    - UserId wraps int
    - PageRequest clamps non-positive values to defaults and computes offset
    - UserFilter defaults impose no constraint
    - ValidationRule serializes to its string value
"""

from app.core.domain_types import (
    DEFAULT_LIMIT, DEFAULT_PAGE, INT64_MAX, PageRequest, UserFilter, UserId,
    ValidationRule,
)


def test_user_id_wraps_int():
    assert UserId(5) == 5


def test_page_request_defaults():
    page = PageRequest()
    assert (page.page, page.limit, page.offset) == (DEFAULT_PAGE, DEFAULT_LIMIT, 0)


def test_page_request_offset():
    assert PageRequest(page=2, limit=5).offset == 5
    assert PageRequest(page=4, limit=25).offset == 75


def test_page_request_non_positive_falls_back():
    page = PageRequest(page=0, limit=-5)
    assert (page.page, page.limit) == (1, 10)


def test_user_filter_defaults_to_no_constraint():
    f = UserFilter()
    assert f.name is None and f.age is None


def test_validation_rule_values():
    assert {r.value for r in ValidationRule} == {"required", "length", "email", "range"}


def test_page_request_offset_stays_bindable():
    page = PageRequest(page=INT64_MAX, limit=50)
    assert page.offset == INT64_MAX
