"""Unit tests for the guest e-mail roster."""

import pytest

from planner.errors import ErrorCode, ValidationError
from planner.services.roster import add_email, normalize_email, remove_email, validate_email


@pytest.mark.parametrize(
    "email",
    ["a@b.com", "jane.doe@example.com.br", "x+tag@mail.co", "a@b.c"],
)
def test_validate_accepts(email):
    assert validate_email(email)


@pytest.mark.parametrize(
    "email",
    ["", "plainaddress", "a@b", "a@b.", "@b.com", "a@.com", "a b@c.com", "a@@b.com", "a@b .com"],
)
def test_validate_rejects(email):
    assert not validate_email(email)


def test_add_appends_in_order():
    roster = add_email((), "a@b.com")
    roster = add_email(roster, "c@d.com")
    assert roster == ("a@b.com", "c@d.com")


def test_add_invalid_email():
    with pytest.raises(ValidationError) as exc_info:
        add_email((), "not-an-email")
    assert exc_info.value.code == ErrorCode.INVALID_EMAIL


@pytest.mark.parametrize("email", ["a@b.com", "guest@trip.io", "x.y@z.org"])
def test_add_twice_is_duplicate(email):
    roster = add_email((), email)
    with pytest.raises(ValidationError) as exc_info:
        add_email(roster, email)
    assert exc_info.value.code == ErrorCode.DUPLICATE_EMAIL


def test_add_does_not_mutate_input():
    roster = ("a@b.com",)
    add_email(roster, "c@d.com")
    assert roster == ("a@b.com",)


def test_normalized_case_variants_are_duplicates():
    roster = add_email((), normalize_email("a@b.com"))
    with pytest.raises(ValidationError) as exc_info:
        add_email(roster, normalize_email("A@B.COM"))
    assert exc_info.value.code == ErrorCode.DUPLICATE_EMAIL


def test_add_is_case_sensitive_without_normalization():
    assert add_email(("a@b.com",), "A@B.COM") == ("a@b.com", "A@B.COM")


def test_normalize_strips_whitespace():
    assert normalize_email("  Guest@Example.COM ") == "guest@example.com"


def test_remove_existing():
    assert remove_email(("a@b.com", "c@d.com"), "a@b.com") == ("c@d.com",)


def test_remove_absent_is_idempotent():
    roster = ("a@b.com",)
    once = remove_email(roster, "x@y.com")
    twice = remove_email(once, "x@y.com")
    assert once == twice == roster
