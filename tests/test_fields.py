from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from apptrack.errors import InvalidFormatError, PreconditionViolation
from apptrack.fields import Deadline, Email, Name, Phone, RecruiterName, Role, Tag


@pytest.mark.parametrize("text", ["Acme", "Acme Corp 2", "3M"])
def test_name_accepts_alphanumeric_and_spaces(text: str) -> None:
    assert Name.is_valid(text)
    assert str(Name(text)) == text


@pytest.mark.parametrize("text", ["", " ", " Acme", "Acme & Co", "Acme*"])
def test_name_rejects_invalid(text: str) -> None:
    assert not Name.is_valid(text)
    with pytest.raises(InvalidFormatError, match="alphanumeric"):
        Name(text)


def test_none_is_a_precondition_violation() -> None:
    with pytest.raises(PreconditionViolation):
        Name(None)
    assert not Name.is_valid(None)


def test_phone_needs_three_digits() -> None:
    assert Phone.is_valid("911")
    assert not Phone.is_valid("91")
    assert not Phone.is_valid("9123 4567")
    assert not Phone.is_valid("+6591234567")


@pytest.mark.parametrize(
    "text",
    ["hr@acme.com", "first.last+jobs@mail.acme-corp.io", "a@bc", "a_b@x.co"],
)
def test_email_accepts_valid(text: str) -> None:
    assert Email.is_valid(text)


@pytest.mark.parametrize(
    "text",
    ["", "hr", "@acme.com", "hr@", ".hr@acme.com", "hr.@acme.com", "hr@acme.c", "hr@-acme.com"],
)
def test_email_rejects_invalid(text: str) -> None:
    assert not Email.is_valid(text)


def test_role_rejects_blank_and_leading_whitespace() -> None:
    assert Role.is_valid("Software Engineer, Backend")
    assert not Role.is_valid("")
    assert not Role.is_valid("  SWE")


def test_deadline_must_be_a_real_iso_date() -> None:
    assert Deadline("2024-02-29").date == date(2024, 2, 29)
    assert not Deadline.is_valid("2023-02-29")
    assert not Deadline.is_valid("01-01-2024")
    assert not Deadline.is_valid("2024-1-1")
    with pytest.raises(InvalidFormatError, match="YYYY-MM-DD"):
        Deadline("tomorrow")


def test_tag_is_one_alphanumeric_word() -> None:
    assert Tag.is_valid("remote")
    assert not Tag.is_valid("full time")
    assert not Tag.is_valid("")


def test_value_types_are_immutable_and_compare_by_type_and_value() -> None:
    name = Name("Acme")
    with pytest.raises(FrozenInstanceError):
        name.value = "Globex"  # type: ignore[misc]

    assert name == Name("Acme")
    assert hash(name) == hash(Name("Acme"))
    assert name != RecruiterName("Acme")
