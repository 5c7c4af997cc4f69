"""Validated value types for the identity fields of a company.

Each type wraps a single string and refuses to exist in an invalid state:
construction either succeeds or raises InvalidFormatError carrying the
type's MESSAGE_CONSTRAINTS.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from apptrack.errors import InvalidFormatError, require_not_none

_ALNUM = r"[^\W_]+"


@dataclass(frozen=True)
class _TextField:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r".*")

    def __post_init__(self) -> None:
        require_not_none(self.value, type(self).__name__)
        if not self.is_valid(self.value):
            raise InvalidFormatError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, text: object) -> bool:
        """Return True if ``text`` would construct a valid value. Never raises."""
        return isinstance(text, str) and cls.PATTERN.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name(_TextField):
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")


@dataclass(frozen=True)
class RecruiterName(_TextField):
    MESSAGE_CONSTRAINTS = (
        "Recruiter names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")


@dataclass(frozen=True)
class Phone(_TextField):
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    PATTERN = re.compile(r"\d{3,}", re.ASCII)


@dataclass(frozen=True)
class Email(_TextField):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by "
        "hyphens, if any."
    )
    PATTERN = re.compile(
        rf"{_ALNUM}([+_.-]{_ALNUM})*@({_ALNUM}(-{_ALNUM})*\.)*{_ALNUM}(-{_ALNUM})*"
    )

    @classmethod
    def is_valid(cls, text: object) -> bool:
        if not super().is_valid(text):
            return False
        domain = text.rsplit("@", 1)[1]
        return len(domain.rsplit(".", 1)[-1]) >= 2


@dataclass(frozen=True)
class Role(_TextField):
    MESSAGE_CONSTRAINTS = "Roles can take any values, and it should not be blank"
    # First character must not be whitespace, so " " is rejected.
    PATTERN = re.compile(r"\S.*", re.DOTALL)


@dataclass(frozen=True)
class Deadline(_TextField):
    MESSAGE_CONSTRAINTS = "Deadlines should be valid calendar dates in the format YYYY-MM-DD"
    PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

    @classmethod
    def is_valid(cls, text: object) -> bool:
        if not super().is_valid(text):
            return False
        try:
            date.fromisoformat(text)
        except ValueError:
            return False
        return True

    @property
    def date(self) -> date:
        return date.fromisoformat(self.value)


@dataclass(frozen=True)
class Tag(_TextField):
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    PATTERN = re.compile(r"[A-Za-z0-9]+")
