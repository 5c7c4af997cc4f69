"""Data models for application statuses and tracked companies."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Iterable, Optional

from apptrack.errors import (
    InvalidFormatError,
    MissingFieldError,
    UnmodifiableError,
    require_not_none,
)
from apptrack.fields import Deadline, Email, Name, Phone, RecruiterName, Role, Tag


class ApplicationStatus(Enum):
    PENDING_APPLICATION = ("PA", "PENDING APPLICATION")
    PENDING_INTERVIEW = ("PI", "PENDING INTERVIEW")
    PENDING_OUTCOME = ("PO", "PENDING OUTCOME")
    ACCEPTED = ("A", "ACCEPTED")
    REJECTED = ("R", "REJECTED")

    def __init__(self, code: str, description: str):
        self.code = code
        self.description = description

    def __str__(self) -> str:
        return self.code

    @classmethod
    def message_constraints(cls) -> str:
        valid = ", ".join(f"{s.code} ({s.description})" for s in cls)
        return f"Please enter a valid application status. Valid statuses are: {valid}"

    @classmethod
    def parse(cls, text: str) -> ApplicationStatus:
        """Return the status whose code matches ``text``, ignoring case.

        Surrounding whitespace is not stripped: " PA" is rejected.
        """
        require_not_none(text, "Application status")
        status = _STATUS_BY_CODE.get(text.upper()) if isinstance(text, str) else None
        if status is None:
            raise InvalidFormatError(cls.message_constraints())
        return status

    @classmethod
    def is_valid(cls, text: object) -> bool:
        return isinstance(text, str) and text.upper() in _STATUS_BY_CODE


_STATUS_BY_CODE = {status.code: status for status in ApplicationStatus}


class TagSet(frozenset):
    """Read-only set of tags. Every mutator raises UnmodifiableError."""

    def _reject(self, *args, **kwargs):
        raise UnmodifiableError("Tags of a company cannot be modified in place")

    add = remove = discard = pop = clear = update = _reject
    difference_update = intersection_update = symmetric_difference_update = _reject

    def __repr__(self) -> str:
        return f"TagSet({sorted(str(tag) for tag in self)!r})"


_FIELD_TYPES = {
    "name": Name,
    "phone": Phone,
    "email": Email,
    "role": Role,
    "deadline": Deadline,
    "status": ApplicationStatus,
    "recruiter_name": RecruiterName,
}


@dataclass(frozen=True)
class Company:
    """A tracked job application. Immutable; edits go through ``with_changes``.

    Two notions of equality apply:
      - ``==`` compares every field, tags as a set.
      - ``is_same_company`` compares names only and is the looser identity
        check used for simple duplicate detection.
    """

    name: Name
    phone: Phone
    email: Email
    role: Role
    deadline: Deadline
    status: ApplicationStatus
    recruiter_name: RecruiterName
    tags: TagSet

    def __post_init__(self) -> None:
        for field_name in tuple(_FIELD_TYPES) + ("tags",):
            if getattr(self, field_name) is None:
                raise MissingFieldError(field_name)
        # Raw text must go through the value types (see create)
        for field_name, field_type in _FIELD_TYPES.items():
            if not isinstance(getattr(self, field_name), field_type):
                raise InvalidFormatError(
                    f"Company field {field_name} must be a {field_type.__name__}, "
                    f"got {type(getattr(self, field_name)).__name__}"
                )
        tags = TagSet(self.tags)
        for tag in tags:
            if not isinstance(tag, Tag):
                raise InvalidFormatError(f"Company tags must be Tag values, got {tag!r}")
        object.__setattr__(self, "tags", tags)

    @classmethod
    def create(
        cls,
        name: Optional[str],
        phone: Optional[str],
        email: Optional[str],
        role: Optional[str],
        deadline: Optional[str],
        status: Optional[str],
        recruiter_name: Optional[str],
        tags: Optional[Iterable[str]],
    ) -> Company:
        """Build a Company from raw text, validating every field."""
        raw = {
            "name": name,
            "phone": phone,
            "email": email,
            "role": role,
            "deadline": deadline,
            "status": status,
            "recruiter_name": recruiter_name,
            "tags": tags,
        }
        for field_name, value in raw.items():
            if value is None:
                raise MissingFieldError(field_name)

        return cls(
            name=Name(name),
            phone=Phone(phone),
            email=Email(email),
            role=Role(role),
            deadline=Deadline(deadline),
            status=ApplicationStatus.parse(status),
            recruiter_name=RecruiterName(recruiter_name),
            tags=TagSet(Tag(t) for t in tags),
        )

    def is_same_company(self, other: Optional[Company]) -> bool:
        if other is self:
            return True
        return isinstance(other, Company) and other.name == self.name

    def with_changes(self, **changes) -> Company:
        """Return a copy with the given fields replaced.

        Replacements must already be value types; raw text raises
        InvalidFormatError.
        """
        return replace(self, **changes)

    def __str__(self) -> str:
        tags = ", ".join(sorted(str(tag) for tag in self.tags))
        return (
            f"Company{{name={self.name}, role={self.role}, status={self.status}, "
            f"deadline={self.deadline}, recruiterName={self.recruiter_name}, "
            f"phone={self.phone}, email={self.email}, tags=[{tags}]}}"
        )


COMPANY_FIELDS = tuple(f.name for f in fields(Company))
