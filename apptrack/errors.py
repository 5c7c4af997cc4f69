"""Exceptions raised by the record model and the company store."""

from __future__ import annotations


class AppTrackError(Exception):
    """Base class for every error raised by apptrack."""


class InvalidFormatError(AppTrackError, ValueError):
    """Input text does not match the vocabulary of a value type."""


class MissingFieldError(AppTrackError, ValueError):
    """A required Company field was absent."""

    def __init__(self, field: str):
        super().__init__(f"Missing required company field: {field}")
        self.field = field


class PreconditionViolation(AppTrackError, ValueError):
    """An operation received None where a concrete value is required."""


class UnmodifiableError(AppTrackError, TypeError):
    """Attempt to mutate a read-only view."""


class CompanyNotFoundError(AppTrackError, LookupError):
    """The requested company is not in the store."""


def require_not_none(value, what: str):
    """Return ``value`` unchanged, raising PreconditionViolation if it is None."""
    if value is None:
        raise PreconditionViolation(f"{what} must not be None")
    return value
