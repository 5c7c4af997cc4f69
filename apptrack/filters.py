"""Predicates that select the filtered view of a company store.

Config and CLI values name statuses either by code (PA, PI, ...) or by a
broad alias:

  pending -> PA, PI, PO
  open    -> PA, PI, PO
  closed  -> A, R
  any/all -> every status
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Optional

from apptrack.models import ApplicationStatus, Company

_PENDING_CODES = ("PA", "PI", "PO")

# Maps config status aliases to application status codes.
STATUS_ALIAS_MAP = {
    "pending": _PENDING_CODES,
    "open": _PENDING_CODES,
    "closed": ("A", "R"),
    "any": None,
    "all": None,
}


def SHOW_ALL(company: Company) -> bool:
    return True


@dataclass(frozen=True)
class NameContainsKeywords:
    """Matches when any keyword is a whole word of the company name, ignoring case."""

    keywords: tuple[str, ...]

    def __call__(self, company: Company) -> bool:
        words = {word.lower() for word in str(company.name).split()}
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True)
class StatusIn:
    statuses: frozenset[ApplicationStatus]

    def __call__(self, company: Company) -> bool:
        return company.status in self.statuses


@dataclass(frozen=True)
class HasAnyTag:
    tags: frozenset[str]

    def __call__(self, company: Company) -> bool:
        wanted = {tag.lower() for tag in self.tags}
        return any(str(tag).lower() in wanted for tag in company.tags)


@dataclass(frozen=True)
class DeadlineBefore:
    day: date

    def __call__(self, company: Company) -> bool:
        return company.deadline.date < self.day


def all_of(*predicates: Callable[[Company], bool]) -> Callable[[Company], bool]:
    """Combine predicates; the result accepts a company only if all of them do."""
    if not predicates:
        return SHOW_ALL

    def combined(company: Company) -> bool:
        return all(predicate(company) for predicate in predicates)

    return combined


def resolve_statuses(entries: Iterable[str]) -> Optional[frozenset[ApplicationStatus]]:
    """Map status codes and aliases to statuses. None means no restriction."""
    resolved: set[ApplicationStatus] = set()
    for entry in entries:
        key = entry.lower()
        if key in STATUS_ALIAS_MAP:
            codes = STATUS_ALIAS_MAP[key]
            if codes is None:
                return None
            resolved.update(ApplicationStatus.parse(code) for code in codes)
        else:
            resolved.add(ApplicationStatus.parse(entry))
    return frozenset(resolved) if resolved else None


def build_company_filter(
    keywords: list[str] | None = None,
    statuses: list[str] | None = None,
    tags: list[str] | None = None,
    deadline_before: date | None = None,
) -> Callable[[Company], bool]:
    """Construct the combined filter predicate from config or CLI values.

    Empty criteria are skipped, so calling with no arguments shows everything.
    Raises InvalidFormatError for an unknown status entry.
    """
    predicates: list[Callable[[Company], bool]] = []

    if keywords:
        predicates.append(NameContainsKeywords(tuple(keywords)))

    if statuses:
        resolved = resolve_statuses(statuses)
        if resolved is not None:
            predicates.append(StatusIn(resolved))

    if tags:
        predicates.append(HasAnyTag(frozenset(tags)))

    if deadline_before is not None:
        predicates.append(DeadlineBefore(deadline_before))

    return all_of(*predicates)
