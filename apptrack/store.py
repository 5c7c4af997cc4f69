"""In-memory company store with duplicate detection.

Maintains two views of the same records:
  - the full collection: every tracked company, in insertion order
  - the filtered view: the companies accepted by the last applied
    predicate, in full-collection order

The store never rejects an add on its own. Callers check ``has_company``
(name only) or ``get_duplicate_company`` (name, role and deadline) first and
apply their own conflict policy.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional

from apptrack.errors import CompanyNotFoundError, require_not_none
from apptrack.filters import SHOW_ALL
from apptrack.models import Company

logger = logging.getLogger("apptrack")

CompanyPredicate = Callable[[Company], bool]


class CompanyStore:
    """Holds the full company collection and the currently filtered view."""

    def __init__(self, companies: Iterable[Company] = ()):
        self._companies: list[Company] = []
        for company in companies:
            self._companies.append(require_not_none(company, "Company"))

        self._predicate: CompanyPredicate = SHOW_ALL
        self._filtered: list[Company] = list(self._companies)
        # Not owned: resolves to None once the record leaves the full collection
        self._current_viewed: Optional[Company] = None

    @property
    def companies(self) -> tuple[Company, ...]:
        return tuple(self._companies)

    @property
    def filtered_companies(self) -> tuple[Company, ...]:
        return tuple(self._filtered)

    def __len__(self) -> int:
        return len(self._companies)

    def __iter__(self) -> Iterator[Company]:
        return iter(tuple(self._companies))

    def __contains__(self, company: object) -> bool:
        return company in self._companies

    # Duplicate queries

    def has_company(self, candidate: Company) -> bool:
        """Return True if a stored company has the same name as ``candidate``."""
        require_not_none(candidate, "Company")
        return any(company.is_same_company(candidate) for company in self._companies)

    def get_duplicate_company(self, candidate: Company) -> Optional[Company]:
        """Return the stored company that conflicts with ``candidate``, if any.

        A conflict is the very same object, or else the first record sharing
        name, role and deadline. Other fields are ignored, so re-adding a
        company under a different role or deadline is not a conflict.
        """
        require_not_none(candidate, "Company")

        for company in self._companies:
            if company is candidate:
                return candidate

        for company in self._companies:
            if (
                company.name == candidate.name
                and company.role == candidate.role
                and company.deadline == candidate.deadline
            ):
                logger.info("Duplicate found for %s: %s", candidate.name, company)
                return company
        return None

    def get_duplicate_index_from_full_list(self, company: Company) -> int:
        """Position of ``company`` in the full collection by full equality, or -1."""
        return _index_of(self._companies, company)

    def get_duplicate_index_from_filtered_list(self, company: Company) -> int:
        """Position of ``company`` in the filtered view by full equality, or -1."""
        return _index_of(self._filtered, company)

    # Mutations

    def add_company(self, company: Company) -> None:
        """Append ``company`` to the full collection.

        The filtered view is left as is; call ``refresh_filtered_companies``
        to re-derive it.
        """
        require_not_none(company, "Company")
        self._companies.append(company)
        logger.debug("Added %s (%d total)", company.name, len(self._companies))

    def delete_company(self, company: Company) -> None:
        """Remove the first record fully equal to ``company`` from both views."""
        require_not_none(company, "Company")
        index = _index_of(self._companies, company)
        if index == -1:
            raise CompanyNotFoundError(f"Company not found: {company.name}")

        removed = self._companies.pop(index)
        self._filtered = [c for c in self._filtered if c is not removed]
        if self._current_viewed is removed:
            self._current_viewed = None
        logger.debug("Deleted %s (%d total)", removed.name, len(self._companies))

    def set_company(self, target: Company, edited: Company) -> None:
        """Replace ``target`` with ``edited`` in place in both views."""
        require_not_none(target, "Company")
        require_not_none(edited, "Company")
        index = _index_of(self._companies, target)
        if index == -1:
            raise CompanyNotFoundError(f"Company not found: {target.name}")

        replaced = self._companies[index]
        self._companies[index] = edited
        self._filtered = [edited if c is replaced else c for c in self._filtered]
        if self._current_viewed is replaced:
            self._current_viewed = edited
        logger.debug("Replaced %s with %s", replaced.name, edited.name)

    # Filtered view

    def update_filtered_companies(self, predicate: CompanyPredicate) -> None:
        """Re-derive the filtered view from the full collection."""
        self._predicate = require_not_none(predicate, "Predicate")
        self._filtered = [c for c in self._companies if self._predicate(c)]
        logger.debug(
            "Filtered view: %d of %d companies", len(self._filtered), len(self._companies)
        )

    def refresh_filtered_companies(self) -> None:
        """Re-apply the last predicate, e.g. after ``add_company``."""
        self.update_filtered_companies(self._predicate)

    def show_all_companies(self) -> None:
        self.update_filtered_companies(SHOW_ALL)

    # Currently viewed company

    def set_current_viewed_company(self, company: Company) -> None:
        self._current_viewed = require_not_none(company, "Company")

    def get_current_viewed_company(self) -> Optional[Company]:
        viewed = self._current_viewed
        if viewed is not None and viewed not in self._companies:
            return None
        return viewed


def _index_of(companies: list[Company], company: Optional[Company]) -> int:
    try:
        return companies.index(company)
    except ValueError:
        return -1
