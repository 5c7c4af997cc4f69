from __future__ import annotations

from datetime import date

import pytest

from apptrack.errors import InvalidFormatError
from apptrack.filters import (
    SHOW_ALL,
    DeadlineBefore,
    HasAnyTag,
    NameContainsKeywords,
    build_company_filter,
    resolve_statuses,
)
from apptrack.models import ApplicationStatus


def test_name_keywords_match_whole_words_ignoring_case(make_company) -> None:
    company = make_company(name="Acme Robotics")
    assert NameContainsKeywords(("acme",))(company)
    assert NameContainsKeywords(("ROBOTICS", "globex"))(company)
    assert not NameContainsKeywords(("acm",))(company)


def test_tag_and_deadline_predicates(make_company) -> None:
    company = make_company(tags=["Remote", "fintech"], deadline="2024-01-01")
    assert HasAnyTag(frozenset({"remote"}))(company)
    assert not HasAnyTag(frozenset({"onsite"}))(company)
    assert DeadlineBefore(date(2024, 1, 2))(company)
    assert not DeadlineBefore(date(2024, 1, 1))(company)


def test_resolve_statuses_expands_aliases() -> None:
    assert resolve_statuses(["pending"]) == {
        ApplicationStatus.PENDING_APPLICATION,
        ApplicationStatus.PENDING_INTERVIEW,
        ApplicationStatus.PENDING_OUTCOME,
    }
    assert resolve_statuses(["closed", "pa"]) == {
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.PENDING_APPLICATION,
    }
    assert resolve_statuses(["A", "any"]) is None
    assert resolve_statuses([]) is None


def test_resolve_statuses_rejects_unknown() -> None:
    with pytest.raises(InvalidFormatError):
        resolve_statuses(["archived"])


def test_build_company_filter_combines_criteria(make_company) -> None:
    predicate = build_company_filter(
        keywords=["acme"],
        statuses=["pending"],
        tags=["remote"],
        deadline_before=date(2025, 1, 1),
    )
    assert predicate(make_company())
    assert not predicate(make_company(status="A"))
    assert not predicate(make_company(name="Globex"))
    assert not predicate(make_company(tags=[]))
    assert not predicate(make_company(deadline="2025-06-01"))


def test_empty_filter_shows_everything(make_company) -> None:
    assert build_company_filter() is SHOW_ALL
    assert build_company_filter(statuses=["any"]) is SHOW_ALL
    assert SHOW_ALL(make_company())
