from __future__ import annotations

from typing import Any, Callable

import pytest

from apptrack.models import Company

DEFAULTS: dict[str, Any] = {
    "name": "Acme",
    "phone": "91234567",
    "email": "hr@acme.com",
    "role": "SWE",
    "deadline": "2024-01-01",
    "status": "PA",
    "recruiter_name": "Jane Doe",
    "tags": ["remote"],
}


@pytest.fixture
def make_company() -> Callable[..., Company]:
    def build(**overrides: Any) -> Company:
        return Company.create(**{**DEFAULTS, **overrides})

    return build


@pytest.fixture
def acme(make_company: Callable[..., Company]) -> Company:
    return make_company()
