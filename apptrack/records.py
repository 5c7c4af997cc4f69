"""Field-by-field mapping between Company values and plain dicts.

Storage layers serialize companies through ``company_to_dict`` and rebuild
them with ``company_from_dict``. ``load_companies`` reads a YAML seed file:

    companies:
      - name: Acme
        phone: "91234567"
        email: hr@acme.com
        role: SWE
        deadline: 2024-01-01
        status: PA
        recruiter_name: Jane Doe
        tags: [remote]
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from apptrack.errors import InvalidFormatError
from apptrack.models import COMPANY_FIELDS, Company

logger = logging.getLogger("apptrack")


def company_to_dict(company: Company) -> dict[str, Any]:
    return {
        "name": str(company.name),
        "phone": str(company.phone),
        "email": str(company.email),
        "role": str(company.role),
        "deadline": str(company.deadline),
        "status": company.status.code,
        "recruiter_name": str(company.recruiter_name),
        "tags": sorted(str(tag) for tag in company.tags),
    }


def company_from_dict(raw: dict[str, Any]) -> Company:
    """Rebuild a Company. Missing keys raise MissingFieldError; tags default to none."""
    phone = raw.get("phone")
    if phone is not None and not isinstance(phone, str):
        # YAML reads 01234567 as octal and drops leading zeros
        raise InvalidFormatError(
            f"Phone {phone!r} was not read as text; quote it, e.g. phone: \"01234567\""
        )

    values = {name: _as_text(raw.get(name)) for name in COMPANY_FIELDS if name != "tags"}
    tags = raw.get("tags")
    if isinstance(tags, str):
        tags = [tags]
    return Company.create(
        tags=[str(t) for t in tags] if tags else [],
        **values,
    )


def load_companies(path: Path | str) -> list[Company]:
    """Load every company listed under ``companies:`` in a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Company data not found: {path}\n"
            "Point data.companies_file in config.yaml at an existing YAML file."
        )

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    entries = raw.get("companies") or []
    companies = [company_from_dict(entry) for entry in entries]
    logger.info("Loaded %d companies from %s.", len(companies), path)
    return companies


def _as_text(value: Any) -> str | None:
    # YAML turns unquoted dates into date values
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
