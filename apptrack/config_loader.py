"""Load and validate the YAML configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv


@dataclass
class DataSettings:
    companies_file: Path = Path("companies.yaml")
    log_dir: Path = Path("data")


@dataclass
class FilterSettings:
    keywords: list[str] = field(default_factory=list)
    statuses: list[str] = field(default_factory=lambda: ["any"])
    tags: list[str] = field(default_factory=list)
    deadline_before: Optional[date] = None


@dataclass
class Config:
    data: DataSettings
    filters: FilterSettings
    reject_duplicates: bool = True


def load_config(config_path: Path) -> Config:
    """Load config.yaml and .env, validate fields, return Config."""
    load_dotenv()

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and fill in your details."
        )

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    # Parse data locations; the environment wins over the file
    data = raw.get("data", {}) or {}
    companies_file = os.getenv("APPTRACK_DATA_FILE") or data.get("companies_file", "companies.yaml")
    data_settings = DataSettings(
        companies_file=Path(companies_file),
        log_dir=Path(data.get("log_dir", "data")),
    )

    # Parse filters
    filt = raw.get("filters", {}) or {}
    filter_settings = FilterSettings(
        keywords=[str(k) for k in filt.get("keywords") or []],
        statuses=[str(s) for s in filt.get("statuses") or ["any"]],
        tags=[str(t) for t in filt.get("tags") or []],
        deadline_before=_parse_date(filt.get("deadline_before")),
    )

    settings = raw.get("settings", {}) or {}

    return Config(
        data=data_settings,
        filters=filter_settings,
        reject_duplicates=bool(settings.get("reject_duplicates", True)),
    )


def _parse_date(value) -> Optional[date]:
    if value in (None, ""):
        return None
    # PyYAML already converts unquoted ISO dates
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValueError(
            f"Invalid filters.deadline_before: {value!r} (expected YYYY-MM-DD)"
        ) from None
