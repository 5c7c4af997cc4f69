#!/usr/bin/env python3
"""apptrack - track job applications and catch duplicate entries.

Usage:
    python main.py                          # Load companies.yaml, show everything
    python main.py --find acme globex       # Filter by name keywords
    python main.py --status pending         # Filter by status code or alias
    python main.py --tag remote --verbose   # Filter by tag, debug logging
    python main.py --allow-duplicates       # Keep name/role/deadline conflicts
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from apptrack.config_loader import load_config
from apptrack.errors import AppTrackError
from apptrack.filters import build_company_filter
from apptrack.records import load_companies
from apptrack.store import CompanyStore
from apptrack.utils import setup_logging

logger = logging.getLogger("apptrack")


def seed_store(store: CompanyStore, companies, reject_duplicates: bool = True) -> int:
    """Add companies one by one, skipping conflicts. Returns the number skipped."""
    skipped = 0
    for company in companies:
        duplicate = store.get_duplicate_company(company)
        if duplicate is not None and reject_duplicates:
            logger.warning(
                "Skipping %s (%s, due %s): already tracked at position %d.",
                company.name,
                company.role,
                company.deadline,
                store.get_duplicate_index_from_full_list(duplicate) + 1,
            )
            skipped += 1
            continue
        if store.has_company(company):
            logger.info("%s is already tracked under another role or deadline.", company.name)
        store.add_company(company)
    return skipped


def run(args: argparse.Namespace) -> int:
    config = load_config(Path(args.config))
    setup_logging(verbose=args.verbose, log_dir=config.data.log_dir)

    data_path = Path(args.data) if args.data else config.data.companies_file
    companies = load_companies(data_path)

    store = CompanyStore()
    reject = config.reject_duplicates and not args.allow_duplicates
    skipped = seed_store(store, companies, reject_duplicates=reject)

    predicate = build_company_filter(
        keywords=args.find or config.filters.keywords,
        statuses=args.status or config.filters.statuses,
        tags=args.tag or config.filters.tags,
        deadline_before=config.filters.deadline_before,
    )
    store.update_filtered_companies(predicate)

    shown = store.filtered_companies
    for position, company in enumerate(shown, start=1):
        print(f"  {position}. {company}")

    if shown:
        store.set_current_viewed_company(shown[0])

    # Session summary
    print(f"\n{'=' * 40}")
    print(f"  Session Complete")
    print(f"{'=' * 40}")
    print(f"  Tracked:  {len(store)}")
    print(f"  Shown:    {len(shown)}")
    print(f"  Skipped:  {skipped}")
    print(f"  Data:     {data_path}")
    print(f"{'=' * 40}\n")
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="apptrack - job application tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="First run: cp config.example.yaml config.yaml",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config.yaml",
        help="Path to config file (default: config.yaml).",
    )
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Company YAML file (overrides data.companies_file).",
    )
    parser.add_argument(
        "--find",
        nargs="+",
        metavar="KEYWORD",
        help="Only show companies whose name contains one of these words.",
    )
    parser.add_argument(
        "--status",
        nargs="+",
        metavar="CODE",
        help="Only show these statuses: PA, PI, PO, A, R, pending, closed.",
    )
    parser.add_argument(
        "--tag",
        nargs="+",
        metavar="TAG",
        help="Only show companies carrying one of these tags.",
    )
    parser.add_argument(
        "--allow-duplicates",
        action="store_true",
        help="Add companies even when name, role and deadline match an existing one.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def main():
    args = parse_args()

    print("  apptrack - job application tracker")
    print(f"  {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")

    try:
        code = run(args)
    except (FileNotFoundError, ValueError, AppTrackError) as e:
        print(f"Error: {e}", file=sys.stderr)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
