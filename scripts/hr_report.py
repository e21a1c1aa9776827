#!/usr/bin/env python3
"""Print HR store statistics and optionally export the member report.

The store is opened with configuration from the environment
(``THOTH_STORAGE_BACKEND``, ``THOTH_STORE_PATH``...); ``--store`` overrides
the JSON file location.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from thoth_hr.config import HrConfig
from thoth_hr.logging import configure_logging, get_logger
from thoth_hr.store import HrDataStore
from thoth_hr.views import (
    build_member_report,
    loan_status_counts,
    member_report_csv,
    monthly_trend,
    payroll_status_counts,
    portfolio_summary,
    workforce_stats,
    write_csv,
)

logger = get_logger(__name__)


def print_statistics(store: HrDataStore) -> None:
    """Print workforce, portfolio and trend statistics."""
    snapshot = store.snapshot
    workforce = workforce_stats(snapshot.members)
    portfolio = portfolio_summary(snapshot.loans, snapshot.payrolls)

    print(f"\n{'='*60}")
    print("Workforce")
    print("=" * 60)
    print(f"  Headcount:   {workforce.headcount}")
    print(f"  Joiners:     {workforce.joiners}")
    print(f"  Leavers:     {workforce.leavers}")
    print(f"  Contractors: {workforce.contractors}")

    print(f"\n{'='*60}")
    print("Loans & payroll")
    print("=" * 60)
    print(f"  Total loans:      {portfolio.total_loans:,.2f}")
    print(f"  Average loan:     {portfolio.average_loan:,.2f}")
    print(f"  Total payroll:    {portfolio.total_payroll:,.2f}")
    print(f"  Average payroll:  {portfolio.average_payroll:,.2f}")
    for status, count in loan_status_counts(snapshot.loans).items():
        print(f"  Loans {status.value}: {count}")
    for status, count in payroll_status_counts(snapshot.payrolls).items():
        print(f"  Payrolls {status.value}: {count}")

    print(f"\n{'='*60}")
    print("Payroll by month")
    print("=" * 60)
    for label, amount in monthly_trend(snapshot.payrolls, amount_field="salary").items():
        print(f"  {label}: {amount:,.2f}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="HR store statistics and member report")
    parser.add_argument("--store", type=Path, help="JSON store file (overrides THOTH_STORE_PATH)")
    parser.add_argument("--search", default="", help="Filter report by member name")
    parser.add_argument("--loan-status", default=None, help="Keep members with a loan in this status")
    parser.add_argument(
        "--payroll-status", default=None, help="Keep members with a payroll in this status"
    )
    parser.add_argument("--start", default=None, help="Earliest loan date (YYYY-MM-DD)")
    parser.add_argument("--end", default=None, help="Latest loan date (YYYY-MM-DD)")
    parser.add_argument("--export", type=Path, help="Write the member report CSV here")
    args = parser.parse_args()

    config = HrConfig.from_env()
    if args.store is not None:
        config.storage.json_path = args.store
    configure_logging(config)

    store = HrDataStore.open(config)
    logger.info("Store contents: %s", store.summary())
    print_statistics(store)

    rows = build_member_report(
        store.snapshot,
        search=args.search,
        loan_status=args.loan_status,
        payroll_status=args.payroll_status,
        start=args.start,
        end=args.end,
    )
    print(f"\nMember report: {len(rows)} row(s)")
    if args.export is not None:
        path = write_csv(args.export, member_report_csv(rows))
        logger.info("Report written to %s", path)


if __name__ == "__main__":
    main()
