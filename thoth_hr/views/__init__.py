"""Derived views: pure functions over a store snapshot."""

from thoth_hr.views.aggregates import (
    MONTH_LABELS,
    PortfolioSummary,
    WorkforceStats,
    loan_status_counts,
    monthly_trend,
    payroll_status_counts,
    portfolio_summary,
    status_distribution,
    total_amount,
    totals_by_member,
    workforce_stats,
)
from thoth_hr.views.export import member_report_csv, rows_to_csv, savings_csv, write_csv
from thoth_hr.views.filters import (
    display_value,
    filter_by_date_range,
    filter_by_status,
    search_records,
    sort_records,
)
from thoth_hr.views.lookup import UNKNOWN_MEMBER, MemberDirectory
from thoth_hr.views.reports import MemberReportRow, build_member_report

__all__ = [
    "MONTH_LABELS",
    "UNKNOWN_MEMBER",
    "MemberDirectory",
    "MemberReportRow",
    "PortfolioSummary",
    "WorkforceStats",
    "build_member_report",
    "display_value",
    "filter_by_date_range",
    "filter_by_status",
    "loan_status_counts",
    "member_report_csv",
    "monthly_trend",
    "payroll_status_counts",
    "portfolio_summary",
    "rows_to_csv",
    "savings_csv",
    "search_records",
    "sort_records",
    "status_distribution",
    "total_amount",
    "totals_by_member",
    "workforce_stats",
    "write_csv",
]
