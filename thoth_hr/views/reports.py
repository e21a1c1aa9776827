"""Per-member report combining loans and payrolls."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from thoth_hr.models import LoanStatus, PayrollStatus, Snapshot
from thoth_hr.views.aggregates import total_amount
from thoth_hr.views.filters import ALL_STATUSES, filter_by_date_range


@dataclass(frozen=True)
class MemberReportRow:
    """One line of the member report."""

    member_id: str
    name: str
    total_loans: Decimal
    total_payroll: Decimal
    active_loans: int
    pending_payrolls: int


def build_member_report(
    snapshot: Snapshot,
    search: str = "",
    loan_status: Any = None,
    payroll_status: Any = None,
    start: date | datetime | str | None = None,
    end: date | datetime | str | None = None,
) -> list[MemberReportRow]:
    """Build report rows for the members matching every given filter.

    Parameters
    ----------
    snapshot : Snapshot
        Store state to report on.
    search : str
        Case-insensitive substring of the member name.
    loan_status : Any
        Keep members with at least one loan in this status.
    payroll_status : Any
        Keep members with at least one payroll in this status.
    start, end : date | datetime | str | None
        Keep members with at least one loan dated within the inclusive range.

    Returns
    -------
    list[MemberReportRow]
        Rows in member insertion order.
    """
    needle = (search or "").strip().casefold()
    rows = []
    for member in snapshot.members:
        loans = [loan for loan in snapshot.loans if loan.member_id == member.id]
        payrolls = [p for p in snapshot.payrolls if p.member_id == member.id]

        if needle and needle not in (member.name or "").casefold():
            continue
        if _is_filtering(loan_status) and not any(loan.status == loan_status for loan in loans):
            continue
        if _is_filtering(payroll_status) and not any(p.status == payroll_status for p in payrolls):
            continue
        if (start or end) and not filter_by_date_range(loans, start, end):
            continue

        rows.append(
            MemberReportRow(
                member_id=member.id,
                name=member.name,
                total_loans=total_amount(loans),
                total_payroll=total_amount(payrolls, "salary"),
                active_loans=sum(1 for loan in loans if loan.status == LoanStatus.ACTIVE),
                pending_payrolls=sum(1 for p in payrolls if p.status == PayrollStatus.PENDING),
            )
        )
    return rows


def _is_filtering(status: Any) -> bool:
    return status is not None and status != ALL_STATUSES
