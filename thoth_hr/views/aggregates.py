"""Aggregates over store collections: totals, distributions, trends."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Sequence, TypeVar

from thoth_hr.models import (
    Loan,
    LoanStatus,
    Member,
    MemberStatus,
    Payroll,
    PayrollStatus,
)

E = TypeVar("E", bound=Enum)

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def amount_of(record: Any, amount_field: str = "amount") -> Decimal:
    """Read a money field as ``Decimal``; missing values count as zero."""
    value = getattr(record, amount_field, None)
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def total_amount(records: Iterable[Any], amount_field: str = "amount") -> Decimal:
    """Sum a money field across records."""
    return sum((amount_of(r, amount_field) for r in records), Decimal("0"))


def totals_by_member(
    members: Iterable[Member],
    records: Iterable[Any],
    amount_field: str = "amount",
) -> dict[str, Decimal]:
    """Sum ``amount_field`` of records per member.

    Every member is present in the result, with zero when nothing matches.
    Records whose ``member_id`` matches no member are ignored.
    """
    totals = {member.id: Decimal("0") for member in members}
    for record in records:
        member_id = getattr(record, "member_id", None)
        if member_id in totals:
            totals[member_id] += amount_of(record, amount_field)
    return totals


def status_distribution(
    records: Iterable[Any],
    statuses: type[E],
    default: E,
) -> dict[E, int]:
    """Count records per status, in the enum's declaration order.

    Missing or unrecognized statuses are counted under ``default``.
    """
    counts = {status: 0 for status in statuses}
    for record in records:
        counts[_status_bucket(getattr(record, "status", None), statuses, default)] += 1
    return counts


def loan_status_counts(loans: Iterable[Loan]) -> dict[LoanStatus, int]:
    """Count loans per status; unknown statuses count as Pending."""
    return status_distribution(loans, LoanStatus, LoanStatus.PENDING)


def payroll_status_counts(payrolls: Iterable[Payroll]) -> dict[PayrollStatus, int]:
    """Count payrolls per status; unknown statuses count as Pending."""
    return status_distribution(payrolls, PayrollStatus, PayrollStatus.PENDING)


def monthly_trend(
    records: Iterable[Any],
    amount_field: str = "amount",
    date_field: str = "date",
) -> dict[str, Decimal]:
    """Sum amounts into twelve calendar-month buckets, ignoring the year.

    Records without a date are skipped.
    """
    buckets = [Decimal("0")] * 12
    for record in records:
        when = getattr(record, date_field, None)
        if not isinstance(when, date):
            continue
        buckets[when.month - 1] += amount_of(record, amount_field)
    return dict(zip(MONTH_LABELS, buckets))


@dataclass(frozen=True)
class WorkforceStats:
    """Headline member counts."""

    headcount: int
    leavers: int
    joiners: int
    contractors: int


def workforce_stats(members: Sequence[Member]) -> WorkforceStats:
    """Count members: all, terminated, active and contractors."""
    return WorkforceStats(
        headcount=len(members),
        leavers=sum(1 for m in members if m.status == MemberStatus.TERMINATED),
        joiners=sum(1 for m in members if m.status == MemberStatus.ACTIVE),
        contractors=sum(1 for m in members if (m.position or "").lower() == "contractor"),
    )


@dataclass(frozen=True)
class PortfolioSummary:
    """Loan and payroll totals across the whole organisation."""

    total_loans: Decimal
    total_payroll: Decimal
    average_loan: Decimal
    average_payroll: Decimal
    active_loans: int
    pending_payrolls: int


def portfolio_summary(loans: Sequence[Loan], payrolls: Sequence[Payroll]) -> PortfolioSummary:
    """Summarise loans and payrolls; averages are zero for empty inputs."""
    total_loans = total_amount(loans)
    total_payroll = total_amount(payrolls, "salary")
    return PortfolioSummary(
        total_loans=total_loans,
        total_payroll=total_payroll,
        average_loan=total_loans / len(loans) if loans else Decimal("0"),
        average_payroll=total_payroll / len(payrolls) if payrolls else Decimal("0"),
        active_loans=loan_status_counts(loans)[LoanStatus.ACTIVE],
        pending_payrolls=payroll_status_counts(payrolls)[PayrollStatus.PENDING],
    )


def _status_bucket(value: Any, statuses: type[E], default: E) -> E:
    if value is None:
        return default
    try:
        return statuses(value)
    except ValueError:
        return default
