"""Payroll model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from thoth_hr.models.enums import PayrollStatus


@dataclass(frozen=True)
class Payroll:
    """One payroll run for a member."""

    id: str
    member_id: str
    salary: Decimal
    date: datetime
    status: PayrollStatus = PayrollStatus.PENDING
    basic: Decimal | None = None
    allowances: Decimal | None = None
    deductions: Decimal | None = None
    net_pay: Decimal | None = None
    month: str | None = None  # free-form label, e.g. "2024-03"
