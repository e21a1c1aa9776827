"""Loan model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from thoth_hr.models.enums import LoanStatus


@dataclass(frozen=True)
class Loan:
    """Loan granted to a member.

    ``amount`` is the principal; outstanding balance is not tracked.
    """

    id: str
    member_id: str
    amount: Decimal
    date: datetime
    interest_rate: Decimal = Decimal("0")
    repayment_term: str = "6 months"
    status: LoanStatus = LoanStatus.PENDING
