"""Loan, saving and transaction generators."""

from __future__ import annotations

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from thoth_hr.generators.base import BaseGenerator
from thoth_hr.models import (
    Loan,
    LoanStatus,
    Payroll,
    Saving,
    Transaction,
    TransactionType,
)


class LoanGenerator(BaseGenerator):
    """Generate staff loans."""

    REPAYMENT_TERMS = ["3 months", "6 months", "12 months", "24 months"]

    STATUSES = list(LoanStatus)
    STATUS_WEIGHTS = [0.45, 0.30, 0.05, 0.20]  # Active, Repaid, Defaulted, Pending

    def generate(self, member_id: str, not_before: date | None = None) -> Loan:
        """Generate a loan for a member.

        Parameters
        ----------
        member_id : str
            Borrowing member.
        not_before : date | None
            Earliest loan date (usually the hire date).

        Returns
        -------
        Loan
            Generated loan.
        """
        start = max(not_before or date.min, date.today() - timedelta(days=2 * 365))
        loan_date = self.fake.date_between(start_date=start, end_date="today")

        return self.factory.loan(
            member_id=member_id,
            amount=Decimal(random.randint(5, 100) * 100),
            date=loan_date,
            interest_rate=Decimal(str(round(random.uniform(2, 12), 1))),
            repayment_term=random.choice(self.REPAYMENT_TERMS),
            status=random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
        )


class SavingGenerator(BaseGenerator):
    """Generate monthly savings deposits."""

    def generate(self, member_id: str, on: date) -> Saving:
        """Generate one deposit dated ``on``."""
        amount = Decimal(random.randint(50, 500)) + Decimal(random.choice([0, 25, 50, 75])) / 100
        return self.factory.saving(member_id=member_id, amount=amount, date=on)

    def generate_monthly(self, member_id: str, months: int) -> Iterator[Saving]:
        """Yield one deposit at the end of each of the last ``months`` months."""
        today = date.today()
        month_end = today.replace(day=1) - timedelta(days=1)
        for _ in range(months):
            yield self.generate(member_id, month_end)
            month_end = month_end.replace(day=1) - timedelta(days=1)


class TransactionGenerator(BaseGenerator):
    """Generate ledger entries mirroring loans and payrolls."""

    def from_loan(self, loan: Loan) -> Transaction:
        """Credit entry for a loan disbursement."""
        return self.factory.transaction(
            member_id=loan.member_id,
            amount=loan.amount,
            description="Loan disbursement",
            transaction_type=TransactionType.CREDIT,
            date=loan.date,
        )

    def from_payroll(self, payroll: Payroll) -> Transaction:
        """Debit entry for a paid salary."""
        return self.factory.transaction(
            member_id=payroll.member_id,
            amount=payroll.salary,
            description=f"Salary {payroll.month or ''}".strip(),
            transaction_type=TransactionType.DEBIT,
            date=payroll.date,
        )

    def generate_expense(self) -> Transaction:
        """Unattached expense entry."""
        return self.factory.transaction(
            amount=Decimal(str(round(random.uniform(10, 400), 2))),
            description=self.fake.catch_phrase(),
            transaction_type=TransactionType.DEBIT,
            date=self.fake.date_between(start_date="-1y", end_date="today"),
        )
