"""Scenario building a realistic HR dataset for seeding a store."""

from __future__ import annotations

import logging
import random
from datetime import date

from thoth_hr.generators import (
    ContractGenerator,
    LoanGenerator,
    MemberGenerator,
    PayrollGenerator,
    SavingGenerator,
    TransactionGenerator,
)
from thoth_hr.models import MemberStatus, PayrollStatus, Snapshot
from thoth_hr.repositories import InMemoryRepository
from thoth_hr.store import HrDataStore

logger = logging.getLogger(__name__)


class SeedDatasetScenario:
    """Generate members with loans, savings, payrolls, transactions and contracts.

    This scenario creates:
    - Members across departments, mostly Active
    - Loans for a share of members, dated after hiring
    - Monthly savings for a share of members
    - Payroll runs for the last few months for every non-terminated member
    - Ledger transactions mirroring loans and paid payrolls, plus expenses
    - One contract per member
    """

    def __init__(
        self,
        num_members: int = 25,
        payroll_months: int = 3,
        loan_penetration: float = 0.40,
        savings_rate: float = 0.60,
        num_expenses: int = 5,
        seed: int | None = None,
    ) -> None:
        """Initialize seed dataset scenario.

        Parameters
        ----------
        num_members : int
            Number of members to generate.
        payroll_months : int
            Months of payroll history, ending with the current month.
        loan_penetration : float
            Share of members with a loan (0.0 to 1.0).
        savings_rate : float
            Share of members with monthly savings (0.0 to 1.0).
        num_expenses : int
            Unattached expense transactions to add.
        seed : int | None
            Random seed for reproducibility.
        """
        self.num_members = num_members
        self.payroll_months = payroll_months
        self.loan_penetration = loan_penetration
        self.savings_rate = savings_rate
        self.num_expenses = num_expenses
        self.seed = seed

        def offset(n: int) -> int | None:
            return None if seed is None else seed + n

        self._member_gen = MemberGenerator(seed=offset(0))
        self._loan_gen = LoanGenerator(seed=offset(1))
        self._saving_gen = SavingGenerator(seed=offset(2))
        self._payroll_gen = PayrollGenerator(seed=offset(3))
        self._transaction_gen = TransactionGenerator(seed=offset(4))
        self._contract_gen = ContractGenerator(seed=offset(5))
        if seed is not None:
            random.seed(seed)

    def snapshot(self) -> Snapshot:
        """Generate all records as one snapshot.

        Returns
        -------
        Snapshot
            Generated dataset, users left empty.
        """
        logger.info(
            "Starting seed dataset scenario: %d members, %d payroll months",
            self.num_members,
            self.payroll_months,
        )

        members = list(self._member_gen.generate_batch(self.num_members))
        loans = []
        savings = []
        payrolls = []
        transactions = []
        contracts = []

        for member in members:
            contracts.append(self._contract_gen.generate(member))

            if random.random() < self.loan_penetration:
                loan = self._loan_gen.generate(member.id, not_before=member.hire_date)
                loans.append(loan)
                transactions.append(self._transaction_gen.from_loan(loan))

            if random.random() < self.savings_rate:
                savings.extend(self._saving_gen.generate_monthly(member.id, self.payroll_months))

            if member.status == MemberStatus.TERMINATED:
                continue
            for year, month in _recent_months(self.payroll_months):
                payroll = self._payroll_gen.generate(member, year, month)
                payrolls.append(payroll)
                if payroll.status == PayrollStatus.PAID:
                    transactions.append(self._transaction_gen.from_payroll(payroll))

        transactions.extend(self._transaction_gen.generate_expense() for _ in range(self.num_expenses))

        snapshot = Snapshot(
            members=tuple(members),
            loans=tuple(loans),
            savings=tuple(savings),
            payrolls=tuple(payrolls),
            transactions=tuple(transactions),
            contracts=tuple(contracts),
        )
        logger.info("Generated %s", snapshot.summary())
        return snapshot

    def generate(self) -> HrDataStore:
        """Generate a store seeded with the dataset, kept in memory.

        Returns
        -------
        HrDataStore
            Store containing all generated data.
        """
        return HrDataStore(InMemoryRepository(), seed=self.snapshot())


def _recent_months(count: int) -> list[tuple[int, int]]:
    """(year, month) pairs for the last ``count`` months, oldest first."""
    today = date.today()
    year, month = today.year, today.month
    months = []
    for _ in range(count):
        months.append((year, month))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(months))
