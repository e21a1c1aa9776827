"""HR domain store: members, loans, savings, payrolls, transactions, contracts."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from thoth_hr.config import HrConfig
from thoth_hr.exceptions import PersistenceError
from thoth_hr.models import (
    Contract,
    Loan,
    LoanStatus,
    Member,
    Payroll,
    PayrollStatus,
    Saving,
    Snapshot,
    Transaction,
    User,
)
from thoth_hr.models.factories import RecordFactory
from thoth_hr.repositories import SnapshotRepository, create_repository
from thoth_hr.seed import load_seed_snapshot

logger = logging.getLogger(__name__)


class HrDataStore:
    """Single owner of the domain snapshot.

    Every mutator builds the next snapshot copy-on-write, swaps it in and
    saves it through the repository. A failed save is logged and the
    in-memory state stays authoritative. When the stored snapshot cannot be
    read at all, the store runs on the seed without saving, so the stored
    data is never overwritten; :meth:`reset` resumes saving. Updates and deletes of unknown ids
    are silent no-ops, and deletes never cascade: records pointing at a
    removed member keep their ``member_id``.

    Parameters
    ----------
    repository : SnapshotRepository
        Where snapshots are loaded from and saved to.
    seed : Snapshot | None
        Initial state when the repository holds nothing yet
        (default: the bundled seed dataset).
    factory : RecordFactory | None
        Builds new records (ids and defaults).
    """

    def __init__(
        self,
        repository: SnapshotRepository,
        seed: Snapshot | None = None,
        factory: RecordFactory | None = None,
    ) -> None:
        self.repository = repository
        self.factory = factory or RecordFactory()
        self.saves_suspended = False
        self._snapshot = self._rehydrate(seed)

    @classmethod
    def open(cls, config: HrConfig, seed: Snapshot | None = None) -> HrDataStore:
        """Create a store backed by the repository ``config`` selects."""
        return cls(create_repository(config), seed=seed)

    @property
    def snapshot(self) -> Snapshot:
        """Current state of every collection."""
        return self._snapshot

    # Users
    def add_user(self, name: str, email: str, password: str) -> User:
        """Add a user to the store."""
        return self._append("users", self.factory.user(name, email, password))

    def get_users(self) -> tuple[User, ...]:
        """Get all users."""
        return self._snapshot.users

    # Members
    def add_member(self, **fields: Any) -> Member:
        """Add a member; status defaults to Active."""
        return self._append("members", self.factory.member(**fields))

    def get_members(self) -> tuple[Member, ...]:
        """Get all members."""
        return self._snapshot.members

    def update_member(self, member_id: str, **changes: Any) -> None:
        """Merge ``changes`` into a member."""
        self._update("members", member_id, changes)

    def delete_member(self, member_id: str) -> None:
        """Remove a member without touching its loans, payrolls or contracts."""
        self._delete("members", member_id)

    # Loans
    def add_loan(self, **fields: Any) -> Loan:
        """Add a loan to the store."""
        return self._append("loans", self.factory.loan(**fields))

    def get_loans(self) -> tuple[Loan, ...]:
        """Get all loans."""
        return self._snapshot.loans

    def update_loan(self, loan_id: str, **changes: Any) -> None:
        """Merge ``changes`` into a loan."""
        self._update("loans", loan_id, changes)

    def delete_loan(self, loan_id: str) -> None:
        """Remove a loan."""
        self._delete("loans", loan_id)

    # Savings
    def add_saving(self, **fields: Any) -> Saving:
        """Add a saving to the store."""
        return self._append("savings", self.factory.saving(**fields))

    def get_savings(self) -> tuple[Saving, ...]:
        """Get all savings."""
        return self._snapshot.savings

    def update_saving(self, saving_id: str, **changes: Any) -> None:
        """Merge ``changes`` into a saving."""
        self._update("savings", saving_id, changes)

    def delete_saving(self, saving_id: str) -> None:
        """Remove a saving."""
        self._delete("savings", saving_id)

    # Payrolls
    def add_payroll(self, **fields: Any) -> Payroll:
        """Add a payroll; status defaults to Pending and date to now."""
        return self._append("payrolls", self.factory.payroll(**fields))

    def get_payrolls(self) -> tuple[Payroll, ...]:
        """Get all payrolls."""
        return self._snapshot.payrolls

    def update_payroll(self, payroll_id: str, **changes: Any) -> None:
        """Merge ``changes`` into a payroll."""
        self._update("payrolls", payroll_id, changes)

    def delete_payroll(self, payroll_id: str) -> None:
        """Remove a payroll."""
        self._delete("payrolls", payroll_id)

    def mark_payroll_as_paid(self, payroll_id: str) -> None:
        """Mark a payroll Paid and repay its member's Active loans.

        Both changes land in one snapshot and one save. Nothing happens when
        the payroll is unknown or already Paid.
        """
        payroll = self._find("payrolls", payroll_id)
        if payroll is None or payroll.status == PayrollStatus.PAID:
            return

        payrolls = tuple(
            replace(p, status=PayrollStatus.PAID) if p.id == payroll_id else p
            for p in self._snapshot.payrolls
        )
        loans = tuple(
            replace(loan, status=LoanStatus.REPAID)
            if loan.member_id == payroll.member_id and loan.status == LoanStatus.ACTIVE
            else loan
            for loan in self._snapshot.loans
        )
        repaid = sum(1 for old, new in zip(self._snapshot.loans, loans) if old is not new)
        logger.info(
            "Payroll %s paid; %d active loan(s) of member %s repaid",
            payroll_id,
            repaid,
            payroll.member_id,
        )
        self._commit(payrolls=payrolls, loans=loans)

    # Transactions
    def add_transaction(self, **fields: Any) -> Transaction:
        """Add a transaction; the member is optional."""
        return self._append("transactions", self.factory.transaction(**fields))

    def get_transactions(self) -> tuple[Transaction, ...]:
        """Get all transactions."""
        return self._snapshot.transactions

    def update_transaction(self, transaction_id: str, **changes: Any) -> None:
        """Merge ``changes`` into a transaction."""
        self._update("transactions", transaction_id, changes)

    def delete_transaction(self, transaction_id: str) -> None:
        """Remove a transaction."""
        self._delete("transactions", transaction_id)

    # Contracts
    def add_contract(self, **fields: Any) -> Contract:
        """Add a contract to the store."""
        return self._append("contracts", self.factory.contract(**fields))

    def get_contracts(self) -> tuple[Contract, ...]:
        """Get all contracts."""
        return self._snapshot.contracts

    def update_contract(self, contract_id: str, **changes: Any) -> None:
        """Merge ``changes`` into a contract."""
        self._update("contracts", contract_id, changes)

    def delete_contract(self, contract_id: str) -> None:
        """Remove a contract."""
        self._delete("contracts", contract_id)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all collections."""
        return self._snapshot.summary()

    def reset(self, seed: Snapshot | None = None) -> None:
        """Replace all data with ``seed`` (default: the bundled dataset) and save it.

        This is the only way to overwrite a stored snapshot that could not
        be read.
        """
        snapshot = seed if seed is not None else load_seed_snapshot(self.factory)
        self.saves_suspended = False
        logger.warning("Store reset: %s", snapshot.summary())
        self._commit(**{name: getattr(snapshot, name) for name in Snapshot.collection_names()})

    def _rehydrate(self, seed: Snapshot | None) -> Snapshot:
        try:
            snapshot = self.repository.load()
        except PersistenceError as exc:
            logger.warning(
                "Persisted snapshot unreadable, running on seed with saves suspended: %s", exc
            )
            self.saves_suspended = True
        else:
            if snapshot is not None:
                logger.info("Rehydrated store: %s", snapshot.summary())
                return snapshot

        snapshot = seed if seed is not None else load_seed_snapshot(self.factory)
        logger.info("Seeded store: %s", snapshot.summary())
        return snapshot

    def _find(self, collection: str, record_id: str) -> Any | None:
        for record in getattr(self._snapshot, collection):
            if record.id == record_id:
                return record
        return None

    def _append(self, collection: str, record: Any) -> Any:
        self._commit(**{collection: getattr(self._snapshot, collection) + (record,)})
        logger.debug("Added %s %s", collection, record.id)
        return record

    def _update(self, collection: str, record_id: str, changes: dict[str, Any]) -> None:
        if self._find(collection, record_id) is None:
            logger.debug("Update of missing %s %s ignored", collection, record_id)
            return
        records = tuple(
            self.factory.revise(record, changes) if record.id == record_id else record
            for record in getattr(self._snapshot, collection)
        )
        self._commit(**{collection: records})
        logger.debug("Updated %s %s: %s", collection, record_id, sorted(changes))

    def _delete(self, collection: str, record_id: str) -> None:
        records = getattr(self._snapshot, collection)
        remaining = tuple(record for record in records if record.id != record_id)
        if len(remaining) == len(records):
            return
        self._commit(**{collection: remaining})
        logger.debug("Deleted %s %s", collection, record_id)

    def _commit(self, **collections: tuple) -> None:
        """Swap in the next snapshot, then persist it."""
        self._snapshot = replace(self._snapshot, **collections)
        if self.saves_suspended:
            logger.warning("Save skipped, stored snapshot is unreadable; call reset() to overwrite it")
            return
        try:
            self.repository.save(self._snapshot)
        except PersistenceError as exc:
            logger.warning(
                "Snapshot kept in memory only, save failed: %s",
                exc,
                extra={"collections": self._snapshot.summary()},
            )
