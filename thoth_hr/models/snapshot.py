"""Whole-state snapshot of every domain collection."""

from dataclasses import dataclass, fields

from thoth_hr.models.contract import Contract
from thoth_hr.models.loan import Loan
from thoth_hr.models.member import Member
from thoth_hr.models.payroll import Payroll
from thoth_hr.models.saving import Saving
from thoth_hr.models.transaction import Transaction
from thoth_hr.models.user import User


@dataclass(frozen=True)
class Snapshot:
    """Immutable set of all collections at a point in time.

    Collections are tuples in insertion order. Mutations produce a new
    snapshot via ``dataclasses.replace``.
    """

    users: tuple[User, ...] = ()
    members: tuple[Member, ...] = ()
    loans: tuple[Loan, ...] = ()
    savings: tuple[Saving, ...] = ()
    payrolls: tuple[Payroll, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    contracts: tuple[Contract, ...] = ()

    @classmethod
    def collection_names(cls) -> tuple[str, ...]:
        """Names of the collections, in persisted order."""
        return tuple(f.name for f in fields(cls))

    def summary(self) -> dict[str, int]:
        """Return counts of all collections."""
        return {name: len(getattr(self, name)) for name in self.collection_names()}
