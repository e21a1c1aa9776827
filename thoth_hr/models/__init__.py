"""Domain models for the HR and payroll store."""

from thoth_hr.models.contract import Contract
from thoth_hr.models.enums import (
    ContractStatus,
    LoanStatus,
    MemberStatus,
    PayrollStatus,
    TransactionType,
)
from thoth_hr.models.loan import Loan
from thoth_hr.models.member import Member
from thoth_hr.models.payroll import Payroll
from thoth_hr.models.saving import Saving
from thoth_hr.models.snapshot import Snapshot
from thoth_hr.models.transaction import Transaction
from thoth_hr.models.user import User

__all__ = [
    "Contract",
    "ContractStatus",
    "Loan",
    "LoanStatus",
    "Member",
    "MemberStatus",
    "Payroll",
    "PayrollStatus",
    "Saving",
    "Snapshot",
    "Transaction",
    "TransactionType",
    "User",
]
