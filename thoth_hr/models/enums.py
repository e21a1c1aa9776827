"""Enumeration types for HR domain entities."""

from enum import Enum


class MemberStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    TERMINATED = "Terminated"


class LoanStatus(str, Enum):
    ACTIVE = "Active"
    REPAID = "Repaid"
    DEFAULTED = "Defaulted"
    PENDING = "Pending"


class PayrollStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"


class TransactionType(str, Enum):
    CREDIT = "Credit"
    DEBIT = "Debit"


class ContractStatus(str, Enum):
    ACTIVE = "Active"
    EXPIRED = "Expired"
    TERMINATED = "Terminated"
