"""Synthetic HR data generators."""

from thoth_hr.generators.contract import ContractGenerator
from thoth_hr.generators.finance import LoanGenerator, SavingGenerator, TransactionGenerator
from thoth_hr.generators.member import MemberGenerator
from thoth_hr.generators.payroll import PayrollGenerator

__all__ = [
    "ContractGenerator",
    "LoanGenerator",
    "MemberGenerator",
    "PayrollGenerator",
    "SavingGenerator",
    "TransactionGenerator",
]
