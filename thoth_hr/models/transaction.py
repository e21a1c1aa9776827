"""Transaction model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from thoth_hr.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Ledger entry, optionally attached to a member."""

    id: str
    amount: Decimal
    date: datetime
    member_id: str | None = None
    description: str | None = None
    transaction_type: TransactionType | None = None
