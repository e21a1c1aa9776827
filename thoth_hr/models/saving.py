"""Saving model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Saving:
    """Savings deposit made by a member."""

    id: str
    member_id: str
    amount: Decimal
    date: datetime
