"""Employment contract model."""

from dataclasses import dataclass
from datetime import date

from thoth_hr.models.enums import ContractStatus


@dataclass(frozen=True)
class Contract:
    """Contract between the organisation and a member.

    Status is set manually; there is no automatic expiry.
    """

    id: str
    member_id: str
    title: str
    start_date: date
    end_date: date
    status: ContractStatus
