"""Member (employee) model."""

from dataclasses import dataclass
from datetime import date

from thoth_hr.models.enums import MemberStatus


@dataclass(frozen=True)
class Member:
    """Employee record referenced by loans, savings, payrolls and contracts."""

    id: str
    name: str
    email: str
    position: str | None = None
    department: str | None = None
    phone: str | None = None
    hire_date: date | None = None
    status: MemberStatus = MemberStatus.ACTIVE
    profile_picture: str | None = None  # data URI
