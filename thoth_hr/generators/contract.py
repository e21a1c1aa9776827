"""Contract generator."""

from __future__ import annotations

import random
from datetime import date, timedelta

from thoth_hr.generators.base import BaseGenerator
from thoth_hr.models import Contract, ContractStatus, Member, MemberStatus


class ContractGenerator(BaseGenerator):
    """Generate one employment contract per member."""

    TERM_YEARS = [1, 2, 3, 5]

    def generate(self, member: Member) -> Contract:
        """Generate a contract starting on the member's hire date.

        Terminated members get Terminated contracts; contracts past their
        end date are Expired; the rest are Active.
        """
        start = member.hire_date or self.fake.date_between(start_date="-3y", end_date="today")
        end = start + timedelta(days=365 * random.choice(self.TERM_YEARS)) - timedelta(days=1)

        if member.status == MemberStatus.TERMINATED:
            status = ContractStatus.TERMINATED
        elif end < date.today():
            status = ContractStatus.EXPIRED
        else:
            status = ContractStatus.ACTIVE

        kind = "Contractor Services" if (member.position or "").lower() == "contractor" else "Employment"
        return self.factory.contract(
            member_id=member.id,
            title=f"{kind} Agreement - {member.position or 'Staff'}",
            start_date=start,
            end_date=end,
            status=status,
        )
