"""Payroll generator."""

from __future__ import annotations

import random
from datetime import date
from decimal import Decimal

from thoth_hr.generators.base import BaseGenerator
from thoth_hr.models import Member, Payroll, PayrollStatus

PAY_DAY = 28


class PayrollGenerator(BaseGenerator):
    """Generate monthly payroll runs."""

    # Monthly basic pay ranges by department
    BASIC_RANGES = {
        "Engineering": (3500, 7000),
        "Finance": (3000, 6000),
        "Human Resources": (2800, 5500),
        "Sales": (2500, 6500),
        "Operations": (2200, 4500),
    }
    DEFAULT_RANGE = (2000, 4000)

    def generate(self, member: Member, year: int, month: int) -> Payroll:
        """Generate the payroll of ``member`` for one month.

        Runs dated before today are Paid, later ones Pending.
        """
        low, high = self.BASIC_RANGES.get(member.department or "", self.DEFAULT_RANGE)
        basic = Decimal(random.randint(low, high))
        allowances = (basic * Decimal(str(round(random.uniform(0.05, 0.20), 2)))).quantize(Decimal("1"))
        deductions = (basic * Decimal(str(round(random.uniform(0.03, 0.12), 2)))).quantize(Decimal("1"))
        net_pay = basic + allowances - deductions
        pay_date = date(year, month, PAY_DAY)

        return self.factory.payroll(
            member_id=member.id,
            salary=net_pay,
            basic=basic,
            allowances=allowances,
            deductions=deductions,
            net_pay=net_pay,
            month=f"{year}-{month:02d}",
            date=pay_date,
            status=PayrollStatus.PAID if pay_date < date.today() else PayrollStatus.PENDING,
        )
