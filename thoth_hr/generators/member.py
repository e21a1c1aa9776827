"""Member generator."""

from __future__ import annotations

import random
from typing import Iterator

from thoth_hr.generators.base import BaseGenerator
from thoth_hr.models import Member, MemberStatus


class MemberGenerator(BaseGenerator):
    """Generate synthetic employees."""

    POSITIONS = {
        "Engineering": ["Software Engineer", "QA Analyst", "DevOps Engineer", "Contractor"],
        "Finance": ["Accountant", "Payroll Officer", "Financial Analyst"],
        "Human Resources": ["HR Manager", "Recruiter", "HR Assistant"],
        "Sales": ["Sales Lead", "Account Executive", "Contractor"],
        "Operations": ["Operations Manager", "Logistics Coordinator", "Driver"],
    }

    STATUSES = list(MemberStatus)
    STATUS_WEIGHTS = [0.80, 0.10, 0.10]

    def generate(self) -> Member:
        """Generate a single member.

        Returns
        -------
        Member
            Generated member.
        """
        department = random.choice(list(self.POSITIONS))
        first_name = self.fake.first_name()
        last_name = self.fake.last_name()
        email_user = f"{first_name}.{last_name}".lower().replace(" ", "").replace("'", "")

        return self.factory.member(
            name=f"{first_name} {last_name}",
            email=f"{email_user}@{self.fake.free_email_domain()}",
            position=random.choice(self.POSITIONS[department]),
            department=department,
            phone=self.fake.phone_number(),
            hire_date=self.fake.date_between(start_date="-8y", end_date="-30d"),
            status=random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
        )

    def generate_batch(self, count: int) -> Iterator[Member]:
        """Generate multiple members.

        Parameters
        ----------
        count : int
            Number of members to generate.

        Yields
        ------
        Member
            Generated members.
        """
        for _ in range(count):
            yield self.generate()
