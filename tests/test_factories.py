"""Tests for record construction and value coercion."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from thoth_hr.models import (
    ContractStatus,
    Loan,
    LoanStatus,
    Member,
    MemberStatus,
    Payroll,
    PayrollStatus,
    TransactionType,
)
from thoth_hr.models.factories import (
    RecordFactory,
    coerce_fields,
    to_calendar_date,
    to_decimal,
    to_enum,
    to_timestamp,
)


class TestCoercion:
    """Tests for coercion helpers."""

    def test_to_decimal(self) -> None:
        """Test numbers and strings become Decimal exactly."""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal("250") == Decimal("250")
        assert to_decimal(None) is None

    def test_to_decimal_invalid(self) -> None:
        """Test non-numeric input raises ValueError."""
        with pytest.raises(ValueError):
            to_decimal("lots")

    def test_to_decimal_rejects_non_finite(self) -> None:
        """Test NaN and infinities are not amounts."""
        for value in ("NaN", "-inf", float("nan"), Decimal("Infinity")):
            with pytest.raises(ValueError, match="finite"):
                to_decimal(value)

    def test_blank_dates_are_missing(self) -> None:
        """Test empty and whitespace date strings coerce to None."""
        assert to_timestamp("") is None
        assert to_timestamp("   ") is None
        assert to_calendar_date("") is None
        assert to_calendar_date("  ") is None

    def test_to_timestamp_from_date_string(self) -> None:
        """Test a plain date string becomes midnight."""
        assert to_timestamp("2024-01-15") == datetime(2024, 1, 15)

    def test_to_timestamp_zulu(self) -> None:
        """Test trailing Z is converted to naive UTC."""
        assert to_timestamp("2024-01-15T10:30:00.000Z") == datetime(2024, 1, 15, 10, 30)

    def test_to_timestamp_aware_offset(self) -> None:
        """Test aware datetimes are shifted to UTC."""
        aware = datetime(2024, 1, 15, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        assert to_timestamp(aware) == datetime(2024, 1, 15, 10, 0)

    def test_to_timestamp_from_date(self) -> None:
        """Test date objects become midnight datetimes."""
        assert to_timestamp(date(2024, 3, 1)) == datetime(2024, 3, 1)

    def test_to_timestamp_invalid(self) -> None:
        """Test non-temporal input raises ValueError."""
        with pytest.raises(ValueError):
            to_timestamp(12345)
        with pytest.raises(ValueError):
            to_timestamp("yesterday")

    def test_to_calendar_date(self) -> None:
        """Test date coercion from strings and datetimes."""
        assert to_calendar_date("2019-03-04") == date(2019, 3, 4)
        assert to_calendar_date(datetime(2019, 3, 4, 9)) == date(2019, 3, 4)
        assert to_calendar_date(None) is None

    def test_to_enum_case_insensitive(self) -> None:
        """Test exact then case-insensitive enum lookup."""
        assert to_enum(LoanStatus, "Repaid") is LoanStatus.REPAID
        assert to_enum(LoanStatus, "repaid") is LoanStatus.REPAID

    def test_to_enum_unknown(self) -> None:
        """Test unknown values raise ValueError."""
        with pytest.raises(ValueError):
            to_enum(PayrollStatus, "Overdue")

    def test_coerce_fields(self) -> None:
        """Test field-specific coercion."""
        values = coerce_fields(
            Payroll,
            {"salary": "3000", "date": "2024-02-28", "status": "paid", "month": "2024-02"},
        )

        assert values == {
            "salary": Decimal("3000"),
            "date": datetime(2024, 2, 28),
            "status": PayrollStatus.PAID,
            "month": "2024-02",
        }


class TestRecordFactory:
    """Tests for RecordFactory defaults."""

    def test_ids_are_unique_by_default(self) -> None:
        """Test default uuid ids."""
        factory = RecordFactory()

        first = factory.member(name="A", email="a@example.com")
        second = factory.member(name="B", email="b@example.com")

        assert first.id != second.id
        assert len(first.id) == 32

    def test_explicit_record_id_kept(self, factory: RecordFactory) -> None:
        """Test a supplied id wins over the generator."""
        member = factory.member(name="A", email="a@example.com", record_id="m-9")

        assert member.id == "m-9"

    def test_member_defaults(self, factory: RecordFactory) -> None:
        """Test member status defaults to Active."""
        member = factory.member(name="A", email="a@example.com", hire_date="2020-01-02")

        assert member.status == MemberStatus.ACTIVE
        assert member.hire_date == date(2020, 1, 2)

    def test_member_blank_hire_date(self, factory: RecordFactory) -> None:
        """Test a blank hire date leaves the member without one."""
        member = factory.member(name="A", email="a@example.com", hire_date="")

        assert member.hire_date is None

    def test_blank_record_date_defaults_to_now(
        self, factory: RecordFactory, fixed_now: datetime
    ) -> None:
        """Test a blank date is treated like a missing one."""
        assert factory.loan(member_id="m1", amount=1, date="").date == fixed_now
        assert factory.saving(member_id="m1", amount=1, date=" ").date == fixed_now
        assert factory.payroll(member_id="m1", salary=1, date="").date == fixed_now
        assert factory.transaction(amount=1, date="").date == fixed_now

    def test_loan_defaults(self, factory: RecordFactory, fixed_now: datetime) -> None:
        """Test loan defaults."""
        loan = factory.loan(member_id="m1", amount=500)

        assert loan.amount == Decimal("500")
        assert loan.interest_rate == Decimal("0")
        assert loan.repayment_term == "6 months"
        assert loan.status == LoanStatus.PENDING
        assert loan.date == fixed_now

    def test_saving_date_defaults_to_now(self, factory: RecordFactory, fixed_now: datetime) -> None:
        """Test savings are dated now when no date is given."""
        assert factory.saving(member_id="m1", amount=10).date == fixed_now

    def test_payroll_defaults(self, factory: RecordFactory, fixed_now: datetime) -> None:
        """Test payroll status and date defaults."""
        payroll = factory.payroll(member_id="m1", salary=3000)

        assert payroll.status == PayrollStatus.PENDING
        assert payroll.date == fixed_now
        assert payroll.salary == Decimal("3000")

    def test_payroll_supplied_date_kept(self, factory: RecordFactory) -> None:
        """Test a supplied payroll date is not overwritten."""
        payroll = factory.payroll(member_id="m1", salary=3000, date="2024-02-28")

        assert payroll.date == datetime(2024, 2, 28)

    def test_payroll_salary_falls_back_to_net_pay(self, factory: RecordFactory) -> None:
        """Test salary backfill from net pay, then zero."""
        assert factory.payroll(member_id="m1", net_pay=2800).salary == Decimal("2800")
        assert factory.payroll(member_id="m1").salary == Decimal("0")

    def test_transaction_type(self, factory: RecordFactory) -> None:
        """Test transaction type coercion and optional member."""
        tx = factory.transaction(amount="12.50", transaction_type="Debit")

        assert tx.transaction_type is TransactionType.DEBIT
        assert tx.member_id is None
        assert tx.amount == Decimal("12.50")

    def test_contract(self, factory: RecordFactory) -> None:
        """Test contract date and status coercion."""
        contract = factory.contract(
            member_id="m1",
            title="Agreement",
            start_date="2022-01-10",
            end_date="2024-01-09",
            status="Expired",
        )

        assert contract.start_date == date(2022, 1, 10)
        assert contract.status is ContractStatus.EXPIRED

    def test_build_dispatches_by_type(self, factory: RecordFactory) -> None:
        """Test build picks the matching builder."""
        loan = factory.build(Loan, {"member_id": "m1", "amount": 1, "record_id": "l-1"})

        assert isinstance(loan, Loan)
        assert loan.id == "l-1"

    def test_revise_merges_and_keeps_id(self, factory: RecordFactory) -> None:
        """Test revise coerces changes and ignores id."""
        member = factory.member(name="A", email="a@example.com", record_id="m1")

        revised = factory.revise(member, {"id": "other", "status": "Inactive", "phone": "555"})

        assert isinstance(revised, Member)
        assert revised.id == "m1"
        assert revised.status is MemberStatus.INACTIVE
        assert revised.phone == "555"
        assert member.status is MemberStatus.ACTIVE

    def test_revise_unknown_field(self, factory: RecordFactory) -> None:
        """Test unknown fields are rejected."""
        member = factory.member(name="A", email="a@example.com")

        with pytest.raises(TypeError):
            factory.revise(member, {"salary": 1})

    def test_revise_blank_date_keeps_current(self, factory: RecordFactory) -> None:
        """Test a blank record date leaves the stored date alone."""
        saving = factory.saving(member_id="m1", amount=10, date="2024-01-05")

        revised = factory.revise(saving, {"date": "", "amount": "20"})

        assert revised.date == datetime(2024, 1, 5)
        assert revised.amount == Decimal("20")

    def test_revise_blank_hire_date_clears_it(self, factory: RecordFactory) -> None:
        """Test a blank hire date removes it."""
        member = factory.member(name="A", email="a@example.com", hire_date="2020-01-02")

        assert factory.revise(member, {"hire_date": ""}).hire_date is None
