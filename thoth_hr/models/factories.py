"""Record construction: id generation, field defaults and value coercion.

Every path that creates a record (store ``add_*`` methods, snapshot
rehydration, seed loading, generators) goes through :class:`RecordFactory`,
so defaults live in one place.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, TypeVar

from thoth_hr.models import (
    Contract,
    ContractStatus,
    Loan,
    LoanStatus,
    Member,
    MemberStatus,
    Payroll,
    PayrollStatus,
    Saving,
    Transaction,
    TransactionType,
    User,
)

DEFAULT_REPAYMENT_TERM = "6 months"

MONEY_FIELDS = frozenset(
    {"amount", "salary", "basic", "allowances", "deductions", "net_pay", "interest_rate"}
)
TIMESTAMP_FIELDS = frozenset({"date"})
CALENDAR_FIELDS = frozenset({"hire_date", "start_date", "end_date"})

STATUS_ENUMS: dict[type, type[Enum]] = {
    Member: MemberStatus,
    Loan: LoanStatus,
    Payroll: PayrollStatus,
    Contract: ContractStatus,
}

R = TypeVar("R")
E = TypeVar("E", bound=Enum)


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def to_decimal(value: Any) -> Decimal | None:
    """Coerce a number or numeric string to a finite ``Decimal``.

    Raises
    ------
    ValueError
        If the value is not a number, or is NaN or infinite.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a number: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return result


def to_timestamp(value: Any) -> datetime | None:
    """Coerce an ISO string, date or datetime to a naive ``datetime``.

    Aware values are converted to UTC before dropping the offset, so
    timestamps written with a trailing ``Z`` compare with local naive ones.
    Blank strings mean "no value".
    """
    if value is None or _is_blank(value):
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    elif not isinstance(value, datetime) and isinstance(value, date):
        value = datetime.combine(value, time())
    if not isinstance(value, datetime):
        raise ValueError(f"Not a timestamp: {value!r}")
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def to_calendar_date(value: Any) -> date | None:
    """Coerce an ISO string, date or datetime to a ``date``."""
    if value is None or _is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return to_timestamp(value).date()


def to_enum(enum_cls: type[E], value: Any) -> E | None:
    """Coerce a display string to a member of ``enum_cls``.

    Matching is exact first, then case-insensitive.
    """
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        lowered = str(value).lower()
        for member in enum_cls:
            if member.value.lower() == lowered:
                return member
        raise


def coerce_fields(record_type: type, values: dict[str, Any]) -> dict[str, Any]:
    """Coerce raw field values to the domain types of ``record_type``."""
    coerced = {}
    for name, value in values.items():
        if name in MONEY_FIELDS:
            value = to_decimal(value)
        elif name in TIMESTAMP_FIELDS:
            value = to_timestamp(value)
        elif name in CALENDAR_FIELDS:
            value = to_calendar_date(value)
        elif name == "status" and record_type in STATUS_ENUMS:
            value = to_enum(STATUS_ENUMS[record_type], value)
        elif name == "transaction_type":
            value = to_enum(TransactionType, value)
        coerced[name] = value
    return coerced


def _new_uuid() -> str:
    return uuid.uuid4().hex


class RecordFactory:
    """Build domain records with fresh ids and default values.

    Parameters
    ----------
    id_factory : Callable[[], str] | None
        Id generator (default: uuid4 hex).
    clock : Callable[[], datetime] | None
        Source of "now" for defaulted dates (default: ``datetime.now``).
    """

    def __init__(
        self,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._new_id = id_factory or _new_uuid
        self._now = clock or datetime.now

    def user(self, name: str, email: str, password: str, record_id: str | None = None) -> User:
        """Build a user."""
        return User(id=record_id or self._new_id(), name=name, email=email, password=password)

    def member(
        self,
        name: str,
        email: str,
        position: str | None = None,
        department: str | None = None,
        phone: str | None = None,
        hire_date: Any = None,
        status: Any = None,
        profile_picture: str | None = None,
        record_id: str | None = None,
    ) -> Member:
        """Build a member; status defaults to Active."""
        values = coerce_fields(Member, {"hire_date": hire_date, "status": status})
        return Member(
            id=record_id or self._new_id(),
            name=name,
            email=email,
            position=position,
            department=department,
            phone=phone,
            hire_date=values["hire_date"],
            status=values["status"] or MemberStatus.ACTIVE,
            profile_picture=profile_picture,
        )

    def loan(
        self,
        member_id: str,
        amount: Any,
        date: Any = None,
        interest_rate: Any = None,
        repayment_term: str | None = None,
        status: Any = None,
        record_id: str | None = None,
    ) -> Loan:
        """Build a loan; rate 0, term "6 months", status Pending, date now."""
        values = coerce_fields(
            Loan,
            {"amount": amount, "date": date, "interest_rate": interest_rate, "status": status},
        )
        return Loan(
            id=record_id or self._new_id(),
            member_id=member_id,
            amount=values["amount"],
            date=values["date"] or self._now(),
            interest_rate=values["interest_rate"] if values["interest_rate"] is not None else Decimal("0"),
            repayment_term=repayment_term if repayment_term is not None else DEFAULT_REPAYMENT_TERM,
            status=values["status"] or LoanStatus.PENDING,
        )

    def saving(
        self,
        member_id: str,
        amount: Any,
        date: Any = None,
        record_id: str | None = None,
    ) -> Saving:
        """Build a saving; date defaults to now."""
        values = coerce_fields(Saving, {"amount": amount, "date": date})
        return Saving(
            id=record_id or self._new_id(),
            member_id=member_id,
            amount=values["amount"],
            date=values["date"] or self._now(),
        )

    def payroll(
        self,
        member_id: str,
        salary: Any = None,
        basic: Any = None,
        allowances: Any = None,
        deductions: Any = None,
        net_pay: Any = None,
        month: str | None = None,
        date: Any = None,
        status: Any = None,
        record_id: str | None = None,
    ) -> Payroll:
        """Build a payroll; salary falls back to net pay then 0, status Pending."""
        values = coerce_fields(
            Payroll,
            {
                "salary": salary,
                "basic": basic,
                "allowances": allowances,
                "deductions": deductions,
                "net_pay": net_pay,
                "date": date,
                "status": status,
            },
        )
        salary_value = values["salary"]
        if salary_value is None:
            salary_value = values["net_pay"] if values["net_pay"] is not None else Decimal("0")
        return Payroll(
            id=record_id or self._new_id(),
            member_id=member_id,
            salary=salary_value,
            date=values["date"] or self._now(),
            status=values["status"] or PayrollStatus.PENDING,
            basic=values["basic"],
            allowances=values["allowances"],
            deductions=values["deductions"],
            net_pay=values["net_pay"],
            month=month,
        )

    def transaction(
        self,
        amount: Any,
        member_id: str | None = None,
        description: str | None = None,
        transaction_type: Any = None,
        date: Any = None,
        record_id: str | None = None,
    ) -> Transaction:
        """Build a transaction; date defaults to now, member is optional."""
        values = coerce_fields(
            Transaction,
            {"amount": amount, "date": date, "transaction_type": transaction_type},
        )
        return Transaction(
            id=record_id or self._new_id(),
            amount=values["amount"],
            date=values["date"] or self._now(),
            member_id=member_id,
            description=description,
            transaction_type=values["transaction_type"],
        )

    def contract(
        self,
        member_id: str,
        title: str,
        start_date: Any,
        end_date: Any,
        status: Any,
        record_id: str | None = None,
    ) -> Contract:
        """Build a contract."""
        values = coerce_fields(
            Contract, {"start_date": start_date, "end_date": end_date, "status": status}
        )
        return Contract(
            id=record_id or self._new_id(),
            member_id=member_id,
            title=title,
            start_date=values["start_date"],
            end_date=values["end_date"],
            status=values["status"],
        )

    def build(self, record_type: type[R], values: dict[str, Any]) -> R:
        """Build a record of ``record_type`` from keyword values."""
        builder = getattr(self, _BUILDERS[record_type])
        return builder(**values)

    def revise(self, record: R, changes: dict[str, Any]) -> R:
        """Return ``record`` with ``changes`` merged in.

        ``id`` is never replaced, and a blank record date keeps the current one.
        """
        changes = {name: value for name, value in changes.items() if name != "id"}
        coerced = coerce_fields(type(record), changes)
        for name in TIMESTAMP_FIELDS:
            if name in coerced and coerced[name] is None:
                del coerced[name]
        return replace(record, **coerced)


_BUILDERS: dict[type, str] = {
    User: "user",
    Member: "member",
    Loan: "loan",
    Saving: "saving",
    Payroll: "payroll",
    Transaction: "transaction",
    Contract: "contract",
}
