"""Snapshot encoding shared by repositories and the seed loader.

Records are written with camelCase keys (``memberId``, ``hireDate``...),
money as JSON numbers (or decimal strings when a float would lose digits)
and dates as ISO-8601 strings.
"""

from __future__ import annotations

import logging
import re
from dataclasses import fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from thoth_hr.exceptions import SnapshotFormatError
from thoth_hr.models import Contract, Loan, Member, Payroll, Saving, Snapshot, Transaction, User
from thoth_hr.models.factories import RecordFactory

logger = logging.getLogger(__name__)

STATE_VERSION = 0

COLLECTION_TYPES: dict[str, type] = {
    "users": User,
    "members": Member,
    "loans": Loan,
    "savings": Saving,
    "payrolls": Payroll,
    "transactions": Transaction,
    "contracts": Contract,
}

# Python field name -> wire key, where camelCase conversion is not enough
_WIRE_ALIASES = {"transaction_type": "type"}
_PYTHON_ALIASES = {wire: name for name, wire in _WIRE_ALIASES.items()}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel(name: str) -> str:
    """Convert a snake_case field name to its wire key."""
    if name in _WIRE_ALIASES:
        return _WIRE_ALIASES[name]
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_snake(key: str) -> str:
    """Convert a wire key to its snake_case field name."""
    if key in _PYTHON_ALIASES:
        return _PYTHON_ALIASES[key]
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        as_float = float(value)
        # Digits a float cannot hold are kept as a decimal string
        return as_float if Decimal(repr(as_float)) == value else str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def record_to_dict(record: Any) -> dict[str, Any]:
    """Convert a record to its wire dict, omitting unset optional fields."""
    result = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if value is None:
            continue
        result[to_camel(f.name)] = serialize_value(value)
    return result


def record_from_dict(
    record_type: type, data: dict[str, Any], factory: RecordFactory
) -> Any:
    """Build a record from its wire dict, applying factory defaults.

    Unknown keys are ignored; the stored ``id`` is kept.
    """
    accepted = {f.name for f in fields(record_type)}
    values: dict[str, Any] = {}
    for key, value in data.items():
        name = to_snake(key)
        if name == "id":
            values["record_id"] = value
        elif name in accepted:
            values[name] = value
    return factory.build(record_type, values)


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, list[dict[str, Any]]]:
    """Encode every collection of ``snapshot``."""
    return {
        name: [record_to_dict(record) for record in getattr(snapshot, name)]
        for name in COLLECTION_TYPES
    }


def snapshot_from_dict(
    data: dict[str, Any], factory: RecordFactory | None = None
) -> Snapshot:
    """Decode a snapshot; absent collections decode as empty.

    A record that cannot be decoded is logged and skipped, the rest of its
    collection is kept.

    Raises
    ------
    SnapshotFormatError
        If the payload is not an object or a collection is not a list.
    """
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"Snapshot must be an object, got {type(data).__name__}")

    factory = factory or RecordFactory()
    collections = {}
    for name, record_type in COLLECTION_TYPES.items():
        raw = data.get(name) or []
        if not isinstance(raw, list):
            raise SnapshotFormatError(f"Collection {name} must be a list")
        collections[name] = tuple(_decode_records(name, record_type, raw, factory))
    return Snapshot(**collections)


def wrap_state(snapshot: Snapshot) -> dict[str, Any]:
    """Build the persisted envelope stored under a namespace key."""
    return {"state": snapshot_to_dict(snapshot), "version": STATE_VERSION}


def unwrap_state(payload: Any) -> dict[str, Any]:
    """Extract the state object from a persisted envelope.

    A payload without ``state`` is taken to be the bare state itself.
    """
    if isinstance(payload, dict) and "state" in payload:
        return payload["state"]
    return payload


def _decode_records(
    name: str, record_type: type, raw: list[Any], factory: RecordFactory
) -> list[Any]:
    records = []
    for position, item in enumerate(raw):
        try:
            records.append(record_from_dict(record_type, item, factory))
        except (AttributeError, TypeError, ValueError) as exc:
            record_id = item.get("id") if isinstance(item, dict) else None
            logger.warning(
                "Skipping undecodable record %s[%d] (id=%s): %s", name, position, record_id, exc
            )
    return records
