"""CSV export of table views."""

import csv
import io
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Sequence

from thoth_hr.models import Saving
from thoth_hr.views.lookup import MemberDirectory
from thoth_hr.views.reports import MemberReportRow

REPORT_HEADER = ("Member", "Total Loans", "Total Payroll Paid")
SAVINGS_HEADER = ("Member", "Amount", "Date")


def rows_to_csv(header: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    """Render a header and rows as CSV text.

    Cells containing commas, quotes or newlines are quoted by the ``csv``
    module.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(header)
    for row in rows:
        writer.writerow([_cell(value) for value in row])
    return buffer.getvalue()


def member_report_csv(rows: Iterable[MemberReportRow]) -> str:
    """Export member report rows."""
    return rows_to_csv(
        REPORT_HEADER,
        ((row.name, row.total_loans, row.total_payroll) for row in rows),
    )


def savings_csv(savings: Iterable[Saving], directory: MemberDirectory) -> str:
    """Export savings with resolved member names."""
    return rows_to_csv(
        SAVINGS_HEADER,
        ((directory.name_of(s.member_id), s.amount, s.date) for s in savings),
    )


def write_csv(path: str | Path, text: str) -> Path:
    """Write CSV text to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8", newline="")
    return path


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value
