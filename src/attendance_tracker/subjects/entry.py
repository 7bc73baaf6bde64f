"""Building attendance records from single and batch entry forms."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple, Union

from ..common.datetime_utils import parse_iso_date
from ..common.identifiers import new_id
from ..common.validators import require_text
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord

DateInput = Union[date, str]
StatusInput = Union[AttendanceStatus, str]


def parse_status(value: StatusInput) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        message = "Attendance status must be 'present' or 'absent'"
        raise ValidationError(message, {"status": message})


def parse_date(value: DateInput) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value))
    except ValueError:
        message = "Date must be in YYYY-MM-DD format"
        raise ValidationError(message, {"date": message})


def new_record(record_date: DateInput, status: StatusInput, note: Optional[str] = None) -> AttendanceRecord:
    """Single entry: one record with an optional note (blank notes are dropped)."""
    require_text(note, "note")
    note = note.strip() if note else None
    return AttendanceRecord(
        record_id=new_id(),
        date=parse_date(record_date),
        status=parse_status(status),
        note=note or None,
    )


def batch_records(items: Iterable[Tuple[DateInput, StatusInput]]) -> List[AttendanceRecord]:
    """Batch entry: several dated records at once, without notes.

    A batch may not list the same date twice. Dates already recorded for the
    subject in earlier sessions are still accepted.
    """
    records: List[AttendanceRecord] = []
    seen: set[date] = set()
    for record_date, status in items:
        d = parse_date(record_date)
        if d in seen:
            message = f"Date {d.isoformat()} is listed more than once"
            raise ValidationError(message, {"dates": message})
        seen.add(d)
        records.append(AttendanceRecord(record_id=new_id(), date=d, status=parse_status(status)))

    if not records:
        message = "Add at least one date"
        raise ValidationError(message, {"dates": message})
    return records
