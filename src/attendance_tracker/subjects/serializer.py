"""JSON (de)serialisation of the subject collection.

The stored layout uses camelCase keys with ISO-8601 dates so data written by
earlier browser-based versions of the tracker loads unchanged.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from ..common.datetime_utils import parse_iso_date, parse_iso_datetime
from ..core.enums import AttendanceStatus
from ..core.exceptions import StorageError
from .model import AttendanceRecord, Subject


def record_to_dict(record: AttendanceRecord) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": record.record_id,
        "date": record.date.isoformat(),
        "status": record.status.value,
    }
    if record.note is not None:
        data["note"] = record.note
    return data


def subject_to_dict(subject: Subject) -> Dict[str, Any]:
    return {
        "id": subject.subject_id,
        "name": subject.name,
        "code": subject.code,
        "records": [record_to_dict(r) for r in subject.records],
        "createdAt": subject.created_at.isoformat(),
    }


def record_from_dict(data: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(data["id"]),
        date=parse_iso_date(str(data["date"])),
        status=AttendanceStatus(data["status"]),
        note=data.get("note"),
    )


def subject_from_dict(data: Dict[str, Any]) -> Subject:
    return Subject(
        subject_id=str(data["id"]),
        name=str(data["name"]),
        code=str(data["code"]),
        created_at=parse_iso_datetime(str(data["createdAt"])),
        records=tuple(record_from_dict(r) for r in data.get("records") or []),
    )


def dumps_subjects(subjects: Sequence[Subject]) -> str:
    return json.dumps([subject_to_dict(s) for s in subjects], ensure_ascii=False)


def loads_subjects(raw: str) -> List[Subject]:
    try:
        payload = json.loads(raw)
        if not isinstance(payload, list):
            raise ValueError("expected a JSON list of subjects")
        return [subject_from_dict(item) for item in payload]
    except (ValueError, KeyError, TypeError) as e:
        raise StorageError(f"Stored subjects could not be decoded: {e}") from e
