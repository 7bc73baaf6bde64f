from __future__ import annotations

import json
from datetime import date, datetime

import pytest

from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.core.exceptions import StorageError
from attendance_tracker.subjects.serializer import dumps_subjects, loads_subjects


def test_dumps_uses_iso_dates_and_omits_missing_notes(make_subject):
    subject = make_subject("Math", "PA")

    payload = json.loads(dumps_subjects([subject]))

    assert payload[0]["id"] == "math"
    assert payload[0]["createdAt"] == "2026-01-01T08:00:00"
    assert payload[0]["records"][0] == {"id": "r0", "date": "2026-01-05", "status": "present"}
    assert payload[0]["records"][1]["status"] == "absent"


def test_loads_browser_era_payload():
    raw = json.dumps(
        [
            {
                "id": "1718000000000",
                "name": "Mathematics",
                "code": "MATH101",
                "records": [
                    {"id": "1718000000001", "date": "2024-06-10T00:00:00.000Z", "status": "present", "note": "quiz"},
                    {"id": "1718000000002-0", "date": "2024-06-11T00:00:00.000Z", "status": "absent"},
                ],
                "createdAt": "2024-06-10T06:13:20.000Z",
            }
        ]
    )

    [subject] = loads_subjects(raw)

    assert subject.subject_id == "1718000000000"
    assert subject.records[0].date == date(2024, 6, 10)
    assert subject.records[0].note == "quiz"
    assert subject.records[1].status == AttendanceStatus.ABSENT
    assert subject.created_at.year == 2024
    assert isinstance(subject.created_at, datetime)


CORRUPT_PAYLOADS = [
    "not json",
    '{"id": 1}',
    '[{"name": "x"}]',
    json.dumps(
        [
            {
                "id": "1",
                "name": "x",
                "code": "X",
                "createdAt": "2024-01-01",
                "records": [{"id": "r", "date": "2024-01-01", "status": "late"}],
            }
        ]
    ),
]


@pytest.mark.parametrize("raw", CORRUPT_PAYLOADS)
def test_loads_rejects_corrupt_payload(raw):
    with pytest.raises(StorageError):
        loads_subjects(raw)
