from __future__ import annotations

from datetime import date, datetime

import pytest

from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.core.exceptions import ValidationError
from attendance_tracker.subjects.entry import batch_records, new_record, parse_date, parse_status


def test_new_record_single_entry_with_note():
    rec = new_record("2026-02-02", "absent", "  sick leave ")

    assert rec.date == date(2026, 2, 2)
    assert rec.status == AttendanceStatus.ABSENT
    assert rec.note == "sick leave"
    assert rec.record_id


def test_new_record_blank_note_is_dropped():
    assert new_record(date(2026, 2, 2), AttendanceStatus.PRESENT, "   ").note is None


def test_new_record_bad_status():
    with pytest.raises(ValidationError) as exc:
        new_record("2026-02-02", "late")

    assert "status" in exc.value.errors


def test_parse_date_accepts_timestamps_and_datetimes():
    assert parse_date("2024-01-05T00:00:00.000Z") == date(2024, 1, 5)
    assert parse_date(datetime(2024, 1, 5, 23, 59)) == date(2024, 1, 5)


def test_parse_date_rejects_garbage():
    with pytest.raises(ValidationError) as exc:
        parse_date("05/01/2024")

    assert "date" in exc.value.errors


def test_parse_status_accepts_enum_and_string():
    assert parse_status("present") is AttendanceStatus.PRESENT
    assert parse_status(AttendanceStatus.ABSENT) is AttendanceStatus.ABSENT


def test_batch_records_keep_order_and_get_distinct_ids():
    records = batch_records(
        [
            ("2026-02-03", "present"),
            ("2026-02-01", "absent"),
            ("2026-02-02", "present"),
        ]
    )

    assert [r.date.day for r in records] == [3, 1, 2]
    assert [r.status for r in records] == [AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.PRESENT]
    assert len({r.record_id for r in records}) == 3
    assert all(r.note is None for r in records)


def test_batch_records_reject_repeated_date():
    with pytest.raises(ValidationError) as exc:
        batch_records([("2026-02-03", "present"), (date(2026, 2, 3), "absent")])

    assert "dates" in exc.value.errors


def test_batch_records_reject_empty_batch():
    with pytest.raises(ValidationError):
        batch_records([])


def test_parse_date_rejects_trailing_text():
    with pytest.raises(ValidationError) as exc:
        parse_date("2026-02-02garbage")

    assert "date" in exc.value.errors


def test_new_record_non_string_note():
    with pytest.raises(ValidationError) as exc:
        new_record("2026-02-02", "present", 5)

    assert set(exc.value.errors) == {"note"}
