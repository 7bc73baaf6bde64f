from __future__ import annotations

import itertools
from datetime import date, datetime, timedelta

import pytest

from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.storage.memory_storage import InMemoryKeyValueStorage
from attendance_tracker.subjects.model import AttendanceRecord, Subject
from attendance_tracker.subjects.store import AttendanceStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def store(storage, fixed_now) -> AttendanceStore:
    counter = itertools.count(1)
    return AttendanceStore(storage, clock=lambda: fixed_now, id_factory=lambda: f"s{next(counter)}")


@pytest.fixture
def make_subject():
    """Build a Subject whose records follow the given "P"/"A" pattern."""

    def _make(name: str, pattern: str = "", *, subject_id: str | None = None) -> Subject:
        start = date(2026, 1, 5)
        records = tuple(
            AttendanceRecord(
                record_id=f"r{i}",
                date=start + timedelta(days=i),
                status=AttendanceStatus.PRESENT if ch == "P" else AttendanceStatus.ABSENT,
            )
            for i, ch in enumerate(pattern)
        )
        return Subject(
            subject_id=subject_id or name.lower(),
            name=name,
            code=name.upper().replace(" ", "")[:8],
            created_at=datetime(2026, 1, 1, 8, 0, 0),
            records=records,
        )

    return _make
