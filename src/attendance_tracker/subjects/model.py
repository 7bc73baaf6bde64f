from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one dated present/absent observation for a subject.

    Records are never edited once created; a subject only grows by appending.
    """

    record_id: str
    date: date
    status: AttendanceStatus
    note: Optional[str] = None


@dataclass(frozen=True)
class Subject:
    """Domain entity: a tracked course with its own attendance history.

    `records` keeps insertion order, which is entry order and not necessarily
    date order.
    """

    subject_id: str
    name: str
    code: str
    created_at: datetime
    records: Tuple[AttendanceRecord, ...] = ()

    @property
    def present_count(self) -> int:
        return sum(1 for r in self.records if r.status == AttendanceStatus.PRESENT)

    @property
    def absent_count(self) -> int:
        return sum(1 for r in self.records if r.status == AttendanceStatus.ABSENT)

    @property
    def total_classes(self) -> int:
        return len(self.records)
