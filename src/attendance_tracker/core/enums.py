from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status of a single class observation."""

    PRESENT = "present"
    ABSENT = "absent"


class InsightKind(str, Enum):
    """Severity of an analytics insight, used by the UI for colouring."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"


class PerformanceTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    CRITICAL = "critical"
