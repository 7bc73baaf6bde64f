from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import InsightKind
from ..subjects.model import Subject


@dataclass(frozen=True)
class OverallStats:
    overall_percentage: float
    total_classes: int
    present: int
    absent: int


@dataclass(frozen=True)
class SubjectStats:
    """Read-model: a subject annotated with its attendance figures."""

    subject: Subject
    percentage: float
    present: int
    absent: int

    @property
    def total_classes(self) -> int:
        return self.present + self.absent


@dataclass(frozen=True)
class Insight:
    kind: InsightKind
    title: str
    message: str
