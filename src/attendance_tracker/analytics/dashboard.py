from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..common.formatting import format_percentage
from ..core.constants import COMPLIANCE_THRESHOLD, EXCELLENT_THRESHOLD
from ..core.enums import PerformanceTier
from ..subjects.model import Subject
from .engine import compliance_alerts, insights, overall_stats, ranked_subjects, subject_stats
from .model import Insight, OverallStats, SubjectStats


def performance_tier(percentage: float, threshold: float = COMPLIANCE_THRESHOLD) -> PerformanceTier:
    if percentage >= EXCELLENT_THRESHOLD:
        return PerformanceTier.EXCELLENT
    if percentage >= threshold:
        return PerformanceTier.GOOD
    return PerformanceTier.CRITICAL


def compliance_status(alerts: Sequence[str]) -> str:
    if not alerts:
        return "Good"
    return f"{len(alerts)} Alert{'s' if len(alerts) > 1 else ''}"


@dataclass(frozen=True)
class DashboardData:
    overall: OverallStats
    subject_count: int
    cards: List[dict]
    ranked: List[dict]
    alerts: List[str]
    compliance_status: str
    insights: List[Insight]


class DashboardService:
    """Use case: build everything the main screen shows from one snapshot."""

    def __init__(self, *, threshold: float = COMPLIANCE_THRESHOLD):
        self._threshold = threshold

    def build(self, subjects: Sequence[Subject]) -> DashboardData:
        alerts = compliance_alerts(subjects, self._threshold)
        return DashboardData(
            overall=overall_stats(subjects),
            subject_count=len(subjects),
            cards=[self._to_ui(subject_stats(s)) for s in subjects],
            ranked=[self._to_ui(st) for st in ranked_subjects(subjects)],
            alerts=alerts,
            compliance_status=compliance_status(alerts),
            insights=insights(subjects, self._threshold),
        )

    def _to_ui(self, st: SubjectStats) -> dict:
        return {
            "id": st.subject.subject_id,
            "name": st.subject.name,
            "code": st.subject.code,
            "percentage": round(st.percentage, 2),
            "percentage_label": f"{format_percentage(st.percentage)}%",
            "present": st.present,
            "absent": st.absent,
            "total_classes": st.total_classes,
            "tier": performance_tier(st.percentage, self._threshold).value,
        }
