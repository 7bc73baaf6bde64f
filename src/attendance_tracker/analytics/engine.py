"""Attendance analytics.

Pure functions over a snapshot of subjects: nothing here mutates its input or
keeps state between calls.
"""

from __future__ import annotations

from typing import List, Sequence

from ..common.formatting import format_percentage, format_threshold
from ..core.constants import COMPLIANCE_THRESHOLD, EXCELLENT_THRESHOLD
from ..core.enums import InsightKind
from ..subjects.model import Subject
from .model import Insight, OverallStats, SubjectStats


def attendance_percentage(subject: Subject) -> float:
    total = subject.total_classes
    if total == 0:
        return 0.0
    return 100 * subject.present_count / total


def subject_stats(subject: Subject) -> SubjectStats:
    return SubjectStats(
        subject=subject,
        percentage=attendance_percentage(subject),
        present=subject.present_count,
        absent=subject.absent_count,
    )


def overall_stats(subjects: Sequence[Subject]) -> OverallStats:
    """Weighted over all records: subjects with more classes weigh more."""
    total_classes = sum(s.total_classes for s in subjects)
    present = sum(s.present_count for s in subjects)
    overall = 100 * present / total_classes if total_classes else 0.0
    return OverallStats(
        overall_percentage=overall,
        total_classes=total_classes,
        present=present,
        absent=total_classes - present,
    )


def ranked_subjects(subjects: Sequence[Subject]) -> List[SubjectStats]:
    # sorted() is stable, so ties keep their input order.
    return sorted((subject_stats(s) for s in subjects), key=lambda st: st.percentage, reverse=True)


def compliance_alerts(subjects: Sequence[Subject], threshold: float = COMPLIANCE_THRESHOLD) -> List[str]:
    alerts = []
    for s in subjects:
        pct = attendance_percentage(s)
        if pct < threshold:
            alerts.append(f"{s.name} attendance is {format_percentage(pct)}% (Below {format_threshold(threshold)}%)")
    return alerts


def insights(subjects: Sequence[Subject], threshold: float = COMPLIANCE_THRESHOLD) -> List[Insight]:
    stats = overall_stats(subjects)
    ranked = ranked_subjects(subjects)
    overall = format_percentage(stats.overall_percentage)
    limit = format_threshold(threshold)
    out: List[Insight] = []

    if stats.overall_percentage >= EXCELLENT_THRESHOLD:
        out.append(
            Insight(
                kind=InsightKind.SUCCESS,
                title="Excellent Attendance",
                message=f"You're doing great with {overall}% overall attendance!",
            )
        )
    elif stats.overall_percentage >= threshold:
        out.append(
            Insight(
                kind=InsightKind.WARNING,
                title="Good Attendance",
                message=f"You're meeting the minimum requirement with {overall}% attendance.",
            )
        )
    else:
        out.append(
            Insight(
                kind=InsightKind.DANGER,
                title="Attendance Alert",
                message=f"Your {overall}% attendance is below the {limit}% requirement.",
            )
        )

    best = next((st for st in ranked if st.total_classes > 0), None)
    if best is not None:
        out.append(
            Insight(
                kind=InsightKind.INFO,
                title="Best Performing Subject",
                message=f"{best.subject.name} has your highest attendance at {format_percentage(best.percentage)}%",
            )
        )

    low = [st for st in ranked if st.percentage < threshold]
    if low:
        out.append(
            Insight(
                kind=InsightKind.WARNING,
                title="Subjects Needing Attention",
                message=f"{len(low)} subject(s) are below {limit}% attendance threshold.",
            )
        )

    return out
