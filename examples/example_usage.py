"""Example: use the store and analytics directly (no Flask).

Controllers are a thin layer; all rules live in the store and analytics modules.
"""

from datetime import date

from attendance_tracker.analytics.engine import compliance_alerts, insights, overall_stats
from attendance_tracker.storage.memory_storage import InMemoryKeyValueStorage
from attendance_tracker.subjects.entry import batch_records
from attendance_tracker.subjects.store import AttendanceStore


def main():
    store = AttendanceStore(InMemoryKeyValueStorage())
    math = store.create_subject("Mathematics", "math101")
    store.append_records(
        math.subject_id,
        batch_records(
            [
                (date(2024, 3, 4), "present"),
                (date(2024, 3, 5), "present"),
                (date(2024, 3, 6), "absent"),
            ]
        ),
    )

    subjects = store.list_subjects()
    print(overall_stats(subjects))
    print(compliance_alerts(subjects))
    for insight in insights(subjects):
        print(f"[{insight.kind.value}] {insight.title}: {insight.message}")


if __name__ == "__main__":
    main()
