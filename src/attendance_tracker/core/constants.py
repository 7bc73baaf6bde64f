"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

COMPLIANCE_THRESHOLD = 75
EXCELLENT_THRESHOLD = 85
STORAGE_KEY = "attendanceTracker_subjects"
SUBJECT_CODE_PATTERN = r"^[A-Z0-9]+$"
