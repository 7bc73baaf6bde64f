SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
STORAGE_PATH = ""
STORAGE_KEY = "attendanceTracker_subjects"

DB_CONFIG: dict = {}
