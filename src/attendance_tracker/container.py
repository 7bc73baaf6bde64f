from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .analytics.dashboard import DashboardService
from .analytics.monitor import ComplianceMonitor
from .core.constants import COMPLIANCE_THRESHOLD, STORAGE_KEY
from .storage.repository import KeyValueStorage
from .subjects.store import AttendanceStore


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    store: AttendanceStore
    monitor: ComplianceMonitor
    dashboard_service: DashboardService


def build_storage(settings: ModuleType) -> KeyValueStorage:
    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()

    if backend == "memory":
        from .storage.memory_storage import InMemoryKeyValueStorage

        return InMemoryKeyValueStorage()

    if backend == "file":
        from .storage.file_storage import JsonFileKeyValueStorage

        return JsonFileKeyValueStorage(getattr(settings, "STORAGE_PATH"))

    if backend == "mysql":
        from .database.connection import DatabaseConnection, DBConfig
        from .storage.mysql_storage import MySQLKeyValueStorage

        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        storage = MySQLKeyValueStorage(conn)
        storage.ensure_schema()
        return storage

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(settings: ModuleType, *, storage: Optional[KeyValueStorage] = None) -> Container:
    storage = storage if storage is not None else build_storage(settings)
    key = str(getattr(settings, "STORAGE_KEY", STORAGE_KEY))

    store = AttendanceStore.load(storage, key=key)
    monitor = ComplianceMonitor(COMPLIANCE_THRESHOLD)
    store.add_listener(monitor)
    # Alerts for data loaded at startup, before the first mutation.
    monitor(store.list_subjects())

    return Container(
        storage=storage,
        store=store,
        monitor=monitor,
        dashboard_service=DashboardService(threshold=COMPLIANCE_THRESHOLD),
    )
