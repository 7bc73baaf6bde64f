from __future__ import annotations

import importlib

from attendance_tracker.config import get_settings_module
from attendance_tracker.database.connection import DatabaseConnection, DBConfig
from attendance_tracker.storage.mysql_storage import MySQLKeyValueStorage


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    MySQLKeyValueStorage(conn).ensure_schema()
    print(
        "OK: kv_store ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
