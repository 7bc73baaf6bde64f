from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStorage:
    """Key-value storage kept as one JSON object in a local file.

    The whole file is rewritten on every `set` through a temporary file in the
    same folder; it is the on-device analogue of browser local storage.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read storage file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self._path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # A failed write leaves the previous file untouched.
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self._path.parent, suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump(data, f, ensure_ascii=False, indent=4)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise StorageError(f"Cannot write storage file {self._path}: {e}") from e
        logger.debug("Wrote key %s to %s", key, self._path)
