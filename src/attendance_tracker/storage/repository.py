from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Persistence collaborator: a flat string-to-string store.

    Note (DIP): the subject store depends on this interface, not on a concrete
    file or database backend.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
