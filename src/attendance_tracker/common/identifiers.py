from __future__ import annotations

import uuid


def new_id() -> str:
    """Random opaque identifier, safe for many ids created in the same instant."""
    return uuid.uuid4().hex
