from __future__ import annotations

import re
from typing import Any

from ..core.exceptions import ValidationError


def require_text(value: Any, field_name: str) -> None:
    if value is not None and not isinstance(value, str):
        message = f"{field_name} must be a string"
        raise ValidationError(message, {field_name: message})


def require_non_empty(value: Any, field_name: str, message: str) -> str:
    require_text(value, field_name)
    if not value or not value.strip():
        raise ValidationError(message, {field_name: message})
    return value.strip()


def require_pattern(value: str, field_name: str, pattern: str, message: str) -> str:
    if not re.match(pattern, value):
        raise ValidationError(message, {field_name: message})
    return value
