"""Field-level validation rules shared by entity definitions."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import AfterValidator

_GUID_PATTERN = re.compile(r"[0-9a-f]{16,}")


def validate_guid(value: str) -> str:
    """Accept strings of at least 16 chars from [0-9a-f]; raise ValueError otherwise."""
    if not _GUID_PATTERN.fullmatch(value):
        raise ValueError("guid must be at least 16 characters of [0-9a-f]")
    return value


Guid = Annotated[str, AfterValidator(validate_guid)]
