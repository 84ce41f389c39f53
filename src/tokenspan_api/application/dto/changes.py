from __future__ import annotations

from dataclasses import fields
from typing import Any


def changed_fields(dto: Any) -> dict[str, Any]:
    """Fields of a partial-update DTO that were actually supplied (not None)."""
    return {
        f.name: getattr(dto, f.name)
        for f in fields(dto)
        if getattr(dto, f.name) is not None
    }
