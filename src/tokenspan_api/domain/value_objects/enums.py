from __future__ import annotations

from enum import StrEnum


class UserRole(StrEnum):
    ADMIN = "admin"
    USER = "user"


class ExecutionStatus(StrEnum):
    SUCCESS = "success"
    FAILED = "failed"
