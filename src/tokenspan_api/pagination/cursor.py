"""Opaque pagination cursors.

Cursor format: urlsafe-base64("<integer sort key>|<row uuid>") with padding
stripped. The uuid part is optional; when present it orders rows that share a
sort key. Entities derive the key from ``created_at`` as microseconds since
the epoch and use their own ``id`` as the tiebreak.
"""
from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Protocol
from uuid import UUID

from tokenspan_api.pagination.errors import InvalidCursorEncoding, InvalidCursorKey

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
SEPARATOR = "|"
_MICROSECOND = timedelta(microseconds=1)


def encode_cursor(key: int, row_id: UUID | None = None) -> str:
    raw = str(key) if row_id is None else f"{key}{SEPARATOR}{row_id}"
    return base64.urlsafe_b64encode(raw.encode()).decode().rstrip("=")


def _parse_key(raw: str) -> int:
    try:
        key = int(raw)
    except ValueError as exc:
        raise InvalidCursorKey(f"Cursor does not hold an integer key: {raw!r}") from exc
    if str(key) != raw:
        # Only the canonical decimal form round-trips.
        raise InvalidCursorKey(f"Cursor key is not canonical: {raw!r}")
    return key


def _parse_row_id(raw: str) -> UUID:
    try:
        row_id = UUID(raw)
    except ValueError as exc:
        raise InvalidCursorKey(f"Cursor does not hold a row id: {raw!r}") from exc
    if str(row_id) != raw:
        raise InvalidCursorKey(f"Cursor row id is not canonical: {raw!r}")
    return row_id


def decode_cursor(token: str) -> tuple[int, UUID | None]:
    # Restore base64 padding if it was stripped
    padded = token + "=" * ((4 - len(token) % 4) % 4)
    try:
        raw = base64.b64decode(padded, altchars=b"-_", validate=True).decode()
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise InvalidCursorEncoding(f"Cursor is not valid base64: {token!r}") from exc

    key_part, sep, id_part = raw.partition(SEPARATOR)
    key = _parse_key(key_part)
    if not sep:
        return key, None
    return key, _parse_row_id(id_part)


@dataclass(frozen=True, slots=True)
class Cursor:
    """A position in a result set ordered by ``(key, row_id)``."""

    key: int
    row_id: UUID | None = None

    def encode(self) -> str:
        return encode_cursor(self.key, self.row_id)

    @classmethod
    def decode(cls, token: str) -> Cursor:
        key, row_id = decode_cursor(token)
        return cls(key, row_id)

    @classmethod
    def from_datetime(cls, value: datetime, row_id: UUID | None = None) -> Cursor:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return cls((value - EPOCH) // _MICROSECOND, row_id)

    def to_datetime(self) -> datetime:
        try:
            return EPOCH + self.key * _MICROSECOND
        except OverflowError as exc:
            raise InvalidCursorKey(f"Cursor key out of range: {self.key}") from exc

    def __str__(self) -> str:
        return self.encode()


class Cursored(Protocol):
    """Anything that can report its own position in a result set."""

    def cursor(self) -> Cursor: ...
