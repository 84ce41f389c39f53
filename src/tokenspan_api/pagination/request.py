from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tokenspan_api.pagination.cursor import Cursor

DEFAULT_TAKE = 20


class Direction(StrEnum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True, slots=True)
class PageRequest:
    """Relay connection arguments for one list query.

    ``first``/``after`` page forward, ``last``/``before`` page backward.
    When neither ``first`` nor ``last`` is given the page size falls back to
    ``default_take``.
    """

    first: int | None = None
    after: Cursor | None = None
    last: int | None = None
    before: Cursor | None = None
    default_take: int = DEFAULT_TAKE

    @classmethod
    def from_args(
        cls,
        *,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
        default_take: int = DEFAULT_TAKE,
    ) -> PageRequest:
        """Build a request from raw wire arguments, decoding cursor tokens."""
        return cls(
            first=first,
            after=Cursor.decode(after) if after is not None else None,
            last=last,
            before=Cursor.decode(before) if before is not None else None,
            default_take=default_take,
        )

    @property
    def take(self) -> int:
        if self.first is not None:
            return self.first
        if self.last is not None:
            return self.last
        return self.default_take

    @property
    def direction(self) -> Direction:
        if self.last is not None or self.before is not None:
            return Direction.BACKWARD
        return Direction.FORWARD

    @property
    def anchor(self) -> Cursor | None:
        return self.after if self.after is not None else self.before

    @property
    def is_forward_bounded(self) -> bool:
        return self.first is not None or self.after is not None

    @property
    def is_backward_bounded(self) -> bool:
        return self.last is not None or self.before is not None
