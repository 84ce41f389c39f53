from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from tokenspan_api.pagination.assembler import AssembledPage
from tokenspan_api.pagination.cursor import Cursor, Cursored

T = TypeVar("T", bound=Cursored)


@dataclass(frozen=True, slots=True)
class Edge(Generic[T]):
    node: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class Connection(Generic[T]):
    """Relay-style page: edges plus page info and the unpaginated total."""

    edges: list[Edge[T]] = field(default_factory=list)
    has_previous: bool = False
    has_next: bool = False
    total_count: int = 0

    @classmethod
    def from_page(cls, page: AssembledPage[T], total_count: int) -> Connection[T]:
        return cls(
            edges=[Edge(node=item, cursor=item.cursor()) for item in page.items],
            has_previous=page.has_previous,
            has_next=page.has_next,
            total_count=total_count,
        )

    @property
    def items(self) -> list[T]:
        return [edge.node for edge in self.edges]

    @property
    def start_cursor(self) -> Cursor | None:
        return self.edges[0].cursor if self.edges else None

    @property
    def end_cursor(self) -> Cursor | None:
        return self.edges[-1].cursor if self.edges else None
