from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from tokenspan_api.pagination import Connection

T = TypeVar("T", bound=BaseModel)


class PageInfoResponse(BaseModel):
    has_next_page: bool = Field(alias="hasNextPage")
    has_previous_page: bool = Field(alias="hasPreviousPage")
    start_cursor: str | None = Field(None, alias="startCursor")
    end_cursor: str | None = Field(None, alias="endCursor")

    model_config = ConfigDict(populate_by_name=True)


class ConnectionResponse(BaseModel, Generic[T]):
    items: list[T]  # type: ignore[type-var]
    page_info: PageInfoResponse = Field(alias="pageInfo")
    total_count: int = Field(alias="totalCount")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_connection(cls, connection: Connection[Any], item_type: type[T]) -> ConnectionResponse[T]:
        start, end = connection.start_cursor, connection.end_cursor
        return cls(
            items=[item_type.model_validate(node, from_attributes=True) for node in connection.items],
            page_info=PageInfoResponse(
                has_next_page=connection.has_next,
                has_previous_page=connection.has_previous,
                start_cursor=start.encode() if start else None,
                end_cursor=end.encode() if end else None,
            ),
            total_count=connection.total_count,
        )