"""Cursor-based, bidirectional pagination shared by every list query."""
from tokenspan_api.pagination.assembler import AssembledPage, assemble
from tokenspan_api.pagination.connection import Connection, Edge
from tokenspan_api.pagination.cursor import Cursor, Cursored, decode_cursor, encode_cursor
from tokenspan_api.pagination.errors import (
    InvalidCursorEncoding,
    InvalidCursorKey,
    InvalidCursorPair,
    InvalidPageSize,
    PaginationError,
    StaleCursorError,
)
from tokenspan_api.pagination.paginator import StaleCursorPolicy, paginate
from tokenspan_api.pagination.planner import FetchWindow, plan
from tokenspan_api.pagination.request import DEFAULT_TAKE, Direction, PageRequest

__all__ = [
    "DEFAULT_TAKE",
    "AssembledPage",
    "Connection",
    "Cursor",
    "Cursored",
    "Direction",
    "Edge",
    "FetchWindow",
    "InvalidCursorEncoding",
    "InvalidCursorKey",
    "InvalidCursorPair",
    "InvalidPageSize",
    "PageRequest",
    "PaginationError",
    "StaleCursorError",
    "StaleCursorPolicy",
    "assemble",
    "decode_cursor",
    "encode_cursor",
    "paginate",
    "plan",
]
