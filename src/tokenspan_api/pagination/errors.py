from __future__ import annotations


class PaginationError(Exception):
    """Base error for malformed or unsatisfiable page requests."""

    code = "pagination_error"

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class InvalidPageSize(PaginationError):
    code = "invalid_page_size"


class InvalidCursorPair(PaginationError):
    code = "invalid_cursor_pair"


class InvalidCursorEncoding(PaginationError):
    code = "invalid_cursor_encoding"


class InvalidCursorKey(PaginationError):
    code = "invalid_cursor_key"


class StaleCursorError(PaginationError):
    """The anchor row behind an after/before cursor no longer exists."""

    code = "stale_cursor"
