from __future__ import annotations

from dataclasses import dataclass

import pytest

from tokenspan_api.pagination import Cursor, PageRequest, assemble


@dataclass(frozen=True)
class Row:
    key: int

    def cursor(self) -> Cursor:
        return Cursor(self.key)


A, B, C = Row(3), Row(2), Row(1)


@pytest.mark.parametrize(
    ("request_", "rows", "items", "has_previous", "has_next"),
    [
        (PageRequest(first=1), [A, B], [A], False, True),
        (PageRequest(first=1, after=A.cursor()), [A, B, C], [B], True, True),
        (PageRequest(first=1, after=B.cursor()), [B, C], [C], True, False),
        (PageRequest(last=1), [B, C], [C], True, False),
        (PageRequest(last=1, before=C.cursor()), [A, B, C], [B], True, True),
    ],
    ids=["first", "after-A", "after-B", "last", "before-C"],
)
def test_three_row_walk(request_, rows, items, has_previous, has_next):
    page = assemble(rows, request_)
    assert page.items == items
    assert page.has_previous is has_previous
    assert page.has_next is has_next
    assert page.stale is False


def test_first_page_smaller_than_take():
    page = assemble([A, B], PageRequest(first=5))
    assert page.items == [A, B]
    assert (page.has_previous, page.has_next) == (False, False)


def test_last_page_smaller_than_take():
    page = assemble([A, B], PageRequest(last=5))
    assert page.items == [A, B]
    assert (page.has_previous, page.has_next) == (False, False)


def test_after_last_row_is_empty_with_previous():
    page = assemble([C], PageRequest(first=2, after=C.cursor()))
    assert page.items == []
    assert (page.has_previous, page.has_next) == (True, False)


def test_before_first_row_is_empty_with_next():
    page = assemble([A], PageRequest(last=2, before=A.cursor()))
    assert page.items == []
    assert (page.has_previous, page.has_next) == (False, True)


def test_empty_result_set():
    page = assemble([], PageRequest(first=10))
    assert page.items == []
    assert (page.has_previous, page.has_next) == (False, False)


def test_missing_anchor_marks_page_stale():
    page = assemble([B, C], PageRequest(first=1, after=Cursor(99)))
    assert page.stale is True
    assert page.items == []
    assert (page.has_previous, page.has_next) == (False, False)


def test_anchor_on_empty_result_is_stale():
    page = assemble([], PageRequest(last=1, before=B.cursor()))
    assert page.stale is True
    assert (page.has_previous, page.has_next) == (False, False)


def test_zero_take_without_cursor():
    page = assemble([A], PageRequest(default_take=0))
    assert page.items == []
    assert page.has_next is True


def test_zero_take_after_anchor():
    page = assemble([A, B], PageRequest(after=A.cursor(), default_take=0))
    assert page.items == []
    assert (page.has_previous, page.has_next) == (True, False)
