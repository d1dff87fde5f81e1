from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from typebox.typing.document import Document

PageListener = Callable[[int], None]


@dataclass(frozen=True)
class Cursor:
    """Position on the document's current page."""

    column: int = 0
    row: int = 0


def advance(document: Document, cursor: Cursor, on_page_change: Optional[PageListener] = None) -> Cursor:
    """Step one cell forward, wrapping across lines and pages.

    The last cell of the document is sticky: the cursor comes back unchanged
    and no page change is reported.
    """
    page = document.pages[document.current_page]
    column = cursor.column + 1
    if column < len(page[cursor.row]):
        return Cursor(column=column, row=cursor.row)
    row = cursor.row + 1
    if row < len(page):
        return Cursor(column=0, row=row)
    if document.current_page + 1 >= document.page_count:
        return cursor
    document.current_page += 1
    if on_page_change is not None:
        on_page_change(document.current_page)
    return Cursor()


def retreat(document: Document, cursor: Cursor, on_page_change: Optional[PageListener] = None) -> Cursor:
    """Step one cell back; clamps at the first cell of the first page."""
    if cursor.column > 0:
        return Cursor(column=cursor.column - 1, row=cursor.row)
    page = document.pages[document.current_page]
    if cursor.row > 0:
        row = cursor.row - 1
        return Cursor(column=len(page[row]) - 1, row=row)
    if document.current_page == 0:
        return Cursor(column=0, row=cursor.row)
    document.current_page -= 1
    if on_page_change is not None:
        on_page_change(document.current_page)
    page = document.pages[document.current_page]
    row = len(page) - 1
    return Cursor(column=len(page[row]) - 1, row=row)
