from __future__ import annotations

import logging
from typing import List

from typebox.config import ConfigError
from typebox.typing.document import Cell, Document, Line, Page

logger = logging.getLogger(__name__)


class _PageBuilder:
    """Accumulates cells into lines and lines into pages.

    Lines are closed lazily, when a cell needs room on a full line, so the
    document never ends with an empty line or page.
    """

    def __init__(self, columns: int, rows: int) -> None:
        self.columns = columns
        self.rows = rows
        self.pages: List[Page] = []
        self.page: Page = []
        self.line: Line = []

    def room(self) -> int:
        return self.columns - len(self.line)

    def place_word(self, word: str) -> None:
        if len(word) > self.room():
            self.break_line()
        for char in word:
            if not self.room():
                self.break_line()
            self.line.append(Cell(expected=char))

    def place_space(self) -> None:
        if not self.room():
            # The break stands in for the space.
            self.line[-1].wrapped_space = True
            self.break_line()
            return
        self.line.append(Cell(expected=" "))

    def break_line(self) -> None:
        trimmed = False
        while self.line and self.line[-1].expected == " ":
            self.line.pop()
            trimmed = True
        if not self.line:
            return
        if trimmed:
            self.line[-1].wrapped_space = True
        if len(self.page) >= self.rows:
            self.pages.append(self.page)
            self.page = []
        self.page.append(self.line)
        self.line = []

    def finish(self) -> List[Page]:
        self.break_line()
        if self.page:
            self.pages.append(self.page)
            self.page = []
        return self.pages or [[]]


def layout(text: str, columns: int, rows: int) -> Document:
    if columns <= 0 or rows <= 0:
        raise ConfigError(f"textbox must be at least 1x1, got {columns}x{rows}")

    builder = _PageBuilder(columns, rows)
    word_count = 0
    word_start = 0
    for i, char in enumerate(text):
        if char != " ":
            continue
        word = text[word_start:i]
        if word:
            word_count += 1
        builder.place_word(word)
        builder.place_space()
        word_start = i + 1

    tail = text[word_start:]
    if tail:
        word_count += 1
    builder.place_word(tail)

    document = Document(pages=builder.finish(), word_count=word_count)
    if not document.is_empty:
        document.pages[-1][-1][-1].is_last = True
    logger.debug(
        "Laid out %d characters into %d page(s) of %dx%d",
        len(text),
        document.page_count,
        columns,
        rows,
    )
    return document
