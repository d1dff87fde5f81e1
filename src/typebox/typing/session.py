from __future__ import annotations

import logging
import time
from collections import deque
from enum import Enum
from typing import Callable, Deque, Iterator, Optional

from typebox.config import TextboxSettings
from typebox.typing import keys
from typebox.typing.cursor import Cursor, advance, retreat
from typebox.typing.document import Cell, Document
from typebox.typing.events import (
    MoveCursor,
    PutChar,
    RenderEvent,
    SetDim,
    ShowResult,
    Style,
    display_char,
    judge,
    styled_page,
)
from typebox.typing.layout import layout

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    TYPING = "typing"
    FINISHED = "finished"


def count_correct_words(document: Document) -> int:
    """Count words whose every non-space cell was typed correctly.

    Spaces always count as matched. A word ends at a space, at a space dropped
    by line wrapping, or at the end of the document.
    """
    words = 0
    intact = True
    for cell in document.cells():
        if cell.expected != " " and cell.typed != cell.expected:
            intact = False
        if cell.expected == " " or cell.wrapped_space or cell.is_last:
            if intact:
                words += 1
            intact = True
    return words


class TypingSession:
    def __init__(
        self,
        settings: TextboxSettings,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings
        self.clock = clock
        self.document = layout(settings.text, settings.columns, settings.rows)
        self.cursor = Cursor()
        self.state = SessionState.IDLE
        self.started_at: Optional[float] = None
        self.word_count = 0
        self.wpm: Optional[float] = None
        self.running = True
        self._events: Deque[RenderEvent] = deque()

    def events(self) -> Iterator[RenderEvent]:
        while self._events:
            yield self._events.popleft()

    def current_cell(self) -> Cell:
        return self.document.cell_at(self.document.current_page, self.cursor.row, self.cursor.column)

    def redraw(self) -> None:
        self._queue_page(self.document.current_page)
        self._queue_cursor()

    def handle_key(self, code: int) -> None:
        if code in keys.QUIT_KEYS:
            logger.info("Quit requested")
            self.running = False
        elif code in keys.RESTART_KEYS:
            self.restart()
        elif self.state is SessionState.FINISHED or code in keys.IGNORED_KEYS:
            return
        elif self.document.is_empty:
            logger.debug("Ignoring key %d on an empty document", code)
        elif code in keys.BACKSPACE_KEYS:
            self._backspace()
        else:
            self._type_char(chr(code))

    def restart(self) -> None:
        self.document.clear_typed()
        self.document.current_page = 0
        self.cursor = Cursor()
        self.state = SessionState.IDLE
        self.started_at = None
        self.word_count = 0
        self.wpm = None
        logger.info("Session restarted")
        self.redraw()

    def _backspace(self) -> None:
        self.document.set_typed(self.document.current_page, self.cursor.row, self.cursor.column, None)
        self.cursor = retreat(self.document, self.cursor, self._queue_page)
        self._queue_cursor()
        self._events.append(SetDim(True))
        self._events.append(PutChar(self.current_cell().expected, Style.PLAIN))
        self._events.append(SetDim(False))
        self._queue_cursor()

    def _type_char(self, char: str) -> None:
        if self.state is SessionState.IDLE:
            self.state = SessionState.TYPING
            self.started_at = self.clock()
            logger.info("Session started")

        self.document.set_typed(self.document.current_page, self.cursor.row, self.cursor.column, char)
        cell = self.current_cell()
        logger.debug("expected %r typed %r", cell.expected, char)

        if cell.is_last:
            self._finish()
            return

        self._events.append(PutChar(display_char(cell, self.settings.show_typed), judge(cell)))
        self.cursor = advance(self.document, self.cursor, self._queue_page)
        self._queue_cursor()

    def _finish(self) -> None:
        self.word_count = count_correct_words(self.document)
        minutes = (self.clock() - (self.started_at or 0.0)) / 60.0
        self.wpm = self.word_count / minutes if minutes > 0 else 0.0
        self.state = SessionState.FINISHED
        logger.info("Session finished: %d words in %.2f min, %.2f wpm", self.word_count, minutes, self.wpm)
        self._events.append(ShowResult(wpm=self.wpm, words=self.word_count, minutes=minutes))

    def _queue_page(self, index: int) -> None:
        page = self.document.pages[index]
        self._events.append(SetDim(True))
        self._events.append(styled_page(index, page, self.settings.show_typed))
        self._events.append(SetDim(False))

    def _queue_cursor(self) -> None:
        self._events.append(MoveCursor(row=self.cursor.row, column=self.cursor.column))
