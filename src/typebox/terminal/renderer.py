from __future__ import annotations

import os
import shutil
from typing import Dict, Iterable, Optional, TextIO

from typebox.typing.events import (
    DrawPage,
    MoveCursor,
    PutChar,
    RenderEvent,
    SetDim,
    ShowResult,
    Style,
)

ESC = "\x1b["
SAVE_CURSOR = "\x1b[s"
RESTORE_CURSOR = "\x1b[u"
SAVE_SCREEN = "\x1b[?1047h"
RESTORE_SCREEN = "\x1b[?1047l"
CLEAR_SCREEN = "\x1b[H\x1b[2J"
DIM = "\x1b[2m"
UNDIM = "\x1b[22m"
RESET = "\x1b[0m"
RED = "\x1b[0;31m"
GREEN = "\x1b[0;32m"
CYAN = "\x1b[0;36m"
BLUE = "\x1b[0;34m"
UNDERLINE = "\x1b[4m"

STYLE_CODES: Dict[Style, str] = {
    Style.CORRECT: GREEN,
    Style.INCORRECT: RED,
    Style.INCORRECT_SPACE: RED + UNDERLINE,
}

FOOTER = f"{CYAN}Ctrl-c{RESET} - quit      {CYAN}Ctrl-r{RESET} - restart"
FOOTER_WIDTH = len("Ctrl-c - quit      Ctrl-r - restart")
FOOTER_GAP = 3


def move_to(row: int, column: int) -> str:
    return f"{ESC}{row};{column}H"


class AnsiRenderer:
    """Writes render events to a VT100 terminal, centering the textbox."""

    def __init__(
        self,
        stream: TextIO,
        columns: int,
        rows: int,
        *,
        terminal_size: Optional[os.terminal_size] = None,
    ) -> None:
        size = terminal_size or shutil.get_terminal_size()
        self.stream = stream
        self.columns = columns
        self.rows = rows
        self.screen_columns = size.columns
        self.screen_lines = size.lines
        # Escape sequences address the screen from 1.
        self.origin_x = max(1, size.columns // 2 - columns // 2)
        self.origin_y = max(1, size.lines // 2 - rows // 2)
        self._dim = False

    def enter(self) -> None:
        self.stream.write(SAVE_CURSOR + SAVE_SCREEN)
        self.stream.flush()

    def leave(self) -> None:
        self.stream.write(RESET + RESTORE_SCREEN + RESTORE_CURSOR)
        self.stream.flush()

    def render_all(self, events: Iterable[RenderEvent]) -> None:
        for event in events:
            self.render(event)
        self.stream.flush()

    def render(self, event: RenderEvent) -> None:
        if isinstance(event, PutChar):
            self._put(event.char, event.style)
        elif isinstance(event, MoveCursor):
            self._move(event.row, event.column)
        elif isinstance(event, SetDim):
            self._dim = event.enabled
            self.stream.write(DIM if event.enabled else UNDIM)
        elif isinstance(event, DrawPage):
            self._draw_page(event)
        elif isinstance(event, ShowResult):
            self._show_result(event)
        else:
            raise TypeError(f"unknown render event: {event!r}")

    def _put(self, char: str, style: Style) -> None:
        code = STYLE_CODES.get(style)
        if code is None:
            self.stream.write(char)
            return
        self.stream.write(code + char + RESET)
        # RESET also drops dim mode.
        if self._dim:
            self.stream.write(DIM)

    def _move(self, row: int, column: int) -> None:
        self.stream.write(move_to(self.origin_y + row, self.origin_x + column))

    def _draw_page(self, event: DrawPage) -> None:
        self.stream.write(CLEAR_SCREEN)
        for row, line in enumerate(event.lines):
            self._move(row, 0)
            for styled in line:
                self._put(styled.char, styled.style)
        self._draw_footer()
        self._move(0, 0)

    def _draw_footer(self) -> None:
        row = self.origin_y + self.rows + FOOTER_GAP
        column = max(1, self.screen_columns // 2 - FOOTER_WIDTH // 2)
        undim = UNDIM if self._dim else ""
        redim = DIM if self._dim else ""
        self.stream.write(move_to(row, column) + undim + FOOTER + redim)

    def _show_result(self, event: ShowResult) -> None:
        self.stream.write(CLEAR_SCREEN)
        row = self.screen_lines // 2
        column = max(1, self.screen_columns // 2 - 5)
        self.stream.write(move_to(row, column) + f"{BLUE}WPM{RESET}: {event.wpm:.2f}")
        self._draw_footer()
