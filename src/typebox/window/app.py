from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

from typebox.config import TextboxSettings
from typebox.typing import keys
from typebox.typing.events import (
    DrawPage,
    MoveCursor,
    PutChar,
    RenderEvent,
    SetDim,
    ShowResult,
    Style,
)
from typebox.typing.session import TypingSession
from typebox.ui.common import (
    BACKGROUND,
    HINT,
    TEXT,
    create_mono_font,
    create_window,
    style_color,
)

logger = logging.getLogger(__name__)

LINE_GAP = 6
HINT_TEXT = "Ctrl-c / Esc - quit      Ctrl-r - restart"


@dataclass
class GridCell:
    char: str
    style: Style
    dim: bool


class ScreenModel:
    """In-memory textbox that render events are applied to."""

    def __init__(self) -> None:
        self.cells: Dict[Tuple[int, int], GridCell] = {}
        self.cursor_row = 0
        self.cursor_col = 0
        self.dim = False
        self.page = 0
        self.result: Optional[ShowResult] = None

    def apply(self, event: RenderEvent) -> None:
        if isinstance(event, PutChar):
            self.cells[(self.cursor_row, self.cursor_col)] = GridCell(event.char, event.style, self.dim)
            self.cursor_col += 1
        elif isinstance(event, MoveCursor):
            self.cursor_row = event.row
            self.cursor_col = event.column
        elif isinstance(event, SetDim):
            self.dim = event.enabled
        elif isinstance(event, DrawPage):
            self.cells.clear()
            self.result = None
            self.page = event.page
            for row, line in enumerate(event.lines):
                for col, styled in enumerate(line):
                    self.cells[(row, col)] = GridCell(styled.char, styled.style, self.dim)
            self.cursor_row = 0
            self.cursor_col = 0
        elif isinstance(event, ShowResult):
            self.result = event

    def line_text(self, row: int) -> str:
        cols = sorted(col for (r, col) in self.cells if r == row)
        return "".join(self.cells[(row, col)].char for col in cols)


def key_code_for_event(event: pygame.event.Event) -> Optional[int]:
    if event.type != pygame.KEYDOWN:
        return None
    mods = getattr(event, "mod", 0)
    if mods & pygame.KMOD_CTRL:
        if event.key == pygame.K_c:
            return keys.CTRL_C
        if event.key == pygame.K_r:
            return keys.CTRL_R
        return None
    if event.key == pygame.K_ESCAPE:
        return keys.CTRL_C
    if event.key == pygame.K_BACKSPACE:
        return keys.BACKSPACE
    if event.key in {pygame.K_RETURN, pygame.K_KP_ENTER}:
        return keys.ENTER
    if mods & (pygame.KMOD_ALT | pygame.KMOD_META | pygame.KMOD_GUI):
        return None
    unicode = getattr(event, "unicode", "")
    if unicode and len(unicode) == 1 and unicode.isprintable():
        return ord(unicode)
    return None


class WindowApp:
    def __init__(
        self,
        settings: TextboxSettings,
        *,
        screen: Optional[pygame.Surface] = None,
        screen_rect: Optional[pygame.Rect] = None,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        if screen is None or screen_rect is None:
            screen, screen_rect = create_window()
        self.screen = screen
        self.screen_rect = screen_rect
        self.clock = clock or pygame.time.Clock()
        self.settings = settings
        self.font = create_mono_font(24)
        self.cell_w, self.cell_h = self.font.size("M")
        self.session = TypingSession(settings)
        self.model = ScreenModel()

    def _origin(self) -> Tuple[int, int]:
        box_w = self.cell_w * self.settings.columns
        box_h = (self.cell_h + LINE_GAP) * self.settings.rows
        return self.screen_rect.centerx - box_w // 2, self.screen_rect.centery - box_h // 2

    def _pump_events(self) -> None:
        for event in self.session.events():
            self.model.apply(event)

    def _render(self) -> None:
        self.screen.fill(BACKGROUND)
        left, top = self._origin()
        step = self.cell_h + LINE_GAP

        if self.model.result is not None:
            text = self.font.render(f"WPM: {self.model.result.wpm:.2f}", True, TEXT)
            self.screen.blit(text, text.get_rect(center=self.screen_rect.center))
        else:
            for (row, col), cell in self.model.cells.items():
                x = left + col * self.cell_w
                y = top + row * step
                surface = self.font.render(cell.char, True, style_color(cell.style, cell.dim))
                self.screen.blit(surface, (x, y))
                if cell.style is Style.INCORRECT_SPACE:
                    pygame.draw.line(
                        self.screen,
                        style_color(cell.style),
                        (x, y + self.cell_h),
                        (x + self.cell_w, y + self.cell_h),
                        2,
                    )
            cursor_x = left + self.model.cursor_col * self.cell_w
            cursor_y = top + self.model.cursor_row * step
            pygame.draw.rect(self.screen, (30, 30, 30), (cursor_x, cursor_y, 2, self.cell_h))

        hint = self.font.render(HINT_TEXT, True, HINT)
        hint_top = top + step * self.settings.rows + step * 2
        self.screen.blit(hint, hint.get_rect(midtop=(self.screen_rect.centerx, hint_top)))
        pygame.display.flip()

    def run(self, *, quit_on_exit: bool = True) -> None:
        logger.info("Window session: %d page(s)", self.session.document.page_count)
        self.session.redraw()
        self._pump_events()
        self._render()
        try:
            while self.session.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.session.handle_key(keys.CTRL_C)
                        continue
                    code = key_code_for_event(event)
                    if code is not None:
                        self.session.handle_key(code)
                self._pump_events()
                self._render()
                self.clock.tick(60)
        finally:
            if quit_on_exit:
                pygame.quit()


def run_window(settings: TextboxSettings) -> None:
    WindowApp(settings).run(quit_on_exit=True)
