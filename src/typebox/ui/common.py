from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

import pygame

from typebox.typing.events import Style

Color = Tuple[int, int, int]

BACKGROUND: Color = (248, 248, 248)
TEXT: Color = (20, 20, 20)
DIM_TEXT: Color = (150, 150, 150)
HINT: Color = (0, 128, 128)

STYLE_COLORS: Dict[Style, Color] = {
    Style.PLAIN: TEXT,
    Style.CORRECT: (34, 139, 34),
    Style.INCORRECT: (220, 20, 60),
    Style.INCORRECT_SPACE: (220, 20, 60),
}


def create_window(size: Optional[Tuple[int, int]] = None) -> Tuple[pygame.Surface, pygame.Rect]:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    pygame.init()
    if size is None:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode(size)
    pygame.display.set_caption("typebox")
    pygame.mouse.set_visible(True)
    return screen, screen.get_rect()


def create_mono_font(size: int = 24) -> pygame.font.Font:
    path = pygame.font.match_font("dejavusansmono,couriernew,monospace")
    if path:
        return pygame.font.Font(path, size)
    return pygame.font.SysFont("monospace", size)


def style_color(style: Style, dim: bool = False) -> Color:
    if style is Style.PLAIN and dim:
        return DIM_TEXT
    return STYLE_COLORS[style]
