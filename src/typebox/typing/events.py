from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from typebox.typing.document import Cell, Page


class Style(Enum):
    PLAIN = "plain"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    INCORRECT_SPACE = "incorrect-space"


@dataclass(frozen=True)
class StyledChar:
    char: str
    style: Style


@dataclass(frozen=True)
class PutChar:
    char: str
    style: Style


@dataclass(frozen=True)
class MoveCursor:
    row: int
    column: int


@dataclass(frozen=True)
class DrawPage:
    page: int
    lines: Tuple[Tuple[StyledChar, ...], ...]


@dataclass(frozen=True)
class SetDim:
    enabled: bool


@dataclass(frozen=True)
class ShowResult:
    wpm: float
    words: int
    minutes: float


RenderEvent = Union[PutChar, MoveCursor, DrawPage, SetDim, ShowResult]


def judge(cell: Cell) -> Style:
    if cell.typed is None:
        return Style.PLAIN
    if cell.typed == cell.expected:
        return Style.CORRECT
    # A missed space is underlined so the skipped word boundary shows up.
    if cell.expected == " ":
        return Style.INCORRECT_SPACE
    return Style.INCORRECT


def display_char(cell: Cell, show_typed: bool = False) -> str:
    if show_typed and cell.typed is not None:
        return cell.typed
    return cell.expected


def styled_page(index: int, page: Page, show_typed: bool = False) -> DrawPage:
    lines = tuple(
        tuple(StyledChar(display_char(cell, show_typed), judge(cell)) for cell in line)
        for line in page
    )
    return DrawPage(page=index, lines=lines)
