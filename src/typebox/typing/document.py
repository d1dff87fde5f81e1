from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class Cell:
    expected: str
    typed: Optional[str] = None
    is_last: bool = False
    # A space after this cell was dropped when the line wrapped.
    wrapped_space: bool = False

    @property
    def is_correct(self) -> bool:
        return self.typed == self.expected


Line = List[Cell]
Page = List[Line]


@dataclass
class Document:
    pages: List[Page] = field(default_factory=lambda: [[]])
    word_count: int = 0
    current_page: int = 0

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def is_empty(self) -> bool:
        return not any(line for page in self.pages for line in page)

    def cell_at(self, page: int, row: int, column: int) -> Cell:
        return self.pages[page][row][column]

    def set_typed(self, page: int, row: int, column: int, typed: Optional[str]) -> None:
        self.pages[page][row][column].typed = typed

    def clear_typed(self) -> None:
        for cell in self.cells():
            cell.typed = None

    def cells(self) -> Iterator[Cell]:
        for page in self.pages:
            for line in page:
                yield from line

    def text(self) -> str:
        parts: List[str] = []
        for cell in self.cells():
            parts.append(cell.expected)
            if cell.wrapped_space and not cell.is_last:
                parts.append(" ")
        return "".join(parts)
