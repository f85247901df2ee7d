"""A pannable multi-line text widget with an optional soft cursor."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .cellarea import CellModel, CellView
from .view import Style


class LinesModel(CellModel):
    """A CellModel holding lines of text, all in one style."""

    def __init__(self) -> None:
        self.runes: list[list[str]] = []
        self.width = 0
        self.height = 0
        self.x = 0
        self.y = 0
        self.hide = False
        self.cursor = False
        self.style = Style()

    def get_cell(self, x: int, y: int) -> tuple[str, Style, Optional[Sequence[str]], int]:
        if x < 0 or y < 0 or y >= self.height or x >= len(self.runes[y]):
            return "", self.style, None, 1
        return self.runes[y][x], self.style, None, 1

    def get_bounds(self) -> tuple[int, int]:
        return self.width, self.height

    def _limit_cursor(self) -> None:
        self.x = max(min(self.x, self.width - 1), 0)
        self.y = max(min(self.y, self.height - 1), 0)

    def set_cursor(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._limit_cursor()

    def move_cursor(self, x: int, y: int) -> None:
        self.x += x
        self.y += y
        self._limit_cursor()

    def get_cursor(self) -> tuple[int, int, bool, bool]:
        return self.x, self.y, self.cursor, not self.hide


class TextArea(CellView):
    """Lines of text shown through a pannable CellView."""

    def __init__(self) -> None:
        super().__init__()
        self._lines = LinesModel()
        self.set_model(self._lines)

    def set_lines(self, lines: Iterable[str]) -> None:
        """Replace the content with the given lines."""
        model = self._lines
        model.runes = [list(line) for line in lines]
        model.width = max((len(row) for row in model.runes), default=0)
        model.height = len(model.runes)
        self.set_model(model)

    def set_style(self, style: Style) -> None:
        self._lines.style = style
        super().set_style(style)

    def enable_cursor(self, on: bool) -> None:
        self._lines.cursor = on

    def hide_cursor(self, on: bool) -> None:
        """Hide the cursor if ``on``; it only shows when enabled."""
        self._lines.hide = on

    def set_content(self, text: str) -> None:
        """Set the content from newline-separated text."""
        self.set_lines(text.strip("\n").split("\n"))