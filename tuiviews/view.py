"""Styles, the View drawing interface and the clipping ViewPort."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence


class Attr(enum.IntFlag):
    """Text attributes carried by a Style."""

    NONE = 0
    BOLD = 1
    BLINK = 2
    REVERSE = 4
    UNDERLINE = 8
    DIM = 16
    ITALIC = 32
    STRIKETHROUGH = 64


@dataclass(frozen=True)
class Style:
    """An immutable combination of colours and attributes.

    ``None`` for a colour means the terminal default.
    """

    fg: Any = None
    bg: Any = None
    attrs: Attr = Attr.NONE

    def foreground(self, color: Any) -> Style:
        return replace(self, fg=color)

    def background(self, color: Any) -> Style:
        return replace(self, bg=color)

    def _with_attr(self, attr: Attr, on: bool) -> Style:
        if on:
            value = int(self.attrs) | int(attr)
        else:
            value = int(self.attrs) & ~int(attr)
        return replace(self, attrs=Attr(value))

    def bold(self, on: bool) -> Style:
        return self._with_attr(Attr.BOLD, on)

    def underline(self, on: bool) -> Style:
        return self._with_attr(Attr.UNDERLINE, on)

    def reverse(self, on: bool) -> Style:
        return self._with_attr(Attr.REVERSE, on)


_DEFAULT_STYLE = Style()


class View(ABC):
    """A logical drawing area that widgets render into."""

    @abstractmethod
    def set_content(
        self,
        x: int,
        y: int,
        ch: str,
        comb: Optional[Sequence[str]] = None,
        style: Style = _DEFAULT_STYLE,
    ) -> None:
        """Place a character (with combining marks) at the given cell."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return the visible (width, height)."""

    @abstractmethod
    def resize(self, x: int, y: int, width: int, height: int) -> None:
        """Set a new offset in the parent and new visible dimensions."""

    @abstractmethod
    def fill(self, ch: str, style: Style) -> None:
        """Fill the visible area with one character and style."""

    def clear(self) -> None:
        """Fill the visible area with blanks in the default style."""
        self.fill(" ", _DEFAULT_STYLE)


class ViewPort(View):
    """A clipped, scrollable window onto a larger content area."""

    def __init__(
        self,
        view: Optional[View] = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
    ) -> None:
        self._parent = view
        self._physx = 0
        self._physy = 0
        self._viewx = 0
        self._viewy = 0
        self._limx = width
        self._limy = height
        self._width = 0
        self._height = 0
        self._locked = False
        self.resize(x, y, width, height)

    def clear(self) -> None:
        self.fill(" ", _DEFAULT_STYLE)

    def fill(self, ch: str, style: Style) -> None:
        if self._parent is None:
            return
        for y in range(self._height):
            for x in range(self._width):
                self._parent.set_content(
                    x + self._physx, y + self._physy, ch, None, style
                )

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def reset(self) -> None:
        """Forget the content extent and return the offset to the origin."""
        self._limx = 0
        self._limy = 0
        self._viewx = 0
        self._viewy = 0

    def set_content(
        self,
        x: int,
        y: int,
        ch: str,
        comb: Optional[Sequence[str]] = None,
        style: Style = _DEFAULT_STYLE,
    ) -> None:
        if self._parent is None:
            return
        if x > self._limx and not self._locked:
            self._limx = x
        if y > self._limy and not self._locked:
            self._limy = y
        if x < self._viewx or y < self._viewy:
            return
        if x >= self._viewx + self._width:
            return
        if y >= self._viewy + self._height:
            return
        self._parent.set_content(
            x - self._viewx + self._physx,
            y - self._viewy + self._physy,
            ch,
            comb,
            style,
        )

    def make_visible(self, x: int, y: int) -> None:
        """Pan the minimum amount needed to bring (x, y) into view."""
        if x < self._limx and x >= self._viewx + self._width:
            self._viewx = x - (self._width - 1)
        if 0 <= x < self._viewx:
            self._viewx = x
        if y < self._limy and y >= self._viewy + self._height:
            self._viewy = y - (self._height - 1)
        if 0 <= y < self._viewy:
            self._viewy = y
        self.validate_view()

    def validate_view_y(self) -> None:
        if self._viewy >= self._limy - self._height:
            self._viewy = self._limy - self._height
        if self._viewy < 0:
            self._viewy = 0

    def validate_view_x(self) -> None:
        if self._viewx >= self._limx - self._width:
            self._viewx = self._limx - self._width
        if self._viewx < 0:
            self._viewx = 0

    def validate_view(self) -> None:
        self.validate_view_x()
        self.validate_view_y()

    def center(self, x: int, y: int) -> None:
        """Centre the point in the view, if it lies within the content."""
        if x < 0 or y < 0 or x >= self._limx or y >= self._limy or self._parent is None:
            return
        self._viewx = x - self._width // 2
        self._viewy = y - self._height // 2
        self.validate_view()

    def scroll_up(self, rows: int) -> None:
        self._viewy -= rows
        self.validate_view_y()

    def scroll_down(self, rows: int) -> None:
        self._viewy += rows
        self.validate_view_y()

    def scroll_left(self, cols: int) -> None:
        self._viewx -= cols
        self.validate_view_x()

    def scroll_right(self, cols: int) -> None:
        self._viewx += cols
        self.validate_view_x()

    def set_size(self, width: int, height: int) -> None:
        self._height = height
        self._width = width
        self.validate_view()

    def get_visible(self) -> tuple[int, int, int, int]:
        """Return (x1, y1, x2, y2) of the visible cells in content space."""
        return (
            self._viewx,
            self._viewy,
            self._viewx + self._width - 1,
            self._viewy + self._height - 1,
        )

    def get_physical(self) -> tuple[int, int, int, int]:
        """Return (x1, y1, x2, y2) of the visible cells in parent space."""
        return (
            self._physx,
            self._physy,
            self._physx + self._width - 1,
            self._physy + self._height - 1,
        )

    def set_content_size(self, width: int, height: int, locked: bool) -> None:
        """Set the content extent; if locked it will not grow automatically."""
        self._limx = width
        self._limy = height
        self._locked = locked
        self.validate_view()

    def get_content_size(self) -> tuple[int, int]:
        return self._limx, self._limy

    def resize(self, x: int, y: int, width: int, height: int) -> None:
        """Move and size the port within its parent.

        A negative width or height extends to the parent's edge.
        """
        if self._parent is None:
            return
        px, py = self._parent.size()
        if 0 <= x < px:
            self._physx = x
        if 0 <= y < py:
            self._physy = y
        if width < 0:
            width = px - x
        if height < 0:
            height = py - y
        if width <= x + px:
            self._width = width
        if height <= y + py:
            self._height = height

    def set_view(self, view: Optional[View]) -> None:
        self._parent = view