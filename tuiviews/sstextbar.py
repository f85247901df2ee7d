"""A single-line bar of left, centre and right marked-up text."""

from __future__ import annotations

from .boxlayout import BoxLayout
from .constants import Alignment, Orientation
from .spacer import Spacer
from .sstext import SimpleStyledText
from .view import Style


class SimpleStyledTextBar(BoxLayout):
    """Left-, centre- and right-aligned areas, each with style markup."""

    def __init__(self) -> None:
        super().__init__(Orientation.HORIZONTAL)
        self._center = SimpleStyledText()
        self._left = SimpleStyledText()
        self._right = SimpleStyledText()
        self._center.set_alignment(Alignment.VALIGN_TOP | Alignment.HALIGN_CENTER)
        self._left.set_alignment(Alignment.VALIGN_TOP | Alignment.HALIGN_LEFT)
        self._right.set_alignment(Alignment.VALIGN_TOP | Alignment.HALIGN_RIGHT)
        self.set_orientation(Orientation.HORIZONTAL)
        self.add_widget(self._left, 0.0)
        self.add_widget(Spacer(), 1.0)
        self.add_widget(self._center, 0.0)
        self.add_widget(Spacer(), 1.0)
        self.add_widget(self._right, 0.0)

    def set_right(self, markup: str) -> None:
        self._right.set_markup(markup)

    def set_left(self, markup: str) -> None:
        self._left.set_markup(markup)

    def set_center(self, markup: str) -> None:
        self._center.set_markup(markup)

    def register_right_style(self, r: str, style: Style) -> None:
        self._right.register_style(r, style)

    def register_left_style(self, r: str, style: Style) -> None:
        self._left.register_style(r, style)

    def register_center_style(self, r: str, style: Style) -> None:
        self._center.register_style(r, style)

    def size(self) -> tuple[int, int]:
        """Preferred size, never less than one cell in each direction."""
        w, h = super().size()
        return max(w, 1), max(h, 1)