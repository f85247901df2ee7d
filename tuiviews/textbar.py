"""A single-line bar with left, centre and right text areas."""

from __future__ import annotations

from typing import Any, Optional

from .constants import Alignment
from .text import Text
from .view import Style, View, ViewPort
from .widget import Event, EventWidgetContent, Widget


class TextBar(Widget):
    """One line of text split into left-, centre- and right-aligned parts."""

    def __init__(self) -> None:
        super().__init__()
        self._changed = False
        self._style = Style()
        self._view: Optional[View] = None
        self._left = Text()
        self._center = Text()
        self._right = Text()
        self._lview = ViewPort()
        self._cview = ViewPort()
        self._rview = ViewPort()

        self._center.set_view(self._cview)
        self._left.set_view(self._lview)
        self._right.set_view(self._rview)
        self._center.set_alignment(Alignment.VALIGN_TOP | Alignment.HALIGN_CENTER)
        self._left.set_alignment(Alignment.VALIGN_TOP | Alignment.HALIGN_LEFT)
        self._right.set_alignment(Alignment.VALIGN_TOP | Alignment.HALIGN_RIGHT)
        self._center.watch(self)
        self._left.watch(self)
        self._right.watch(self)

    def _set_part(self, part: Text, s: str, style: Style) -> None:
        if style == Style():
            style = self._style
        part.set_text(s)
        part.set_style(style)

    def set_center(self, s: str, style: Style = Style()) -> None:
        """Set the centred text; the default style means the bar's style."""
        self._set_part(self._center, s, style)

    def set_left(self, s: str, style: Style = Style()) -> None:
        """Set the left-aligned text; the default style means the bar's style."""
        self._set_part(self._left, s, style)

    def set_right(self, s: str, style: Style = Style()) -> None:
        """Set the right-aligned text; the default style means the bar's style."""
        self._set_part(self._right, s, style)

    def set_style(self, style: Style) -> None:
        """Set the bar's fill style; it does not restyle text already set."""
        self._style = style

    def _layout(self) -> None:
        w = self._view.size()[0] if self._view is not None else 0
        ww, wh = self._left.size()
        self._lview.resize(0, 0, ww, wh)

        ww, wh = self._center.size()
        self._cview.resize((w - ww) // 2, 0, ww, wh)

        ww, wh = self._right.size()
        self._rview.resize(w - ww, 0, ww, wh)

        self._changed = False

    def set_view(self, view: Any) -> None:
        self._view = view
        self._lview.set_view(view)
        self._rview.set_view(view)
        self._cview.set_view(view)
        self._changed = True

    def draw(self) -> None:
        if self._view is None:
            return
        if self._changed:
            self._layout()
        w, h = self._view.size()
        for y in range(h):
            for x in range(w):
                self._view.set_content(x, y, " ", None, self._style)

        # Right first, so any overlap is clipped on the right side.
        self._right.draw()
        self._center.draw()
        self._left.draw()

    def resize(self) -> None:
        self._layout()
        self._left.resize()
        self._center.resize()
        self._right.resize()
        self.post_event_widget_resize(self)

    def size(self) -> tuple[int, int]:
        parts = [p.size() for p in (self._left, self._center, self._right)]
        return sum(w for w, _ in parts), max(h for _, h in parts)

    def handle_event(self, event: Event) -> bool:
        if isinstance(event, EventWidgetContent):
            self._changed = True
            return True
        return False