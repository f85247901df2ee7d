"""A container laying out children in a row or a column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .constants import Orientation
from .view import Style, View, ViewPort
from .widget import Event, EventWidgetContent, Widget


@dataclass(eq=False)
class _BoxCell:
    widget: Widget
    fill: float
    view: ViewPort
    pad: int = 0
    frac: float = 0.0


class BoxLayout(Widget):
    """Lays out children horizontally or vertically.

    Spare space is shared among children in proportion to their fill factor.
    """

    def __init__(self, orientation: Orientation = Orientation.HORIZONTAL) -> None:
        super().__init__()
        self._view: Optional[View] = None
        self._orient = orientation
        self._style = Style()
        self._cells: list[_BoxCell] = []
        self._width = 0
        self._height = 0
        self._changed = False

    def _distribute(self, extra: int) -> None:
        total_fill = sum(c.fill for c in self._cells)
        resid = extra if total_fill != 0 else 0
        for c in self._cells:
            if c.fill > 0:
                c.frac = extra * c.fill / total_fill
                c.pad = int(c.frac)
                c.frac -= c.pad
                resid -= c.pad
        # Left-over cells go to the children with the largest remainders.
        while resid > 0:
            best = max((c for c in self._cells if c.fill != 0), key=lambda c: c.frac)
            best.pad += 1
            best.frac = 0.0
            resid -= 1

    def _layout_axis(self, horizontal: bool) -> None:
        w, h = self._view.size()
        for c in self._cells:
            cw, ch = c.widget.size()
            if horizontal:
                self._width += cw
                self._height = max(self._height, ch)
            else:
                self._height += ch
                self._width = max(self._width, cw)
            c.pad = 0
            c.frac = 0.0

        self._distribute(max((w - self._width) if horizontal else (h - self._height), 0))

        pos = 0
        for c in self._cells:
            cw, ch = c.widget.size()
            if horizontal:
                c.view.resize(pos, 0, cw + c.pad, h)
                pos += cw + c.pad
            else:
                c.view.resize(0, pos, w, ch + c.pad)
                pos += ch + c.pad
            c.widget.resize()

    def _layout(self) -> None:
        if self._view is None:
            return
        self._width, self._height = 0, 0
        if self._orient not in (Orientation.HORIZONTAL, Orientation.VERTICAL):
            raise ValueError(f"bad orientation: {self._orient!r}")
        self._layout_axis(self._orient == Orientation.HORIZONTAL)
        self._changed = False

    def _announce(self) -> None:
        self.post_event_widget_content(self)

    def resize(self) -> None:
        self._layout()
        for c in self._cells:
            c.widget.resize()
        self.post_event_widget_resize(self)

    def draw(self) -> None:
        if self._view is None:
            return
        if self._changed:
            self._layout()
        self._view.fill(" ", self._style)
        for c in self._cells:
            c.widget.draw()

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def set_view(self, view: Any) -> None:
        self._changed = True
        self._view = view
        for c in self._cells:
            c.view.set_view(view)

    def handle_event(self, event: Event) -> bool:
        """Track children's content changes, then offer the event to each child."""
        if isinstance(event, EventWidgetContent):
            self._changed = True
            self._announce()
            return True
        return any(c.widget.handle_event(event) for c in self._cells)

    def add_widget(self, widget: Widget, fill: float = 0.0) -> None:
        """Append a widget with the given fill factor (0 means no expansion)."""
        self._changed = True
        self.insert_widget(len(self._cells), widget, fill)

    def insert_widget(self, index: int, widget: Widget, fill: float = 0.0) -> None:
        """Insert a widget at ``index``, clamped to the valid range."""
        cell = _BoxCell(widget=widget, fill=fill, view=ViewPort(self._view, 0, 0, 0, 0))
        widget.set_view(cell.view)
        self._cells.insert(max(0, min(index, len(self._cells))), cell)
        widget.watch(self)
        self._layout()
        self._announce()

    def remove_widget(self, widget: Widget) -> None:
        """Remove every occurrence of the widget; unknown widgets are ignored."""
        kept = [c for c in self._cells if c.widget is not widget]
        if len(kept) == len(self._cells):
            return
        self._cells = kept
        self._changed = True
        widget.unwatch(self)
        self._layout()
        self._announce()

    def widgets(self) -> list[Widget]:
        return [c.widget for c in self._cells]

    def set_orientation(self, orientation: Orientation) -> None:
        if self._orient != orientation:
            self._orient = orientation
            self._changed = True
            self._announce()

    def set_style(self, style: Style) -> None:
        self._style = style
        self._announce()