"""A pannable view onto a two-dimensional cell model, with an optional cursor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from .view import Style, View, ViewPort
from .widget import Event, Key, KeyEvent, Widget


class CellModel(ABC):
    """Content for a CellView, addressed in logical cells from (0, 0)."""

    @abstractmethod
    def get_cell(self, x: int, y: int) -> tuple[str, Style, Optional[Sequence[str]], int]:
        """Return (character, style, combining characters, width).

        An empty character means the cell has no content.
        """

    @abstractmethod
    def get_bounds(self) -> tuple[int, int]:
        """Return the content (width, height)."""

    @abstractmethod
    def set_cursor(self, x: int, y: int) -> None:
        """Move the cursor to an absolute position."""

    @abstractmethod
    def get_cursor(self) -> tuple[int, int, bool, bool]:
        """Return (x, y, enabled, shown)."""

    @abstractmethod
    def move_cursor(self, offx: int, offy: int) -> None:
        """Move the cursor by a relative offset."""


def _is_blank(ch: str) -> bool:
    return not ch or ch == "\0"


class CellView(Widget):
    """Shows a CellModel through a scrolling port, handling navigation keys."""

    def __init__(self) -> None:
        super().__init__()
        self._port = ViewPort(None, 0, 0, 0, 0)
        self._view: Optional[View] = None
        self._style = Style()
        self._model: Optional[CellModel] = None

    def draw(self) -> None:
        port = self._port
        model = self._model
        port.fill(" ", self._style)

        if self._view is None or model is None:
            return
        vw, vh = self._view.size()
        for y in range(vh):
            for x in range(vw):
                self._view.set_content(x, y, " ", None, self._style)

        ex, ey = model.get_bounds()
        vx, vy = port.size()
        ex = max(ex, vx)
        ey = max(ey, vy)

        cx, cy, enabled, shown = model.get_cursor()
        for y in range(ey):
            x = 0
            while x < ex:
                ch, style, comb, width = model.get_cell(x, y)
                if _is_blank(ch):
                    ch = " "
                    style = self._style
                if enabled and shown and x == cx and y == cy:
                    style = style.reverse(True)
                port.set_content(x, y, ch, comb, style)
                x += max(width, 1)

    def _cursor_enabled(self) -> bool:
        return self._model.get_cursor()[2]

    def _key_up(self) -> None:
        if not self._cursor_enabled():
            self._port.scroll_up(1)
            return
        self._model.move_cursor(0, -1)
        self.make_cursor_visible()

    def _key_down(self) -> None:
        if not self._cursor_enabled():
            self._port.scroll_down(1)
            return
        self._model.move_cursor(0, 1)
        self.make_cursor_visible()

    def _key_left(self) -> None:
        if not self._cursor_enabled():
            self._port.scroll_left(1)
            return
        self._model.move_cursor(-1, 0)
        self.make_cursor_visible()

    def _key_right(self) -> None:
        if not self._cursor_enabled():
            self._port.scroll_right(1)
            return
        self._model.move_cursor(1, 0)
        self.make_cursor_visible()

    def _key_pgup(self) -> None:
        _, vy = self._port.size()
        if not self._cursor_enabled():
            self._port.scroll_up(vy)
            return
        self._model.move_cursor(0, -vy)
        self.make_cursor_visible()

    def _key_pgdn(self) -> None:
        _, vy = self._port.size()
        if not self._cursor_enabled():
            self._port.scroll_down(vy)
            return
        self._model.move_cursor(0, vy)
        self.make_cursor_visible()

    def _key_home(self) -> None:
        vx, vy = self._model.get_bounds()
        if not self._cursor_enabled():
            self._port.scroll_up(vy)
            self._port.scroll_left(vx)
            return
        self._model.set_cursor(0, 0)
        self.make_cursor_visible()

    def _key_end(self) -> None:
        vx, vy = self._model.get_bounds()
        if not self._cursor_enabled():
            self._port.scroll_down(vy)
            self._port.scroll_right(vx)
            return
        self._model.set_cursor(vx, vy)
        self.make_cursor_visible()

    def make_cursor_visible(self) -> None:
        """Pan so the cursor is in view, if the cursor is enabled."""
        if self._model is None:
            return
        x, y, enabled, _ = self._model.get_cursor()
        if enabled:
            self.make_visible(x, y)

    def handle_event(self, event: Event) -> bool:
        """Handle navigation keys; return True if the event was consumed."""
        if self._model is None or not isinstance(event, KeyEvent):
            return False
        actions = {
            Key.UP: self._key_up,
            Key.CTRL_P: self._key_up,
            Key.DOWN: self._key_down,
            Key.CTRL_N: self._key_down,
            Key.RIGHT: self._key_right,
            Key.CTRL_F: self._key_right,
            Key.LEFT: self._key_left,
            Key.CTRL_B: self._key_left,
            Key.PGDN: self._key_pgdn,
            Key.PGUP: self._key_pgup,
            Key.END: self._key_end,
            Key.HOME: self._key_home,
        }
        action = actions.get(event.key)
        if action is None:
            return False
        action()
        return True

    def size(self) -> tuple[int, int]:
        """Content size, clipped to at most two columns and two rows."""
        if self._model is None:
            return 0, 0
        w, h = self._model.get_bounds()
        return min(w, 2), min(h, 2)

    def model(self) -> Optional[CellModel]:
        return self._model

    def set_model(self, model: CellModel) -> None:
        w, h = model.get_bounds()
        self._model = model
        self._port.set_content_size(w, h, True)
        self._port.validate_view()
        self.post_event_widget_content(self)

    def set_view(self, view: Any) -> None:
        self._port.set_view(view)
        self._view = view
        if view is None:
            return
        width, height = view.size()
        self._port.resize(0, 0, width, height)
        if self._model is not None:
            w, h = self._model.get_bounds()
            self._port.set_content_size(w, h, True)
        self.resize()

    def resize(self) -> None:
        if self._view is None:
            return
        width, height = self._view.size()
        self._port.resize(0, 0, width, height)
        self._port.validate_view()
        self.make_cursor_visible()

    def set_cursor(self, x: int, y: int) -> None:
        self._model.set_cursor(x, y)

    def set_cursor_x(self, x: int) -> None:
        _, y, _, _ = self._model.get_cursor()
        self.set_cursor(x, y)

    def set_cursor_y(self, y: int) -> None:
        x, _, _, _ = self._model.get_cursor()
        self.set_cursor(x, y)

    def make_visible(self, x: int, y: int) -> None:
        """Pan the port so that (x, y) is visible."""
        self._port.make_visible(x, y)

    def set_style(self, style: Style) -> None:
        self._style = style