"""Events, the Widget interface and watcher bookkeeping."""

from __future__ import annotations

import enum
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


class Key(enum.IntEnum):
    """Key codes; control keys use their ASCII values."""

    CTRL_SPACE = 0
    CTRL_A = 1
    CTRL_B = 2
    CTRL_C = 3
    CTRL_D = 4
    CTRL_E = 5
    CTRL_F = 6
    CTRL_G = 7
    CTRL_H = 8
    CTRL_I = 9
    CTRL_J = 10
    CTRL_K = 11
    CTRL_L = 12
    CTRL_M = 13
    CTRL_N = 14
    CTRL_O = 15
    CTRL_P = 16
    CTRL_Q = 17
    CTRL_R = 18
    CTRL_S = 19
    CTRL_T = 20
    CTRL_U = 21
    CTRL_V = 22
    CTRL_W = 23
    CTRL_X = 24
    CTRL_Y = 25
    CTRL_Z = 26
    ESCAPE = 27
    BACKSPACE2 = 127

    BACKSPACE = 8
    TAB = 9
    ENTER = 13

    RUNE = 256
    UP = 257
    DOWN = 258
    RIGHT = 259
    LEFT = 260
    UP_LEFT = 261
    UP_RIGHT = 262
    DOWN_LEFT = 263
    DOWN_RIGHT = 264
    CENTER = 265
    PGUP = 266
    PGDN = 267
    HOME = 268
    END = 269
    INSERT = 270
    DELETE = 271
    HELP = 272
    EXIT = 273
    CLEAR = 274
    CANCEL = 275
    PRINT = 276
    PAUSE = 277
    BACKTAB = 278


@dataclass
class Event:
    """Base event; ``when`` records the creation time."""

    when: float = field(default_factory=time.time, kw_only=True)


@dataclass
class KeyEvent(Event):
    """A key press; ``rune`` is set for ``Key.RUNE``."""

    key: Key
    rune: str = ""
    modifiers: int = 0


@dataclass
class ResizeEvent(Event):
    """The screen changed size."""

    width: int
    height: int


@dataclass
class EventWidget(Event):
    """An event delivered on behalf of a specific widget."""

    widget: Optional[Widget]


@dataclass
class EventWidgetContent(EventWidget):
    """The widget's content changed."""


@dataclass
class EventWidgetResize(EventWidget):
    """The widget was resized."""


@dataclass
class EventWidgetMove(EventWidget):
    """The widget moved to a new location."""


class WidgetWatchers:
    """Keeps the set of handlers interested in a widget's events.

    A handler is any hashable object with a ``handle_event(event)`` method.
    """

    def __init__(self) -> None:
        self._watchers: dict[Any, None] = {}

    def watch(self, handler: Any) -> None:
        self._watchers[handler] = None

    def unwatch(self, handler: Any) -> None:
        self._watchers.pop(handler, None)

    def post_event(self, event: EventWidget) -> None:
        """Deliver the event to every watcher, ignoring their results."""
        for watcher in list(self._watchers):
            watcher.handle_event(event)

    def post_event_widget_content(self, widget: Widget) -> None:
        self.post_event(EventWidgetContent(widget))

    def post_event_widget_resize(self, widget: Widget) -> None:
        self.post_event(EventWidgetResize(widget))

    def post_event_widget_move(self, widget: Widget) -> None:
        self.post_event(EventWidgetMove(widget))


class Widget(WidgetWatchers, ABC):
    """Base of every on-screen element."""

    @abstractmethod
    def draw(self) -> None:
        """Render into the current view."""

    @abstractmethod
    def resize(self) -> None:
        """React to a change in the size of the view."""

    @abstractmethod
    def handle_event(self, event: Event) -> bool:
        """Return True if the event was consumed."""

    @abstractmethod
    def set_view(self, view: Any) -> None:
        """Set the view used as the drawing context."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return the preferred (width, height) in cells."""