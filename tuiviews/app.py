"""An event-driven application running a root widget on a screen."""

from __future__ import annotations

import threading
from abc import abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

from .view import Style, View
from .widget import Event, ResizeEvent, Widget


class NoScreenError(RuntimeError):
    """Raised when an application has no screen to run on."""


class Screen(View):
    """A terminal-like drawing surface that also delivers events."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the screen for use."""

    @abstractmethod
    def fini(self) -> None:
        """Release the screen."""

    @abstractmethod
    def clear(self) -> None:
        """Blank the whole screen."""

    @abstractmethod
    def show(self) -> None:
        """Draw pending updates."""

    @abstractmethod
    def sync(self) -> None:
        """Redraw everything."""

    @abstractmethod
    def set_style(self, style: Style) -> None:
        """Set the default style."""

    @abstractmethod
    def poll_event(self) -> Optional[Event]:
        """Block until an event is available and return it."""

    @abstractmethod
    def post_event_wait(self, event: Event) -> None:
        """Queue an event, blocking until there is room."""


@dataclass
class _AppUpdate(Event):
    pass


@dataclass
class _AppQuit(Event):
    pass


@dataclass
class _AppRefresh(Event):
    pass


@dataclass
class _AppFunc(Event):
    fn: Callable[[], None]


class Application:
    """Runs a root widget on a screen until asked to quit."""

    def __init__(self) -> None:
        self._widget: Optional[Widget] = None
        self._screen: Optional[Screen] = None
        self._style = Style()
        self._error: Optional[Exception] = None
        self._threads: list[threading.Thread] = []

    def set_root_widget(self, widget: Optional[Widget]) -> None:
        self._widget = widget

    def _initialize(self) -> None:
        if self._screen is None:
            self._error = NoScreenError("no screen has been set")
            raise self._error

    def _post(self, event: Event) -> None:
        screen = self._screen
        if screen is not None:
            threading.Thread(
                target=screen.post_event_wait, args=(event,), daemon=True
            ).start()

    def quit(self) -> None:
        """Ask the event loop to stop; returns immediately."""
        self._post(_AppQuit())

    def refresh(self) -> None:
        """Ask for a full redraw."""
        self._post(_AppRefresh())

    def update(self) -> None:
        """Ask for pending updates to be drawn."""
        self._post(_AppUpdate())

    def post_func(self, fn: Callable[[], None]) -> None:
        """Run ``fn`` inside the event loop."""
        self._post(_AppFunc(fn))

    def set_screen(self, screen: Screen) -> None:
        """Use the given screen; ignored if one is already set."""
        if self._screen is None:
            self._screen = screen
            self._error = None

    def set_style(self, style: Style) -> None:
        self._style = style
        if self._screen is not None:
            self._screen.set_style(style)

    def _run(self) -> None:
        widget = self._widget
        if widget is None:
            return
        if self._screen is None:
            try:
                self._initialize()
            except NoScreenError:
                return
        screen = self._screen
        try:
            screen.init()
            screen.clear()
            widget.set_view(screen)
            while True:
                widget = self._widget
                if widget is None:
                    break
                widget.draw()
                screen.show()

                event = screen.poll_event()
                if isinstance(event, _AppQuit):
                    break
                if isinstance(event, _AppUpdate):
                    screen.show()
                elif isinstance(event, _AppRefresh):
                    screen.sync()
                elif isinstance(event, _AppFunc):
                    event.fn()
                elif isinstance(event, ResizeEvent):
                    screen.sync()
                    widget.resize()
                else:
                    widget.handle_event(event)
        finally:
            screen.fini()

    def start(self) -> None:
        """Start the event loop in a background thread."""
        thread = threading.Thread(target=self._run, daemon=True)
        self._threads.append(thread)
        thread.start()

    def wait(self) -> None:
        """Wait for the event loop to finish; raise any startup error."""
        for thread in self._threads:
            thread.join()
        self._threads.clear()
        if self._error is not None:
            raise self._error

    def run(self) -> None:
        """Start the event loop and wait for it to finish."""
        self.start()
        self.wait()