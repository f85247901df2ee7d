"""A blank widget that absorbs spare space in layouts."""

from __future__ import annotations

from typing import Any

from .widget import Event, Widget


class Spacer(Widget):
    """Occupies no required space and draws nothing; layouts stretch it."""

    def draw(self) -> None:
        """There is nothing to draw."""

    def size(self) -> tuple[int, int]:
        """No space is required to show nothing."""
        return 0, 0

    def set_view(self, view: Any) -> None:
        """A spacer never draws, so the view is not kept."""

    def handle_event(self, event: Event) -> bool:
        """Events pass through untouched."""
        return False

    def resize(self) -> None:
        """Tell watchers that the spacer was resized."""
        self.post_event_widget_resize(self)