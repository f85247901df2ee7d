"""A vertical layout with title, menu, content and status areas."""

from __future__ import annotations

from typing import Optional

from .boxlayout import BoxLayout
from .constants import Orientation
from .widget import Widget


class Panel(BoxLayout):
    """A column of optional title, menu, content and status widgets.

    Only the content area expands to take up spare rows.  The areas may be
    any widget; their names only describe their conventional use.
    """

    def __init__(self) -> None:
        super().__init__(Orientation.HORIZONTAL)
        self._title: Optional[Widget] = None
        self._menu: Optional[Widget] = None
        self._content: Optional[Widget] = None
        self._status: Optional[Widget] = None

    def draw(self) -> None:
        self.set_orientation(Orientation.VERTICAL)
        super().draw()

    def _slot(self, *before: Optional[Widget]) -> int:
        return sum(1 for w in before if w is not None)

    def set_title(self, widget: Widget) -> None:
        """Set the widget shown at the top."""
        if self._title is not None:
            self.remove_widget(self._title)
        self.insert_widget(0, widget, 0.0)
        self._title = widget

    def set_menu(self, widget: Widget) -> None:
        """Set the widget shown just below the title."""
        index = self._slot(self._title)
        if self._menu is not None:
            self.remove_widget(self._menu)
        self.insert_widget(index, widget, 0.0)
        self._menu = widget

    def set_content(self, widget: Widget) -> None:
        """Set the expanding main content widget."""
        index = self._slot(self._title, self._menu)
        if self._content is not None:
            self.remove_widget(self._content)
        self.insert_widget(index, widget, 1.0)
        self._content = widget

    def set_status(self, widget: Widget) -> None:
        """Set the widget shown at the bottom."""
        index = self._slot(self._title, self._menu, self._content)
        if self._status is not None:
            self.remove_widget(self._status)
        self.insert_widget(index, widget, 0.0)
        self._status = widget