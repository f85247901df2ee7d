"""A widget showing a block of optionally styled text."""

from __future__ import annotations

from typing import Any, Optional

from wcwidth import wcwidth

from .constants import Alignment
from .view import Style, View
from .widget import Event, Widget


def _rune_width(ch: str) -> int:
    """Display width of a character; control characters count as zero."""
    return max(wcwidth(ch), 0)


class Text(Widget):
    """A block of text, one style per character, aligned within its view."""

    def __init__(self) -> None:
        super().__init__()
        self._view: Optional[View] = None
        self._align = Alignment(0)
        self._style = Style()
        self._text: list[str] = []
        self._widths: list[int] = []
        self._styles: list[Style] = []
        self._lengths: list[int] = []
        self._width = 0
        self._height = 0

    def _clear(self) -> None:
        view = self._view
        w, h = view.size()
        view.clear()
        for y in range(h):
            for x in range(w):
                view.set_content(x, y, " ", None, self._style)

    def _calc_y(self, height: int) -> int:
        if self._align & Alignment.VALIGN_CENTER:
            return (height - len(self._lengths)) // 2
        if self._align & Alignment.VALIGN_BOTTOM:
            return height - len(self._lengths)
        return 0

    def _calc_x(self, width: int, line: int) -> int:
        if self._align & Alignment.HALIGN_CENTER:
            return (width - self._lengths[line]) // 2
        if self._align & Alignment.HALIGN_RIGHT:
            return width - self._lengths[line]
        return 0

    def draw(self) -> None:
        view = self._view
        if view is None:
            return
        width, height = view.size()
        if width == 0 or height == 0:
            return

        self._clear()

        y = self._calc_y(height)
        main = ""
        w = 0
        x = 0
        style = self._style
        comb: list[str] = []
        line = 0
        newline = True
        for ch, cw, cstyle in zip(self._text, self._widths, self._styles):
            if newline:
                x = self._calc_x(width, line)
                newline = False
            if ch == "\n":
                if w:
                    view.set_content(x, y, main, comb or None, style)
                newline = True
                w = 0
                comb = []
                line += 1
                y += 1
                continue
            if cw == 0:
                comb.append(ch)
                continue
            if w:
                view.set_content(x, y, main, comb or None, style)
                x += w
            main = ch
            w = cw
            style = cstyle
            comb = []
        if w:
            view.set_content(x, y, main, comb or None, style)

    def size(self) -> tuple[int, int]:
        if self._text:
            return self._width, self._height
        return 0, 0

    def set_alignment(self, align: Alignment) -> None:
        if align != self._align:
            self._align = Alignment(align)
            self.post_event_widget_content(self)

    def alignment(self) -> Alignment:
        return self._align

    def set_view(self, view: Any) -> None:
        self._view = view

    def handle_event(self, event: Event) -> bool:
        return False

    def set_text(self, s: str) -> None:
        """Replace the text; every character takes the widget's style.

        A combining character at the start of a line gets a leading space.
        """
        text: list[str] = []
        widths: list[int] = []
        styles: list[Style] = []
        lengths: list[int] = []
        length = 0
        widest = 0
        for ch in s:
            cw = _rune_width(ch)
            if ch == "\n":
                text.append(ch)
                widths.append(cw)
                styles.append(self._style)
                lengths.append(length)
                widest = max(widest, length)
                length = 0
            elif cw == 0 and length == 0:
                text.extend((" ", ch))
                widths.extend((1, 0))
                styles.extend((self._style, self._style))
                length += 1
            else:
                text.append(ch)
                widths.append(cw)
                styles.append(self._style)
                length += cw
        if length > 0:
            lengths.append(length)
            widest = max(widest, length)
        self._text = text
        self._widths = widths
        self._styles = styles
        self._lengths = lengths
        self._width = widest
        self._height = len(lengths)
        self.post_event_widget_content(self)

    def text(self) -> str:
        return "".join(self._text)

    def set_style(self, style: Style) -> None:
        """Apply the style to every non-combining character."""
        self._style = style
        self._styles = [
            style if width != 0 else old
            for width, old in zip(self._widths, self._styles)
        ]
        self.post_event_widget_content(self)

    def style(self) -> Style:
        return self._style

    def _styleable(self, pos: int) -> bool:
        return 0 <= pos < len(self._text) and self._widths[pos] >= 1

    def set_style_at(self, pos: int, style: Style) -> None:
        """Style one character; invalid or combining positions are ignored."""
        if not self._styleable(pos):
            return
        self._styles[pos] = style
        self.post_event_widget_content(self)

    def style_at(self, pos: int) -> Style:
        """Style at a position, or the default style if not styleable."""
        if not self._styleable(pos):
            return Style()
        return self._styles[pos]

    def resize(self) -> None:
        self.post_event_widget_resize(self)