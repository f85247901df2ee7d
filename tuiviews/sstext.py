"""Text with simple in-line style markup."""

from __future__ import annotations

from .text import Text
from .view import Style


class SimpleStyledText(Text):
    """Text whose styles are selected with ``%<letter>`` markup.

    ``%%`` emits a literal percent sign; ``%N`` normal, ``%S`` standout,
    ``%U`` underline and ``%B`` bold are predefined.  Other letters may be
    registered with :meth:`register_style`.
    """

    def __init__(self) -> None:
        super().__init__()
        default = Style()
        self._registered: dict[str, Style] = {
            "N": default,
            "S": default.reverse(True),
            "U": default.underline(True),
            "B": default.bold(True),
        }
        self._markup = ""

    def set_markup(self, s: str) -> None:
        """Set the text from marked-up input."""
        chars: list[str] = []
        char_styles: list[Style] = []
        style = self._registered.get("N", Style())
        escaped = False
        for ch in s:
            if escaped:
                escaped = False
                if ch == "%":
                    chars.append("%")
                    char_styles.append(style)
                else:
                    style = self._registered.get(ch, Style())
                continue
            if ch == "%":
                escaped = True
                continue
            chars.append(ch)
            char_styles.append(style)

        self.set_text("".join(chars))
        for pos, char_style in enumerate(char_styles):
            self.set_style_at(pos, char_style)
        self._markup = s

    def register_style(self, r: str, style: Style) -> None:
        """Register a style for ``%<r>``; only letters are accepted."""
        if r == "N":
            self.set_style(style)
        if r.isalpha():
            self._registered[r] = style

    def lookup_style(self, r: str) -> Style:
        return self._registered.get(r, Style())

    def markup(self) -> str:
        return self._markup