from unittest.mock import Mock

import pytest

from tuiviews.constants import Alignment
from tuiviews.text import Text
from tuiviews.view import Style, View
from tuiviews.widget import EventWidgetContent, EventWidgetResize


class _Canvas(View):
    """Keeps every drawn cell as (char, combining marks, style)."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.cells = {}

    def set_content(self, x, y, ch, comb=None, style=Style()):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[(x, y)] = (ch, list(comb or []), style)

    def size(self):
        return self.width, self.height

    def resize(self, x, y, width, height):
        self.width, self.height = width, height

    def fill(self, ch, style):
        for y in range(self.height):
            for x in range(self.width):
                self.set_content(x, y, ch, None, style)

    def row(self, y):
        return "".join(self.cells.get((x, y), (" ",))[0] for x in range(self.width))


def _posted(handler):
    return [call.args[0] for call in handler.handle_event.call_args_list]


def _text(s):
    text = Text()
    text.set_text(s)
    return text


def test_width_of_long_text():
    text = _text("\nThis\nString\nIs\nPretty\nLong\n12345678901234567890\n")
    assert text.size()[0] == 20


@pytest.mark.parametrize(
    "source, stored, size",
    [
        ("", "", (0, 0)),
        ("hello\nworld", "hello\nworld", (5, 2)),
        ("\u0301a", " \u0301a", (2, 1)),
    ],
)
def test_text_and_size(source, stored, size):
    text = _text(source)
    assert text.text() == stored
    assert text.size() == size


def test_set_style_at_changes_one_position():
    text = _text("abc")
    bold = Style().bold(True)
    text.set_style_at(1, bold)
    assert text.style_at(1) == bold
    assert text.style_at(0) == Style()


@pytest.mark.parametrize("pos", [-1, 3])
def test_style_at_out_of_range_is_default(pos):
    assert _text("abc").style_at(pos) == Style()


def test_set_style_applies_to_all():
    text = _text("ab")
    red = Style().foreground("red")
    text.set_style(red)
    assert text.style() == red
    assert [text.style_at(i) for i in range(2)] == [red, red]


def test_alignment_change_posts_event():
    text = Text()
    handler = Mock()
    text.watch(handler)
    text.set_alignment(Alignment.HALIGN_RIGHT)
    assert text.alignment() == Alignment.HALIGN_RIGHT
    events = _posted(handler)
    assert len(events) == 1
    assert isinstance(events[0], EventWidgetContent)
    assert events[0].widget is text
    text.set_alignment(Alignment.HALIGN_RIGHT)
    assert len(_posted(handler)) == 1


def test_resize_posts_resize_event():
    text = _text("ab")
    handler = Mock()
    text.watch(handler)
    text.resize()
    assert text.size() == (2, 1)
    last = _posted(handler)[-1]
    assert isinstance(last, EventWidgetResize)
    assert last.widget is text


def test_draw_left_aligned():
    canvas = _Canvas(5, 2)
    text = _text("hi")
    text.set_view(canvas)
    text.draw()
    assert [canvas.row(0), canvas.row(1)] == ["hi   ", " " * 5]


def test_draw_right_bottom_aligned():
    canvas = _Canvas(5, 3)
    text = _text("hi")
    text.set_alignment(Alignment.END)
    text.set_view(canvas)
    text.draw()
    assert canvas.row(2).endswith("hi")
    assert canvas.row(0).strip() == ""


def test_draw_keeps_combining_marks():
    canvas = _Canvas(3, 1)
    text = _text("e\u0301x")
    text.set_view(canvas)
    text.draw()
    assert canvas.cells[(0, 0)][:2] == ("e", ["\u0301"])
    assert canvas.cells[(1, 0)][0] == "x"


def test_handle_event_is_ignored():
    assert Text().handle_event(EventWidgetContent(None)) is False