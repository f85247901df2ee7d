from tuiviews.panel import Panel
from tuiviews.text import Text
from tuiviews.view import View


class _Page(View):
    """Holds the screen as a list of character rows."""

    def __init__(self, columns, lines):
        self.columns = columns
        self.lines = [[" "] * columns for _ in range(lines)]

    def set_content(self, x, y, ch, comb=None, style=None):
        if 0 <= y < len(self.lines) and 0 <= x < self.columns:
            self.lines[y][x] = ch

    def size(self):
        return self.columns, len(self.lines)

    def resize(self, x, y, width, height):
        return None

    def fill(self, ch, style):
        self.lines = [[ch] * self.columns for _ in self.lines]

    def text_at(self, y):
        return "".join(self.lines[y])


def _texts(labels):
    result = []
    for label in labels:
        t = Text()
        t.set_text(label)
        result.append(t)
    return result


def test_areas_are_ordered_regardless_of_call_order():
    panel = Panel()
    title, menu, content, status = _texts("TMCS")
    panel.set_status(status)
    panel.set_content(content)
    panel.set_title(title)
    panel.set_menu(menu)
    assert panel.widgets() == [title, menu, content, status]


def test_replacing_an_area_keeps_position():
    panel = Panel()
    title, content, new_title, new_content = _texts("TCND")
    panel.set_title(title)
    panel.set_content(content)
    panel.set_title(new_title)
    assert panel.widgets() == [new_title, content]
    panel.set_content(new_content)
    assert panel.widgets() == [new_title, new_content]


def test_draw_places_title_top_and_status_bottom():
    panel = Panel()
    title, body, status = _texts(["Title", "Body", "Status"])
    panel.set_title(title)
    panel.set_content(body)
    panel.set_status(status)
    page = _Page(10, 6)
    panel.set_view(page)
    panel.draw()
    assert page.text_at(0).startswith("Title")
    assert page.text_at(1).startswith("Body")
    assert page.text_at(5).startswith("Status")
    assert all(page.text_at(y).strip() == "" for y in range(2, 5))


def test_draw_is_vertical():
    panel = Panel()
    first, second = _texts("AB")
    panel.set_title(first)
    panel.set_status(second)
    page = _Page(4, 2)
    panel.set_view(page)
    panel.draw()
    assert [page.text_at(0).strip(), page.text_at(1).strip()] == ["A", "B"]