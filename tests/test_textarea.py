from tuiviews.textarea import LinesModel, TextArea
from tuiviews.view import Style


def test_set_content():
    ta = TextArea()
    ta.set_content("This is a quite long line.")
    ta.set_content("Four.\nFive...\n...and Six.")
    width, height = ta.model().get_bounds()
    assert height == 3
    assert width == 11


def test_set_content_strips_outer_newlines():
    ta = TextArea()
    ta.set_content("\nab\ncde\n")
    assert ta.model().get_bounds() == (3, 2)


def test_set_lines_and_get_cell():
    ta = TextArea()
    ta.set_lines(["ab", "c"])
    model = ta.model()
    assert model.get_cell(1, 0)[0] == "b"
    assert model.get_cell(0, 1)[0] == "c"
    assert model.get_cell(1, 1)[0] == ""
    assert model.get_cell(-1, 0)[0] == ""
    assert model.get_cell(0, 5)[0] == ""


def test_empty_content():
    ta = TextArea()
    ta.set_content("")
    assert ta.model().get_bounds() == (0, 1)


def test_style_applies_to_cells():
    ta = TextArea()
    style = Style().bold(True)
    ta.set_style(style)
    ta.set_content("xy")
    assert ta.model().get_cell(0, 0)[1] == style
    assert ta.model().get_cell(9, 9)[1] == style


def test_cursor_is_clamped():
    model = LinesModel()
    model.runes = [list("abc"), list("de")]
    model.width, model.height = 3, 2
    model.set_cursor(10, 10)
    assert model.get_cursor()[:2] == (2, 1)
    model.move_cursor(-10, -10)
    assert model.get_cursor()[:2] == (0, 0)


def test_cursor_flags():
    ta = TextArea()
    ta.set_content("abc")
    assert ta.model().get_cursor()[2:] == (False, True)
    ta.enable_cursor(True)
    ta.hide_cursor(True)
    assert ta.model().get_cursor()[2:] == (True, False)