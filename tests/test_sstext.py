from tuiviews.sstext import SimpleStyledText
from tuiviews.view import Style


def test_markup_round_trip():
    sst = SimpleStyledText()
    sst.set_markup("a%Bb%Nc")
    assert sst.markup() == "a%Bb%Nc"
    assert sst.text() == "abc"


def test_markup_applies_styles():
    sst = SimpleStyledText()
    sst.set_markup("a%Bb%Nc%Ud%Se")
    assert sst.style_at(0) == Style()
    assert sst.style_at(1) == Style().bold(True)
    assert sst.style_at(2) == Style()
    assert sst.style_at(3) == Style().underline(True)
    assert sst.style_at(4) == Style().reverse(True)


def test_percent_escape():
    sst = SimpleStyledText()
    sst.set_markup("100%%")
    assert sst.text() == "100%"


def test_register_letter_style():
    sst = SimpleStyledText()
    red = Style().foreground("red")
    sst.register_style("x", red)
    assert sst.lookup_style("x") == red
    sst.set_markup("%xab")
    assert sst.style_at(0) == red
    assert sst.style_at(1) == red


def test_register_non_letter_is_ignored():
    sst = SimpleStyledText()
    sst.register_style("1", Style().bold(True))
    assert sst.lookup_style("1") == Style()


def test_register_normal_sets_default_style():
    sst = SimpleStyledText()
    blue = Style().background("blue")
    sst.register_style("N", blue)
    assert sst.style() == blue
    sst.set_markup("hi")
    assert sst.style_at(0) == blue


def test_unregistered_markup_uses_default():
    sst = SimpleStyledText()
    sst.set_markup("%Ba%qb")
    assert sst.style_at(0) == Style().bold(True)
    assert sst.style_at(1) == Style()
    assert sst.text() == "ab"


def test_predefined_lookup():
    sst = SimpleStyledText()
    assert sst.lookup_style("B") == Style().bold(True)
    assert sst.lookup_style("N") == Style()