from unittest.mock import Mock

from tuiviews.spacer import Spacer
from tuiviews.widget import EventWidgetResize, Key, KeyEvent


def test_spacer_requires_no_size():
    assert Spacer().size() == (0, 0)


def test_spacer_ignores_events():
    assert Spacer().handle_event(KeyEvent(Key.ENTER)) is False


def test_spacer_draws_nothing():
    view = Mock()
    spacer = Spacer()
    spacer.set_view(view)
    spacer.draw()
    assert view.mock_calls == []


def test_spacer_resize_notifies_watchers():
    spacer = Spacer()
    handler = Mock()
    spacer.watch(handler)
    spacer.resize()
    handler.handle_event.assert_called_once()
    (event,) = handler.handle_event.call_args.args
    assert isinstance(event, EventWidgetResize)
    assert event.widget is spacer