# tuiviews

A small widget toolkit for cell-based terminal user interfaces. It has
views to draw into, widgets that draw themselves and layouts that arrange
them. All drawing goes through `set_content(x, y, ch, comb, style)` on a
`View`. Any surface that can place a styled character in a cell can host
the widgets.

## Installation

```
pip install tuiviews
```

The only runtime dependency is `wcwidth`. `Text` uses it to measure
character widths.

## Modules

- `tuiviews.constants`
  - `Alignment` is a flag enum: `HALIGN_LEFT`, `HALIGN_CENTER`,
    `HALIGN_RIGHT`, `VALIGN_TOP`, `VALIGN_CENTER` and `VALIGN_BOTTOM`.
    The combinations `BEGIN`, `END` and `MIDDLE` are also provided.
  - `Orientation` has the values `HORIZONTAL` and `VERTICAL`.
- `tuiviews.view`
  - `Style` is an immutable dataclass holding `fg`, `bg` and `attrs`.
  - `foreground`, `background`, `bold`, `underline` and `reverse` each
    return a new `Style`.
  - `Attr` lists the attribute bits.
  - `View` is the abstract drawing surface. It declares `set_content`,
    `size`, `resize` and `fill`, and provides a default `clear`.
  - `ViewPort` is a `View` that clips drawing to a window onto a larger
    content area and offsets it. It has these methods:
    - Scrolling: `scroll_up`, `scroll_down`, `scroll_left`,
      `scroll_right`, `make_visible` and `center`.
    - Sizing: `set_size`, `set_content_size`, `get_content_size` and
      `resize`. A negative width or height in `resize` extends the port to
      the parent's edge.
    - Inspection: `get_visible` and `get_physical`.
    - Other: `reset` and `set_view`.
- `tuiviews.widget`
  - `Widget` is the abstract base of every widget. It declares `draw`,
    `resize`, `handle_event`, `set_view` and `size`.
  - `WidgetWatchers` lets handlers `watch` or `unwatch` a widget. Watchers
    receive `EventWidgetContent`, `EventWidgetResize` and `EventWidgetMove`.
  - Events are dataclasses based on `Event`: `KeyEvent` (with a `Key`, a
    `rune` and `modifiers`), `ResizeEvent` and `EventWidget`.
- `tuiviews.spacer`
  - `Spacer` is an empty widget that takes up stretch space in layouts.
- `tuiviews.text`
  - `Text` is a block of text with one style per character.
  - Use `set_alignment` to align it and `set_style` to style every
    character.
  - Use `set_style_at` and `style_at` to read or change the style of a
    single character.
  - A combining character at the start of a line gets a leading space.
- `tuiviews.sstext`
  - `SimpleStyledText` is text with inline markup:
    - `%%` gives a literal `%`.
    - `%N` is the normal style.
    - `%S` is reverse.
    - `%B` is bold.
    - `%U` is underline.
  - `register_style` adds styles for other letters. `lookup_style` returns
    the style registered for a letter. `markup` returns the last markup
    set.
- `tuiviews.textbar`
  - `TextBar` is a one-line bar with left, centre and right text areas:
    `set_left`, `set_center` and `set_right`.
  - Passing the default style to those methods uses the bar's own style,
    which is set with `set_style`.
- `tuiviews.sstextbar`
  - `SimpleStyledTextBar` is the same kind of bar, with markup in each
    area.
  - It has `register_left_style`, `register_center_style` and
    `register_right_style`.
- `tuiviews.cellarea`
  - `CellModel` is the abstract content for a `CellView`. It declares
    `get_cell`, `get_bounds`, `set_cursor`, `get_cursor` and `move_cursor`.
  - `CellView` shows a model through a scrolling port.
  - It handles these keys:
    - Up or Ctrl-P, Down or Ctrl-N.
    - Left or Ctrl-B, Right or Ctrl-F.
    - PgUp, PgDn, Home and End.
  - When the model's cursor is enabled, those keys move the cursor.
    Otherwise they pan the view.
- `tuiviews.textarea`
  - `TextArea` is a `CellView` over a `LinesModel` of text lines.
  - `set_content` splits a string on newlines. `set_lines` takes a list.
  - `enable_cursor` and `hide_cursor` control the soft cursor.
- `tuiviews.boxlayout`
  - `BoxLayout` arranges children in a row or a column. Children are
    managed with `add_widget`, `insert_widget`, `remove_widget` and
    `widgets`.
  - Each child has a fill factor. Spare space is shared out in proportion
    to the fill factors, and left-over cells go to the largest remainders.
  - An orientation that is neither horizontal nor vertical raises
    `ValueError` at layout time.
- `tuiviews.panel`
  - `Panel` is a vertical layout with optional title, menu, content and
    status widgets: `set_title`, `set_menu`, `set_content` and
    `set_status`.
  - Only the content area expands.
- `tuiviews.app`
  - `Screen` is the abstract surface an application runs on. It is a
    `View` that also declares `init`, `fini`, `clear`, `show`, `sync`,
    `set_style`, `poll_event` and `post_event_wait`.
  - `Application` runs the event loop in a background thread. Use
    `start` and `wait`, or `run` to do both.
  - Each pass of the loop draws the root widget, shows the screen and
    dispatches one event.
  - `quit`, `refresh`, `update` and `post_func` post requests to the loop
    and return at once.

## Example

```python
from tuiviews.boxlayout import BoxLayout
from tuiviews.constants import Alignment, Orientation
from tuiviews.text import Text
from tuiviews.view import Style

box = BoxLayout(Orientation.HORIZONTAL)

left = Text()
left.set_text("Left (0.0)")
left.set_alignment(Alignment.BEGIN)

right = Text()
right.set_text("Right (1.0)")
right.set_alignment(Alignment.END)
right.set_style(Style().reverse(True))

box.add_widget(left, 0.0)
box.add_widget(right, 1.0)
```

To run it, give an `Application` a `Screen` and the root widget:

```python
from tuiviews.app import Application

app = Application()
app.set_screen(my_screen)
app.set_root_widget(box)
app.run()
```

Call `app.quit()` from an event handler to stop the loop.

## What the package does not do

The package does not include a `Screen` that drives a real terminal. It
has no raw-mode handling, no escape-sequence output and no keyboard or
mouse decoding. You must supply a `Screen` subclass backed by your own
terminal layer.

If an `Application` is run without a screen, `wait` (and so `run`) raises
`tuiviews.app.NoScreenError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```