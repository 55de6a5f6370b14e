# widgetkit

State and geometry models for a handful of small custom widgets. Each
model holds a widget's behaviour (values, clamping, animation steps,
text formatting and layout geometry) without depending on any GUI
toolkit. A renderer can read the models to draw the widgets, and the
models can be tested on their own.

## Widgets

- `widgetkit.scroll_label.ScrollLabel`: the scrolling state of a
  marquee label, moving in a `ScrollDirection` (`RIGHT_TO_LEFT` or
  `LEFT_TO_RIGHT`). Call `tick()` on every timer step (every
  `interval` milliseconds, 20 by default) to advance the text by one
  pixel. Call `resize(old_width, new_width)` when the label changes
  size; shrinking restarts the scroll. `text_x(text_width)` returns the
  x position at which to draw the text. It returns `None` when the
  measured text width has changed, which also restarts the scroll.
  Changing `direction` restarts the scroll too.
- `widgetkit.overlay_table.OverlayTable`: a table with a "Settings"
  button pinned to its top-right corner. `resize(width)` returns the
  button geometry `(x, y, width, height)`, and `click()` emits the
  `clicked_details` signal.
- `widgetkit.joystick.JoystickPad`: a round pad with a draggable knob.
  Its `x` and `y` run from -1 to 1; values assigned to them are clamped
  to that range with `constrain`. Feed it `resize(width, height)`,
  `press(x, y)`, `move(x, y)` and `release()`. Releasing starts a
  400 ms ease-out return to the centre, which you advance with
  `step_animation(elapsed_ms)`. The x and y return animations can be
  switched off and on with `remove_x_animation()`, `add_x_animation()`,
  `remove_y_animation()` and `add_y_animation()`. An `Alignment` places
  the square pad inside a non-square area. The pad's geometry is held in
  `Rect` objects (`bounds`, `knob_bounds`).
- `widgetkit.round_progress.RoundProgressBar`: a circular progress bar
  in one of the `BarStyle` looks (`DONUT`, `PIE`, `LINE`). It keeps its
  `value` inside its range: `set_range(minimum, maximum)` swaps reversed
  bounds and clamps the value. Its `format` may use `%v` (value), `%p`
  (percentage) and `%m` (number of steps), printed with `decimals`
  decimal places; `value_to_text(value)` expands them and
  `reset_format()` clears the format so that no text is shown. It also
  computes `arc_length()`, `inner_rect(outer_radius)`,
  `text_pixel_size(inner_radius)` and `data_gradient()`, the inverted
  conical gradient built from `data_colors`. The constants
  `POSITION_LEFT`, `POSITION_TOP`, `POSITION_RIGHT` and
  `POSITION_BOTTOM` are angles for `null_position`.
- `widgetkit.progress_indicator.ProgressIndicator`: an indeterminate
  spinner of twelve fading capsules. `start_animation()`,
  `stop_animation()` and `tick()` (30 degrees per step, every
  `animation_delay` milliseconds) drive it. `capsules(width, height)`
  returns the `Capsule` shapes to draw, or an empty list while it is
  stopped and `displayed_when_stopped` is false.

Widgets announce changes through `widgetkit.signal.Signal`. Callables
are attached with `connect`, removed with `disconnect`, and called with
`emit`:

```python
from widgetkit.joystick import JoystickPad

pad = JoystickPad()
pad.x_changed.connect(lambda x: print("x:", x))
pad.resize(200, 200)
pad.press(100, 100)
pad.move(150, 100)
pad.release()
while pad.step_animation(50):
    pass
```

## Demo

A short text demonstration of every widget runs with:

```
widgetkit-demo
```

It prints the texts of seven sample round progress bars, the angles of
a spinning indicator, the positions of two scroll labels, the joystick
values during a drag and its return, and the overlay button's position
and click. The options `--minimum`, `--maximum`, `--value`, `--delay`,
`--ticks` and `--table-width` change the inputs.

## What it does not do

widgetkit draws nothing and opens no windows. It has no timers and no
event loop: the caller drives `tick()` and `step_animation()` and
passes in sizes and pointer positions. Colours are stored as given and
never interpreted.

## Tests

```
pip install -e ".[test]"
pytest
```