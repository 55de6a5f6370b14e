"""Command-line demonstration of the widgets' behaviour."""

from __future__ import annotations

import argparse
from typing import Sequence

from widgetkit.joystick import JoystickPad, constrain
from widgetkit.overlay_table import OverlayTable
from widgetkit.progress_indicator import ProgressIndicator
from widgetkit.round_progress import (
    POSITION_LEFT,
    POSITION_RIGHT,
    BarStyle,
    RoundProgressBar,
)
from widgetkit.scroll_label import ScrollDirection, ScrollLabel

_GRADIENT = [(0.0, "green"), (0.5, "yellow"), (1.0, "red")]


def sample_round_bars(minimum, maximum, value) -> list[RoundProgressBar]:
    """Build the seven sample bars, all following one slider's range and value."""
    donut = RoundProgressBar()
    donut.format = "%v"
    donut.decimals = 0

    pie = RoundProgressBar()
    pie.null_position = POSITION_RIGHT
    pie.bar_style = BarStyle.PIE

    line = RoundProgressBar()
    line.format = "%m"
    line.bar_style = BarStyle.LINE

    gradient_donut = RoundProgressBar()
    gradient_donut.null_position = POSITION_LEFT
    gradient_donut.decimals = 0
    gradient_donut.data_colors = _GRADIENT

    gradient_pie = RoundProgressBar()
    gradient_pie.null_position = POSITION_RIGHT
    gradient_pie.bar_style = BarStyle.PIE
    gradient_pie.data_colors = _GRADIENT

    thick_line = RoundProgressBar()
    thick_line.decimals = 2
    thick_line.bar_style = BarStyle.LINE
    thick_line.outline_pen_width = 18
    thick_line.data_pen_width = 10

    big = RoundProgressBar()

    bars = [donut, pie, line, gradient_donut, gradient_pie, thick_line, big]
    for bar in bars:
        bar.set_range(minimum, maximum)
        bar.value = value
    return bars


def _show_round_bars(minimum: float, maximum: float, value: float) -> None:
    for number, bar in enumerate(sample_round_bars(minimum, maximum, value), start=1):
        print(f"round bar {number} ({bar.bar_style.value}): {bar.text}")


def _show_progress_indicator(delay: int, ticks: int) -> None:
    indicator = ProgressIndicator()
    indicator.animation_delay = constrain(delay, 0, 100)
    indicator.start_animation()
    angles = [indicator.tick() for _ in range(ticks)]
    print(f"indicator delay {indicator.animation_delay} ms, angles: {angles}")
    indicator.stop_animation()


def _show_scroll_labels(ticks: int) -> None:
    right_to_left = ScrollLabel("Scrolling text", ScrollDirection.RIGHT_TO_LEFT)
    left_to_right = ScrollLabel("Scrolling text", ScrollDirection.LEFT_TO_RIGHT, 50)
    for name, label in (("right to left", right_to_left), ("left to right", left_to_right)):
        label.resize(0, 200)
        label.text_x(80)
        positions = []
        for _ in range(ticks):
            label.tick()
            positions.append(label.text_x(80))
        print(f"scroll label {name} every {label.interval} ms: {positions}")


def _show_joystick() -> None:
    pad = JoystickPad()
    pad.x_changed.connect(lambda x: print(f"x: {x} y: {pad.y}"))
    pad.y_changed.connect(lambda y: print(f"x: {pad.x} y: {y}"))
    pad.resize(200, 200)
    cx, cy = pad.knob_bounds.center()
    if pad.press(cx, cy):
        pad.move(cx + 20, cy - 10)
        pad.release()
        while pad.step_animation(100):
            pass


def _show_overlay_table(width: int) -> None:
    table = OverlayTable()
    table.clicked_details.connect(lambda: print("Clicked Button from TableWidget"))
    print(f"{table.button_text} button at {table.resize(width)}")
    table.click()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise the widget models.")
    parser.add_argument("--minimum", type=float, default=0.0)
    parser.add_argument("--maximum", type=float, default=100.0)
    parser.add_argument("--value", type=float, default=25.0)
    parser.add_argument("--delay", type=int, default=40)
    parser.add_argument("--ticks", type=int, default=5)
    parser.add_argument("--table-width", type=int, default=400)
    args = parser.parse_args(argv)
    if args.ticks < 0:
        parser.error("--ticks must not be negative")

    _show_round_bars(args.minimum, args.maximum, args.value)
    _show_progress_indicator(args.delay, args.ticks)
    _show_scroll_labels(args.ticks)
    _show_joystick()
    _show_overlay_table(args.table_width)
    return 0