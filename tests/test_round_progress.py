import math

import pytest

from widgetkit.round_progress import (
    POSITION_LEFT,
    POSITION_RIGHT,
    POSITION_TOP,
    BarStyle,
    RoundProgressBar,
)


@pytest.fixture
def bar():
    return RoundProgressBar()


def test_defaults(bar):
    assert bar.minimum == 0
    assert bar.maximum == 100
    assert bar.value == 25
    assert bar.null_position == POSITION_TOP
    assert bar.bar_style is BarStyle.DONUT
    assert bar.format == "%p%"
    assert bar.decimals == 1


def test_set_range_swaps_reversed_bounds(bar):
    bar.set_range(50, 10)
    assert (bar.minimum, bar.maximum) == (10, 50)


def test_set_range_clamps_value(bar):
    bar.value = 90
    bar.set_range(0, 40)
    assert bar.value == 40
    bar.set_range(60, 80)
    assert bar.value == 60


def test_minimum_and_maximum_setters_use_range(bar):
    bar.maximum = -5
    assert bar.minimum == -5
    assert bar.maximum == 0
    assert bar.value == 0


@pytest.mark.parametrize("value, expected", [(-10, 0), (150, 100), (42, 42)])
def test_value_is_clamped(bar, value, expected):
    bar.value = value
    assert bar.value == expected


def test_percent_text(bar):
    bar.decimals = 0
    bar.value = 40
    assert bar.text == "40%"


def test_value_placeholder(bar):
    bar.format = "%v"
    bar.decimals = 0
    bar.value = 42
    assert bar.value_to_text(42) == "42"


def test_max_placeholder(bar):
    bar.format = "%m"
    bar.decimals = 0
    assert bar.value_to_text(bar.value) == "101"


def test_reset_format_shows_no_text(bar):
    bar.reset_format()
    assert bar.format == ""
    assert bar.text == ""
    assert bar.value_to_text(30) == ""


def test_format_without_placeholders_is_literal(bar):
    bar.format = "busy"
    assert bar.value_to_text(77) == "busy"


def test_negative_decimals_ignored(bar):
    bar.decimals = 3
    bar.decimals = -1
    assert bar.decimals == 3


def test_decimals_change_text_precision(bar):
    bar.format = "%v"
    bar.decimals = 2
    assert bar.value_to_text(7) == "7.00"


def test_percent_with_empty_range_is_nan(bar):
    bar.set_range(5, 5)
    assert bar.value_to_text(5) == "nan%"


def test_arc_length_full_at_maximum(bar):
    bar.value = 100
    assert bar.arc_length() == pytest.approx(360.0)


def test_arc_length_quarter(bar):
    assert bar.arc_length() == pytest.approx(90.0)


def test_arc_length_empty_range_is_infinite(bar):
    bar.set_range(3, 3)
    assert bar.arc_length() == math.inf


def test_inner_rect_donut_is_centered(bar):
    rect, radius = bar.inner_rect(100)
    assert radius == pytest.approx(75.0)
    assert rect.center() == pytest.approx((50.0, 50.0))
    assert rect.width == rect.height == radius


def test_inner_rect_line_uses_outline_width(bar):
    bar.bar_style = BarStyle.LINE
    bar.outline_pen_width = 18
    rect, radius = bar.inner_rect(200)
    assert radius == pytest.approx(200 - 18)
    assert rect.x == pytest.approx(9.0)


def test_pie_and_donut_share_inner_rect(bar):
    donut = bar.inner_rect(120)
    bar.bar_style = BarStyle.PIE
    assert bar.inner_rect(120) == donut


def test_text_pixel_size_shrinks_with_decimals(bar):
    bar.decimals = 0
    large = bar.text_pixel_size(200)
    bar.decimals = 2
    assert bar.text_pixel_size(200) < large


def test_text_pixel_size_has_a_floor(bar):
    bar.decimals = 4
    floor = bar.text_pixel_size(200)
    bar.decimals = 10
    assert bar.text_pixel_size(200) == floor
    assert floor > 0


def test_no_gradient_by_default(bar):
    assert bar.data_gradient() is None
    assert not bar.needs_rebuild


def test_data_gradient_is_inverted(bar):
    bar.null_position = POSITION_LEFT
    bar.data_colors = [(0, "green"), (0.5, "yellow"), (1, "red")]
    assert bar.needs_rebuild
    angle, stops = bar.data_gradient()
    assert angle == POSITION_LEFT
    assert stops == [(0.0, "red"), (0.5, "yellow"), (1.0, "green")]
    assert not bar.needs_rebuild


def test_gradient_rebuilt_after_null_position_change(bar):
    bar.data_colors = [(0, "green"), (1, "red")]
    bar.data_gradient()
    bar.null_position = POSITION_RIGHT
    assert bar.needs_rebuild
    angle, _ = bar.data_gradient()
    assert angle == POSITION_RIGHT


def test_range_change_marks_gradient_for_rebuild(bar):
    bar.data_colors = [(0, "green"), (1, "red")]
    bar.data_gradient()
    bar.set_range(0, 10)
    assert bar.needs_rebuild


def test_range_change_without_gradient_needs_no_rebuild(bar):
    bar.set_range(0, 10)
    assert not bar.needs_rebuild


def test_setting_same_colors_does_not_rebuild(bar):
    bar.data_colors = [(0, "green"), (1, "red")]
    bar.data_gradient()
    bar.data_colors = [(0, "green"), (1, "red")]
    assert not bar.needs_rebuild


def test_bar_style_rejects_unknown(bar):
    bar.bar_style = BarStyle.PIE
    with pytest.raises(ValueError):
        bar.bar_style = "ring"
    assert bar.bar_style is BarStyle.PIE