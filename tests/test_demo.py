import pytest

from widgetkit.demo import main, sample_round_bars
from widgetkit.round_progress import POSITION_LEFT, POSITION_RIGHT, BarStyle


def test_seven_bars_share_range_and_value():
    bars = sample_round_bars(0, 100, 40)
    assert len(bars) == 7
    for bar in bars:
        assert (bar.minimum, bar.maximum, bar.value) == (0, 100, 40)


def test_value_is_clamped_into_range():
    bars = sample_round_bars(10, 20, 99)
    assert all(bar.value == 20 for bar in bars)


def test_donut_shows_integer_value():
    donut = sample_round_bars(0, 100, 40)[0]
    assert donut.bar_style is BarStyle.DONUT
    assert donut.format == "%v"
    assert donut.decimals == 0
    assert donut.text == "40"


def test_pie_and_line_configuration():
    bars = sample_round_bars(0, 100, 40)
    pie, line = bars[1], bars[2]
    assert pie.bar_style is BarStyle.PIE
    assert pie.null_position == POSITION_RIGHT
    assert line.bar_style is BarStyle.LINE
    assert line.format == "%m"


def test_gradient_bars():
    bars = sample_round_bars(0, 100, 40)
    gradient_donut, gradient_pie = bars[3], bars[4]
    assert gradient_donut.null_position == POSITION_LEFT
    assert gradient_donut.decimals == 0
    assert [color for _, color in gradient_donut.data_colors] == ["green", "yellow", "red"]
    assert gradient_pie.bar_style is BarStyle.PIE
    assert gradient_pie.data_colors == gradient_donut.data_colors


def test_thick_line_bar():
    thick = sample_round_bars(0, 100, 40)[5]
    assert thick.bar_style is BarStyle.LINE
    assert thick.decimals == 2
    assert thick.outline_pen_width == 18
    assert thick.data_pen_width == 10


def test_big_bar_uses_defaults():
    big = sample_round_bars(0, 100, 40)[6]
    assert big.bar_style is BarStyle.DONUT
    assert big.format == "%p%"


def test_main_prints_every_widget(capsys):
    assert main(["--value", "40", "--ticks", "3"]) == 0
    out = capsys.readouterr().out
    assert "round bar 1 (donut): 40" in out
    assert "Clicked Button from TableWidget" in out
    assert "Settings button at" in out
    assert "scroll label right to left" in out
    assert "x: " in out


def test_main_clamps_delay_to_slider_range(capsys):
    assert main(["--delay", "500", "--ticks", "1"]) == 0
    out = capsys.readouterr().out
    assert "indicator delay 100 ms" in out


def test_main_rejects_negative_ticks():
    with pytest.raises(SystemExit):
        main(["--ticks", "-1"])