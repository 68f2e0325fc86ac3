import pytest

from stockdash.chart import ChartType
from stockdash.ui import SMA_PERIOD_MAX, SMA_PERIOD_MIN, Controls


def test_select_updates_symbol():
    controls = Controls(symbols=["IBM", "AAPL", "MSFT"])
    assert controls.select(2) == "MSFT"
    assert controls.selected == 2
    assert controls.selected_symbol == "MSFT"


def test_select_out_of_range_raises():
    controls = Controls(symbols=["IBM"])
    with pytest.raises(IndexError):
        controls.select(1)
    with pytest.raises(IndexError):
        controls.select(-1)
    assert controls.selected == 0


def test_set_chart_type_from_value_and_enum():
    controls = Controls()
    assert controls.set_chart_type(1) is ChartType.LINE
    assert controls.set_chart_type(ChartType.CANDLESTICK) is ChartType.CANDLESTICK
    assert controls.chart_type is ChartType.CANDLESTICK


def test_set_chart_type_invalid():
    with pytest.raises(ValueError):
        Controls().set_chart_type(7)


def test_show_sma_toggle():
    controls = Controls()
    assert controls.set_show_sma(True) is True
    assert controls.show_sma is True


def test_sma_period_clamped_to_slider_range():
    controls = Controls()
    assert controls.set_sma_period(100) == SMA_PERIOD_MAX
    assert controls.set_sma_period(0) == SMA_PERIOD_MIN
    assert controls.set_sma_period(15) == 15
    assert controls.sma_period == 15