"""Price chart drawing: candlesticks, close line and simple moving average."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from matplotlib.lines import Line2D
from matplotlib.patches import Rectangle

from .fetcher import StockDataPoint

_HOVER_DISTANCE = 0.5


class ChartType(Enum):
    CANDLESTICK = 0
    LINE = 1


@dataclass(frozen=True)
class ChartSeries:
    """Columns of a price series laid out along the chart's x axis."""

    xs: tuple[float, ...]
    opens: tuple[float, ...]
    highs: tuple[float, ...]
    lows: tuple[float, ...]
    closes: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.xs)


def compute_sma(data: Sequence[StockDataPoint], period: int) -> list[float]:
    """Simple moving average of closing prices over ``period`` points."""
    if period < 1:
        raise ValueError("period must be at least 1")
    if len(data) < period:
        return []
    closes = [point.close for point in data]
    window = sum(closes[:period])
    averages = [window / period]
    for new, old in zip(closes[period:], closes):
        window += new
        window -= old
        averages.append(window / period)
    return averages


def prepare_series(data: Sequence[StockDataPoint]) -> ChartSeries:
    """Lay the points out in reverse order at x = 0, 1, 2, ..."""
    ordered = list(reversed(data))
    return ChartSeries(
        xs=tuple(float(x) for x in range(len(ordered))),
        opens=tuple(p.open for p in ordered),
        highs=tuple(p.high for p in ordered),
        lows=tuple(p.low for p in ordered),
        closes=tuple(p.close for p in ordered),
    )


def candle_at(xs: Sequence[float], x: float) -> Optional[int]:
    """Index of the first candle whose centre lies within hover distance of ``x``."""
    return next((i for i, cx in enumerate(xs) if abs(x - cx) < _HOVER_DISTANCE), None)


def tooltip_text(series: ChartSeries, index: int) -> str:
    """Open, close, low and high of one candle."""
    return (
        f"O: {series.opens[index]:.2f}\n"
        f"C: {series.closes[index]:.2f}\n"
        f"L: {series.lows[index]:.2f}\n"
        f"H: {series.highs[index]:.2f}"
    )


class ChartRenderer:
    """Draws price data onto a matplotlib axes."""

    BULL_COLOR = (0.0, 1.0, 0.0, 1.0)
    BEAR_COLOR = (1.0, 0.0, 0.0, 1.0)

    @staticmethod
    def plot_candlestick(ax, series: ChartSeries, width_percent: float = 0.25) -> list[Rectangle]:
        """Draw one wick and body per point; hovering shows the candle's prices."""
        xs = series.xs
        if not xs:
            return []
        half_width = (xs[1] - xs[0]) * width_percent if len(xs) > 1 else width_percent
        bodies = []
        for x, open_, close, low, high in zip(
            xs, series.opens, series.closes, series.lows, series.highs
        ):
            color = ChartRenderer.BEAR_COLOR if open_ > close else ChartRenderer.BULL_COLOR
            ax.add_line(Line2D([x, x], [low, high], color=color))
            body = Rectangle(
                (x - half_width, open_),
                2 * half_width,
                close - open_,
                facecolor=color,
                edgecolor=color,
            )
            bodies.append(ax.add_patch(body))

        def describe(x: float, y: float) -> str:
            index = candle_at(xs, x)
            if index is None:
                return f"x={x:.2f} y={y:.2f}"
            return tooltip_text(series, index).replace("\n", "  ")

        ax.format_coord = describe
        ax.autoscale_view()
        return bodies

    def draw(
        self,
        ax,
        data: Sequence[StockDataPoint],
        chart_type: ChartType = ChartType.CANDLESTICK,
        show_sma: bool = False,
        sma_period: int = 10,
    ) -> Optional[ChartSeries]:
        """Render ``data``; returns the series drawn, or None when there is none."""
        if not data:
            return None
        series = prepare_series(data)
        ax.set_title("Stock Chart")
        ax.set_xlabel("Time")
        ax.set_ylabel("Price")
        if chart_type is ChartType.CANDLESTICK:
            self.plot_candlestick(ax, series)
        else:
            ax.plot(series.xs, series.closes, label="Close Price")
        if show_sma:
            sma = compute_sma(data, sma_period)
            if sma:
                ax.plot(series.xs[len(series) - len(sma):], sma, label="SMA")
        return series