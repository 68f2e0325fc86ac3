"""State of the dashboard's control panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .chart import ChartType

SMA_PERIOD_MIN = 2
SMA_PERIOD_MAX = 30


@dataclass
class Controls:
    """Symbol selection, chart type and moving-average settings."""

    symbols: list[str] = field(default_factory=list)
    selected_symbol: str = ""
    chart_type: ChartType = ChartType.CANDLESTICK
    show_sma: bool = False
    sma_period: int = 10
    selected: int = 0

    def select(self, index: int) -> str:
        """Select the symbol at ``index`` and return it."""
        if not 0 <= index < len(self.symbols):
            raise IndexError(f"no symbol at position {index}")
        self.selected = index
        self.selected_symbol = self.symbols[index]
        return self.selected_symbol

    def set_chart_type(self, chart_type: Union[ChartType, int]) -> ChartType:
        """Switch chart type; accepts a ChartType or its numeric value."""
        self.chart_type = ChartType(chart_type)
        return self.chart_type

    def set_show_sma(self, show: bool) -> bool:
        self.show_sma = bool(show)
        return self.show_sma

    def set_sma_period(self, period: int) -> int:
        """Set the moving-average period, kept within the slider's range."""
        self.sma_period = min(max(int(period), SMA_PERIOD_MIN), SMA_PERIOD_MAX)
        return self.sma_period