"""Intraday stock toolkit: fetching, parsing, charting and control settings."""

__version__ = "0.1.0"
__all__ = ["chart", "fetcher", "main", "ui"]