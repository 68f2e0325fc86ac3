"""Intraday quote download, parsing and periodic background fetching."""

from __future__ import annotations

import json
import math
import re
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import urlopen

SERIES_KEY = "Time Series (1min)"
BASE_URL = "https://www.alphavantage.co/query"
DEMO_ACCESS = "demo"

_TIMEOUT_SECONDS = 60
_FIELDS = (
    ("open", "1. open"),
    ("high", "2. high"),
    ("low", "3. low"),
    ("close", "4. close"),
    ("volume", "5. volume"),
)
_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class StockDataPoint:
    """One bar of an intraday price series."""

    timestamp: str
    open: float
    high: float
    low: float
    close: float
    volume: float


class FetchError(Exception):
    """Raised when quotes cannot be downloaded or understood."""


Downloader = Callable[[str], str]
Callback = Callable[[List[StockDataPoint], str], None]


def build_url(symbol: str, api_key: Optional[str] = None) -> str:
    """Return the query URL for the one-minute intraday series of ``symbol``."""
    query = urlencode(
        {
            "function": "TIME_SERIES_INTRADAY",
            "symbol": symbol,
            "interval": "1min",
            "apikey": DEMO_ACCESS if api_key is None else api_key,
            "outputsize": "compact",
        }
    )
    return f"{BASE_URL}?{query}"


def _to_float(text: str) -> float:
    """Read the leading number of ``text`` the way a lenient C parser would."""
    match = _NUMBER.match(text)
    if match is None:
        raise FetchError(f"invalid number {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise FetchError(f"number out of range {text!r}")
    return value


def _point(timestamp: str, fields: object) -> StockDataPoint:
    if not isinstance(fields, dict):
        raise FetchError(f"entry {timestamp!r} is not an object")
    values = {}
    for attribute, key in _FIELDS:
        raw = fields.get(key)
        if not isinstance(raw, str):
            raise FetchError(f"field {key!r} of {timestamp!r} is not a string")
        values[attribute] = _to_float(raw)
    return StockDataPoint(timestamp=timestamp, **values)


def parse_alpha_vantage(json_str: str) -> list[StockDataPoint]:
    """Parse an intraday response into points ordered by timestamp."""
    try:
        document = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise FetchError(str(exc)) from exc
    if not isinstance(document, dict) or SERIES_KEY not in document:
        raise FetchError("API response missing Time Series (1min)")
    series = document[SERIES_KEY]
    if not isinstance(series, dict):
        raise FetchError("Time Series (1min) is not an object")
    return [_point(timestamp, fields) for timestamp, fields in sorted(series.items())]


def download(url: str) -> str:
    """Fetch ``url`` and return its body; HTTP error bodies are returned too."""
    try:
        with urlopen(url, timeout=_TIMEOUT_SECONDS) as response:
            body = response.read()
    except HTTPError as exc:
        body = exc.read()
    except URLError as exc:
        raise FetchError(str(exc.reason)) from exc
    except (OSError, ValueError) as exc:
        raise FetchError(str(exc)) from exc
    return body.decode("utf-8", errors="replace")


class StockFetcher:
    """Fetches a symbol's quotes on a background thread at a fixed interval."""

    def __init__(self, downloader: Downloader = download) -> None:
        self._download = downloader
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self, symbol: str, interval_seconds: float, callback: Optional[Callback]) -> None:
        """Stop any running fetch and begin polling ``symbol``."""
        self.stop()
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._loop,
            args=(symbol, interval_seconds, callback),
            name=f"fetch-{symbol}",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop polling and wait for the worker to finish."""
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def fetch_once(self, symbol: str) -> list[StockDataPoint]:
        """Download and parse the current series for ``symbol``."""
        return parse_alpha_vantage(self._download(build_url(symbol)))

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stop_event.is_set()

    def _loop(self, symbol: str, interval_seconds: float, callback: Optional[Callback]) -> None:
        while not self._stop_event.is_set():
            try:
                data, error = self.fetch_once(symbol), ""
            except FetchError as exc:
                data, error = [], str(exc)
            if callback is not None:
                callback(data, error)
            self._stop_event.wait(max(interval_seconds, 0))

    def __enter__(self) -> "StockFetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()