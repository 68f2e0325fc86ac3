# stockdash

A small toolkit for intraday stock data. It polls a one-minute time
series service on a background thread, parses the bars, and draws them
onto a matplotlib axes as candlesticks or a close-price line, with an
optional simple moving average. A `Controls` object holds the settings
a dashboard would offer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command

```
stockdash
```

prints a short start-up check message, waits for Enter and exits with
status 0. It takes no options besides `--help`.

## Fetching data

`stockdash.fetcher` holds the data side:

- `StockDataPoint` is a frozen dataclass for one bar: `timestamp`,
  `open`, `high`, `low`, `close` and `volume`.
- `build_url(symbol, api_key=None)` builds the one-minute intraday query
  URL for a symbol; without a key it uses the service's `demo` access.
- `download(url)` fetches a URL and returns the body as text. Bodies of
  HTTP error responses are returned as well; network failures raise
  `FetchError`.
- `parse_alpha_vantage(json_str)` turns a response body into a list of
  `StockDataPoint`, ordered by timestamp (oldest first). Invalid JSON, a
  body without the `Time Series (1min)` entry, or a bar with a missing or
  non-numeric field raises `FetchError`.
- `StockFetcher(downloader=download)` polls in the background.
  `start(symbol, interval_seconds, callback)` stops any previous worker,
  then starts one that fetches, calls `callback(data, error)` with either
  the bars and `""` or an empty list and the error message, waits the
  interval and repeats. `stop()` ends the worker and waits for it.
  `fetch_once(symbol)` does a single fetch in the caller's thread, and
  the `running` property tells whether a worker is active. The fetcher
  is a context manager; leaving a `with` block stops it.

```python
from stockdash.fetcher import StockFetcher, build_url

url = build_url("IBM", api_key="placeholder")

def on_update(data, error):
    if error:
        print("fetch failed:", error)
    else:
        print(len(data), "bars, latest close", data[-1].close)

with StockFetcher() as fetcher:
    fetcher.start("IBM", 60, on_update)
    ...
```

Any callable taking a URL and returning the body text can be passed as
`downloader`, for example to serve canned responses.

## Charting

`stockdash.chart` draws onto a matplotlib axes:

- `ChartType` selects `CANDLESTICK` or `LINE` drawing.
- `prepare_series(data)` lays the bars out in reverse order at
  x = 0, 1, 2, … and returns a `ChartSeries` of x positions and open,
  high, low and close values.
- `compute_sma(data, period)` returns the simple moving average of the
  closes; it is empty when there are fewer bars than the period, and a
  period below 1 raises `ValueError`.
- `candle_at(xs, x)` finds the first candle within half a unit of an x
  position (or `None`), and `tooltip_text(series, index)` gives its
  open, close, low and high to two decimals.
- `ChartRenderer().draw(ax, data, chart_type, show_sma, sma_period)`
  titles and labels the axes, draws the chart and, when asked, the
  average over the last x positions; it returns the `ChartSeries` drawn,
  or `None` for empty data.
  `ChartRenderer.plot_candlestick(ax, series, width_percent=0.25)` draws
  candles alone, green when the close is at or above the open and red
  otherwise, and makes the axes' coordinate readout show the prices of
  the candle under the pointer.

## Controls

`stockdash.ui.Controls` is a dataclass holding the dashboard settings:
the list of symbols and the selected one (`select(index)`, which raises
`IndexError` for a position out of range), the chart type
(`set_chart_type`, taking a `ChartType` or its number), whether the
average is shown (`set_show_sma`) and its period (`set_sma_period`,
clamped to 2–30).

## What it does not do

There is no dashboard window: the pieces above fetch, hold settings and
draw onto an axes you provide, but nothing ties them into an
interactive application, and the `stockdash` command only prints its
check message.