"""Pytest configuration and shared fixtures."""

import threading
import time
from dataclasses import replace
from typing import Any, Callable, Dict, Optional
from urllib.parse import parse_qs, urlparse

import pytest
from PIL import Image

from stockgrid.config.defaults import StockGridConfig, get_default_config
from stockgrid.errors import TransportError
from stockgrid.fetch.base import ImageFetcher

TEST_URL_TEMPLATE = "https://charts.test/chart.ashx?t={symbol}&tf=d"


def symbol_color(symbol: str) -> tuple:
    """Deterministic solid color per symbol."""
    seed = sum(ord(c) for c in symbol)
    return (seed * 7 % 256, seed * 13 % 256, seed * 29 % 256)


class StubChartFetcher(ImageFetcher):
    """
    Network-free fetcher.

    Returns a solid-color chart per symbol. Symbols in ``missing`` never
    yield an image; ``fail_first`` maps a symbol to the number of leading
    attempts that raise a transport error; ``delays`` maps a symbol to
    seconds spent "downloading". Tracks call counts and peak concurrency.
    """

    def __init__(
        self,
        missing: Optional[set] = None,
        fail_first: Optional[Dict[str, int]] = None,
        delays: Optional[Dict[str, float]] = None,
        size: tuple = (320, 160)
    ):
        self.missing = missing or set()
        self.fail_first = fail_first or {}
        self.delays = delays or {}
        self.size = size
        self.calls: Dict[str, int] = {}
        self.completion_order: list = []
        self.in_flight = 0
        self.peak_in_flight = 0
        self._lock = threading.Lock()

    def fetch(self, url: str, timeout_seconds: float) -> Optional[Image.Image]:
        symbol = parse_qs(urlparse(url).query)["t"][0]

        with self._lock:
            self.calls[symbol] = self.calls.get(symbol, 0) + 1
            attempt = self.calls[symbol]
            self.in_flight += 1
            self.peak_in_flight = max(self.peak_in_flight, self.in_flight)

        try:
            delay = self.delays.get(symbol, 0)
            if delay:
                time.sleep(delay)

            if attempt <= self.fail_first.get(symbol, 0):
                raise TransportError(f"HTTP 503 for {symbol}", url=url, status_code=503)
            if symbol in self.missing:
                return None
            return Image.new("RGB", self.size, symbol_color(symbol))
        finally:
            with self._lock:
                self.in_flight -= 1
                self.completion_order.append(symbol)

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


class RecordingSleep:
    """Replacement for time.sleep that records requested delays."""

    def __init__(self):
        self.delays: list = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def stub_fetcher_factory() -> Callable[..., StubChartFetcher]:
    """Factory for network-free chart fetchers."""
    return StubChartFetcher


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """Sleep stub recording every backoff delay."""
    return RecordingSleep()


@pytest.fixture
def make_config() -> Callable[..., StockGridConfig]:
    """Factory for test configurations pointing at a fake chart host."""

    def _make(symbols=("TSLA", "AAPL", "GOOGL", "MSFT", "AMZN", "NVDA"),
              grid: Optional[Dict[str, Any]] = None,
              fetch: Optional[Dict[str, Any]] = None) -> StockGridConfig:
        defaults = get_default_config()
        return replace(
            defaults,
            grid=replace(
                defaults.grid,
                stock_symbols=tuple(symbols),
                **{"chart_url_template": TEST_URL_TEMPLATE, **(grid or {})}
            ),
            fetch=replace(defaults.fetch, **(fetch or {})),
        )

    return _make


@pytest.fixture
def solid_chart() -> Image.Image:
    """A small solid red chart image."""
    return Image.new("RGB", (40, 20), (255, 0, 0))


@pytest.fixture
def url_template() -> str:
    """Chart URL template of the fake chart host."""
    return TEST_URL_TEMPLATE


@pytest.fixture
def chart_color() -> Callable[[str], tuple]:
    """Color the stub fetcher paints a symbol's chart with."""
    return symbol_color
