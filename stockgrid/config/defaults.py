"""Default configuration parameters for the chart grid."""

from dataclasses import dataclass


DEFAULT_SYMBOLS = ("TSLA", "AAPL", "GOOGL", "MSFT", "AMZN", "NVDA")

DEFAULT_CHART_URL_TEMPLATE = (
    "https://charts2-node.finviz.com/chart.ashx"
    "?t={symbol}&tf=d&s=linear&ct=candle_stick&tm=d"
)


@dataclass(frozen=True)
class GridParams:
    """What to show and how the grid is laid out."""
    stock_symbols: tuple[str, ...] = DEFAULT_SYMBOLS
    chart_url_template: str = DEFAULT_CHART_URL_TEMPLATE   # Must contain {symbol}
    background_color: str = "#1a1a1a"
    grid_spacing: int = 2                                  # Pixels around every cell
    debug_mode: bool = False                               # Footer + verbose layout logs


@dataclass(frozen=True)
class FetchParams:
    """Chart download parameters."""
    max_concurrent: int = 6             # In-flight downloads cap
    max_retries: int = 2                # Extra attempts after the first
    timeout_seconds: float = 10.0       # Per-attempt time bound
    base_delay_ms: int = 500            # Backoff step, multiplied by attempt number
    user_agent: str = "stockgrid/0.1"


@dataclass(frozen=True)
class PaletteParams:
    """Colors used by placeholders and error views."""
    placeholder_background: str = "#2a2a2a"
    failure_color: str = "#ff6b6b"
    text_color: str = "#ffffff"
    footer_alpha: float = 0.7


@dataclass(frozen=True)
class StockGridConfig:
    """Complete chart grid configuration."""
    grid: GridParams
    fetch: FetchParams
    palette: PaletteParams

    @property
    def stock_symbols(self) -> tuple[str, ...]:
        return self.grid.stock_symbols

    @property
    def max_concurrent(self) -> int:
        return self.fetch.max_concurrent

    @property
    def debug_mode(self) -> bool:
        return self.grid.debug_mode


def get_default_config() -> StockGridConfig:
    """Get the default configuration instance."""
    return StockGridConfig(
        grid=GridParams(),
        fetch=FetchParams(),
        palette=PaletteParams(),
    )
