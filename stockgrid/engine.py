"""
Main chart grid engine.

Orchestrates one render pass: plan the layout for the configured symbols,
download every chart through the bounded scheduler, and build the panel's
render tree. Anything that goes wrong outside the per-chart fetch path is
caught here, once, and turned into a full-panel error view.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from PIL import Image

from .config.defaults import StockGridConfig, get_default_config
from .fetch.base import ImageFetcher
from .fetch.http_fetcher import HttpImageFetcher
from .fetch.retry import RetryingFetcher
from .fetch.scheduler import BoundedFetchScheduler
from .layout.canvas import CanvasSize, CanvasSizeProvider
from .layout.planner import LayoutPlan, cell_geometry, plan_layout
from .logging.config import get_logger
from .models import ErrorLog, FetchResult
from .render.grid import GridRenderer
from .render.placeholders import error_footer, error_view
from .render.surface import PillowRenderSurface, RenderSurface
from .render.tree import Panel

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderPass:
    """Everything produced by one engine run."""
    panel: Panel
    error_log: ErrorLog
    plan: Optional[LayoutPlan] = None
    results: tuple[FetchResult, ...] = ()
    failure: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None


class StockGridEngine:
    """
    Coordinator for the chart grid.

    Manages the render pipeline:
    Symbols → Layout Plan → Bounded Fetch → Grid Render → Panel
    """

    def __init__(
        self,
        config: Optional[StockGridConfig] = None,
        fetcher: Optional[ImageFetcher] = None,
        surface: Optional[RenderSurface] = None,
        sleep: Callable[[float], None] = time.sleep
    ) -> None:
        """Initialize the engine and its pipeline components."""
        self.logger = logger
        self.config = config or get_default_config()

        fetch_params = self.config.fetch
        self.fetcher = fetcher or HttpImageFetcher(user_agent=fetch_params.user_agent)
        self.surface = surface or PillowRenderSurface()

        self.retrying_fetcher = RetryingFetcher(
            self.fetcher,
            max_retries=fetch_params.max_retries,
            timeout_seconds=fetch_params.timeout_seconds,
            base_delay_ms=fetch_params.base_delay_ms,
            sleep=sleep
        )
        self.scheduler = BoundedFetchScheduler(
            self.retrying_fetcher,
            self.config.grid.chart_url_template
        )
        self.renderer = GridRenderer(
            self.surface,
            spacing=self.config.grid.grid_spacing,
            palette=self.config.palette,
            background_color=self.config.grid.background_color,
            verbose=self.config.debug_mode
        )

        self.logger.info(
            "Chart grid engine initialized",
            symbols=list(self.config.stock_symbols),
            max_concurrent=self.config.max_concurrent,
            debug_mode=self.config.debug_mode
        )

    def run(self, canvas: CanvasSize) -> Panel:
        """Render the panel for the given canvas size."""
        return self.render_pass(canvas).panel

    def run_with_provider(self, provider: CanvasSizeProvider) -> Panel:
        """Render the panel at the size reported by a canvas provider."""
        return self.run(provider.canvas_size())

    def render_image(self, canvas: CanvasSize) -> Image.Image:
        """Render the panel and draw it with the configured surface."""
        return self.surface.compose(self.run(canvas))

    def render_pass(self, canvas: CanvasSize) -> RenderPass:
        """
        Run the full pipeline once.

        Args:
            canvas: Panel size in pixels

        Returns:
            RenderPass with the panel, the pass's error log and, unless the
            pass failed, the layout plan and ordered fetch results
        """
        error_log = ErrorLog()

        try:
            return self._render(canvas, error_log)

        except Exception as e:
            self.logger.error(
                "Chart grid render failed, showing error panel",
                error=str(e),
                error_type=type(e).__name__,
                exc_info=True
            )
            return RenderPass(
                panel=self._error_panel(canvas, str(e)),
                error_log=error_log,
                failure=str(e)
            )

    def _render(self, canvas: CanvasSize, error_log: ErrorLog) -> RenderPass:
        symbols = list(self.config.stock_symbols)
        debug = self.config.debug_mode

        if debug:
            self.logger.info("Canvas size", width=canvas.width, height=canvas.height)

        plan = plan_layout(len(symbols))
        # Fails before any download if the canvas cannot hold the grid
        cell_geometry(canvas, plan, self.config.grid.grid_spacing)

        results = self.scheduler.fetch_all(symbols, self.config.max_concurrent, error_log)

        grid = self.renderer.render_grid(results, plan, canvas)

        footer = None
        if error_log and debug:
            footer = error_footer(len(error_log), self.config.palette)

        if error_log:
            self.logger.warning(
                "Some charts failed to load",
                failed=len(error_log),
                errors=[str(entry) for entry in error_log]
            )

        panel = Panel(
            width=canvas.width,
            height=canvas.height,
            background=self.config.grid.background_color,
            body=grid,
            footer=footer,
        )
        return RenderPass(panel=panel, error_log=error_log, plan=plan, results=tuple(results))

    def _error_panel(self, canvas: CanvasSize, message: str) -> Panel:
        return Panel(
            width=canvas.width,
            height=canvas.height,
            background=self.config.palette.placeholder_background,
            body=error_view(message, self.config.palette),
        )
