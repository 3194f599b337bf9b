#!/usr/bin/env python3
"""
Basic Usage Example - StockGrid Chart Grid

This script demonstrates the basic usage of the chart grid engine without
touching the network. It shows how to:
- Plug in a custom image fetcher
- Render a panel for a medium widget canvas
- Inspect placeholders and the per-pass error log
- Write the composed panel to a PNG

Run: python examples/basic_usage.py
"""

from typing import Optional

from PIL import Image, ImageDraw

from stockgrid.config.defaults import GridParams, StockGridConfig, get_default_config
from stockgrid.engine import StockGridEngine
from stockgrid.fetch.base import ImageFetcher
from stockgrid.layout.canvas import MediumWidgetCanvasProvider
from stockgrid.logging.config import configure_logging

# Deterministic fake candles per symbol
SYMBOL_COLORS = {
    "TSLA": (220, 60, 60),
    "AAPL": (160, 160, 160),
    "GOOGL": (66, 133, 244),
    "MSFT": (0, 164, 239),
    "NVDA": (118, 185, 0),
}


class SyntheticChartFetcher(ImageFetcher):
    """Draws a fake 320x160 chart for known symbols, fails for the rest."""

    def fetch(self, url: str, timeout_seconds: float) -> Optional[Image.Image]:
        symbol = url.split("t=")[1].split("&")[0]
        color = SYMBOL_COLORS.get(symbol)
        if color is None:
            return None

        image = Image.new("RGB", (320, 160), (20, 20, 20))
        draw = ImageDraw.Draw(image)
        for i in range(16):
            top = 40 + (i * 37 + len(symbol) * 11) % 80
            draw.rectangle((10 + i * 19, top, 20 + i * 19, top + 30), fill=color)
        draw.text((8, 6), symbol, fill=(255, 255, 255))
        return image


def main():
    configure_logging(level="INFO")

    defaults = get_default_config()
    config = StockGridConfig(
        grid=GridParams(
            stock_symbols=("TSLA", "AAPL", "GOOGL", "MSFT", "AMZN"),
            debug_mode=True,
        ),
        fetch=defaults.fetch,
        palette=defaults.palette,
    )

    engine = StockGridEngine(
        config,
        fetcher=SyntheticChartFetcher(),
        sleep=lambda seconds: None,
    )

    canvas = MediumWidgetCanvasProvider(screen_width=390).canvas_size()
    render_pass = engine.render_pass(canvas)
    grid = render_pass.panel.body

    print(f"📐 Canvas {canvas.width}x{canvas.height}, grid {grid.rows}x{grid.cols}, "
          f"cells {grid.cell_width}x{grid.cell_height}")
    print(f"🖼  {len(grid.image_cells)} charts, {len(grid.error_cells)} placeholders, "
          f"{len(grid.blank_cells)} blank")
    for entry in render_pass.error_log:
        print(f"⚠️  {entry}")

    engine.surface.compose(render_pass.panel).save("basic_usage_panel.png")
    print("✅ Wrote basic_usage_panel.png")


if __name__ == "__main__":
    main()
