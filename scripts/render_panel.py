#!/usr/bin/env python3
"""Render the chart grid to a PNG file.

Loads the configuration (defaults < config/stockgrid.yaml), downloads the
charts and writes the composed panel.

Usage:
    python scripts/render_panel.py [--width 338 --height 158 | --screen-width 390]
                                   [--output panel.png] [--debug] [--json-logs]
"""
from __future__ import annotations

import argparse
import pathlib
import sys

ROOT_DIR = pathlib.Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT_DIR))

from stockgrid.config.loader import ConfigLoader
from stockgrid.engine import StockGridEngine
from stockgrid.errors import ConfigurationError
from stockgrid.layout.canvas import FixedCanvasProvider, MediumWidgetCanvasProvider
from stockgrid.logging.config import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the stock chart grid to a PNG")
    parser.add_argument("--width", type=int, default=338, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=158, help="Canvas height in pixels")
    parser.add_argument("--screen-width", type=int, help="Derive a medium widget size from this screen width")
    parser.add_argument("--config-dir", type=pathlib.Path, help="Directory holding stockgrid.yaml")
    parser.add_argument("--output", type=pathlib.Path, default=pathlib.Path("panel.png"))
    parser.add_argument("--debug", action="store_true", help="Enable debug mode (footer, verbose layout logs)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    configure_logging(level="DEBUG" if args.debug else "INFO", format_json=args.json_logs)

    overrides = {"grid": {"debug_mode": True}} if args.debug else None
    try:
        config = ConfigLoader.create(args.config_dir).load(overrides)
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    if args.screen_width:
        provider = MediumWidgetCanvasProvider(args.screen_width)
    else:
        provider = FixedCanvasProvider(args.width, args.height)

    engine = StockGridEngine(config)
    canvas = provider.canvas_size()
    render_pass = engine.render_pass(canvas)
    engine.surface.compose(render_pass.panel).save(args.output)

    print(f"🖼  Wrote {canvas.width}x{canvas.height} panel to {args.output}")
    if not render_pass.succeeded:
        print(f"❌ Render failed: {render_pass.failure}")
        return 1
    if render_pass.error_log:
        print(f"⚠️  {len(render_pass.error_log)} chart(s) failed to load:")
        for entry in render_pass.error_log:
            print(f"  • {entry}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
