"""Placeholder cells, the full-panel error view and the debug footer."""

from ..config.defaults import PaletteParams
from ..layout.planner import CellGeometry
from .tree import ErrorCell, ErrorView, Text

WARNING_GLYPH = "⚠️"
ERROR_GLYPH = "❌"
FAILURE_LABEL = "Load failed"
ERROR_TITLE = "Chart Grid Error"


def error_placeholder(symbol: str, geometry: CellGeometry, palette: PaletteParams) -> ErrorCell:
    """Build the placeholder shown in place of a chart that failed to load.

    Font sizes shrink with the cell width so narrow cells stay readable.
    """
    width = geometry.width
    return ErrorCell(
        symbol=symbol,
        width=width,
        height=geometry.height,
        background=palette.placeholder_background,
        lines=(
            Text(symbol, size=min(14, width / 8), bold=True, color=palette.text_color),
            Text(WARNING_GLYPH, size=min(20, width / 6), color=palette.text_color),
            Text(FAILURE_LABEL, size=min(10, width / 12), color=palette.failure_color),
        ),
    )


def error_view(message: str, palette: PaletteParams) -> ErrorView:
    """Build the full-panel error view."""
    return ErrorView(
        icon=Text(ERROR_GLYPH, size=40, color=palette.text_color),
        title=Text(ERROR_TITLE, size=16, bold=True, color=palette.text_color),
        message=Text(message, size=12, color=palette.failure_color),
    )


def error_footer(failed_count: int, palette: PaletteParams) -> Text:
    """Build the debug footer summarising failed downloads."""
    noun = "chart" if failed_count == 1 else "charts"
    return Text(
        f"{WARNING_GLYPH} {failed_count} {noun} failed to load",
        size=8,
        color=palette.failure_color,
        alpha=palette.footer_alpha,
    )
