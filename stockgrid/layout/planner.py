"""
Grid layout planner.

Maps a chart count to a fixed rows x cols grid and partitions a canvas into
equal cells. Spacing is reserved on both sides of every row and column, so a
grid with N columns reserves N + 1 gaps horizontally. Cell sizes are floored:
any leftover pixels stay as slack on the right and bottom edges instead of
being spread across cells.
"""

from dataclasses import dataclass

from ..errors import InvalidCountError, LayoutError
from .canvas import CanvasSize

MIN_CHARTS = 1
MAX_CHARTS = 6


@dataclass(frozen=True)
class LayoutPlan:
    """Grid shape for a render pass."""
    rows: int
    cols: int

    @property
    def capacity(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class CellGeometry:
    """Pixel size shared by every cell in the grid."""
    width: int
    height: int


# Smallest grid that holds each supported count
_LAYOUTS: dict[int, LayoutPlan] = {
    1: LayoutPlan(rows=1, cols=1),
    2: LayoutPlan(rows=1, cols=2),
    3: LayoutPlan(rows=1, cols=3),
    4: LayoutPlan(rows=2, cols=2),
    5: LayoutPlan(rows=2, cols=3),
    6: LayoutPlan(rows=2, cols=3),
}


def plan_layout(count: int) -> LayoutPlan:
    """
    Choose the grid shape for a number of charts.

    Args:
        count: Number of charts to show

    Returns:
        LayoutPlan from the fixed table

    Raises:
        InvalidCountError: If count is outside [1, 6]
    """
    if count < MIN_CHARTS or count > MAX_CHARTS:
        raise InvalidCountError(count, min_count=MIN_CHARTS, max_count=MAX_CHARTS)
    return _LAYOUTS[count]


def cell_geometry(canvas: CanvasSize, plan: LayoutPlan, spacing: int) -> CellGeometry:
    """
    Compute the pixel size of each grid cell.

    Args:
        canvas: Panel size in pixels
        plan: Grid shape
        spacing: Gap in pixels before and after every row and column

    Returns:
        CellGeometry with floored width and height

    Raises:
        LayoutError: If the canvas leaves no room for a cell
    """
    total_spacing_width = spacing * (plan.cols + 1)
    total_spacing_height = spacing * (plan.rows + 1)

    width = (canvas.width - total_spacing_width) // plan.cols
    height = (canvas.height - total_spacing_height) // plan.rows

    if width <= 0 or height <= 0:
        raise LayoutError(
            f"Canvas {canvas.width}x{canvas.height} is too small for a "
            f"{plan.rows}x{plan.cols} grid with spacing {spacing}",
            canvas_width=canvas.width,
            canvas_height=canvas.height
        )

    return CellGeometry(width=width, height=height)
