"""
Grid renderer.

Turns ordered fetch results and a layout plan into the grid part of the
render tree. Cells are filled row-major; a gap of the configured spacing
precedes the first row and column and follows every row and column.
"""

from collections.abc import Sequence

from ..config.defaults import PaletteParams
from ..errors import LayoutError
from ..layout.canvas import CanvasSize
from ..layout.planner import CellGeometry, LayoutPlan, cell_geometry
from ..logging.config import get_render_logger, log_layout_decision
from ..models import FetchResult
from .placeholders import error_placeholder
from .surface import RenderSurface
from .tree import BlankCell, Cell, Gap, Grid, ImageCell, Row

logger = get_render_logger(__name__)


class GridRenderer:
    """Builds the chart grid for one render pass."""

    def __init__(
        self,
        surface: RenderSurface,
        spacing: int,
        palette: PaletteParams,
        background_color: str,
        verbose: bool = False
    ):
        self.surface = surface
        self.spacing = spacing
        self.palette = palette
        self.background_color = background_color
        self.verbose = verbose
        self.logger = logger

    def render_grid(self, results: Sequence[FetchResult], plan: LayoutPlan, canvas: CanvasSize) -> Grid:
        """
        Lay results out on a rows x cols grid filling the canvas.

        Args:
            results: Fetch results in display order
            plan: Grid shape
            canvas: Panel size supplied by the caller

        Returns:
            Grid node; slots past the last result are blank

        Raises:
            LayoutError: If there are more results than grid slots, or the
                canvas cannot hold the grid
        """
        if len(results) > plan.capacity:
            raise LayoutError(
                f"{len(results)} charts do not fit a {plan.rows}x{plan.cols} grid",
                canvas_width=canvas.width,
                canvas_height=canvas.height
            )

        geometry = cell_geometry(canvas, plan, self.spacing)
        log_layout_decision(
            self.logger,
            plan.rows,
            plan.cols,
            geometry.width,
            geometry.height,
            canvas.width,
            canvas.height,
            verbose=self.verbose
        )

        index = 0
        children: list = [Gap(self.spacing)]

        for _ in range(plan.rows):
            row_children: list = [Gap(self.spacing)]

            for _ in range(plan.cols):
                if index >= len(results):
                    row_children.append(BlankCell(width=geometry.width, height=geometry.height))
                else:
                    row_children.append(self._render_cell(results[index], geometry))
                    index += 1
                row_children.append(Gap(self.spacing))

            children.append(Row(width=canvas.width, height=geometry.height, children=tuple(row_children)))
            children.append(Gap(self.spacing))

        return Grid(
            rows=plan.rows,
            cols=plan.cols,
            cell_width=geometry.width,
            cell_height=geometry.height,
            spacing=self.spacing,
            children=tuple(children),
        )

    def _render_cell(self, result: FetchResult, geometry: CellGeometry) -> Cell:
        if result.success and result.image is not None:
            stretched = self.surface.stretch(result.image, geometry.width, geometry.height)
            return ImageCell(
                symbol=result.symbol,
                image=stretched,
                width=geometry.width,
                height=geometry.height,
                background=self.background_color,
            )

        self.logger.debug("Rendering placeholder for failed chart", symbol=result.symbol)
        return error_placeholder(result.symbol, geometry, self.palette)
