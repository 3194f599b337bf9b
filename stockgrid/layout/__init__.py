"""
Grid layout planning.
"""
from .canvas import CanvasSize, CanvasSizeProvider, FixedCanvasProvider, MediumWidgetCanvasProvider
from .planner import CellGeometry, LayoutPlan, cell_geometry, plan_layout

__all__ = [
    "CanvasSize",
    "CanvasSizeProvider",
    "FixedCanvasProvider",
    "MediumWidgetCanvasProvider",
    "CellGeometry",
    "LayoutPlan",
    "cell_geometry",
    "plan_layout",
]
