"""
Render tree construction and pixel output.
"""
from .grid import GridRenderer
from .surface import PillowRenderSurface, RenderSurface
from .tree import BlankCell, ErrorCell, ErrorView, Gap, Grid, ImageCell, Panel, Row, Text

__all__ = [
    "GridRenderer",
    "PillowRenderSurface",
    "RenderSurface",
    "BlankCell",
    "ErrorCell",
    "ErrorView",
    "Gap",
    "Grid",
    "ImageCell",
    "Panel",
    "Row",
    "Text",
]
