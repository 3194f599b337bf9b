"""
Render tree node types.

The tree is a renderer-agnostic description of the finished panel: a panel
holds either a grid or a full-panel error view. A grid alternates gaps and
rows vertically; each row alternates gaps and cells horizontally. Every node
carries explicit pixel sizes, so drawing it needs no further layout work.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True)
class Text:
    """A centred line of text."""
    text: str
    size: float
    bold: bool = False
    color: str = "#ffffff"
    alpha: float = 1.0


@dataclass(frozen=True)
class Gap:
    """Fixed blank space along the parent's axis."""
    length: int


@dataclass(frozen=True)
class ImageCell:
    """A chart stretched to exactly fill its cell."""
    symbol: str
    image: "Image.Image"
    width: int
    height: int
    background: str


@dataclass(frozen=True)
class ErrorCell:
    """Placeholder for a chart that failed to load."""
    symbol: str
    width: int
    height: int
    background: str
    lines: tuple[Text, ...]
    line_spacing: int = 4


@dataclass(frozen=True)
class BlankCell:
    """Unused grid slot: takes a cell's space, draws nothing."""
    width: int
    height: int


Cell = Union[ImageCell, ErrorCell, BlankCell]


@dataclass(frozen=True)
class Row:
    """One horizontal run of cells separated by gaps."""
    width: int
    height: int
    children: tuple[Union[Gap, ImageCell, ErrorCell, BlankCell], ...]

    @property
    def cells(self) -> list[Cell]:
        return [child for child in self.children if not isinstance(child, Gap)]


@dataclass(frozen=True)
class Grid:
    """Rows of cells separated by gaps."""
    rows: int
    cols: int
    cell_width: int
    cell_height: int
    spacing: int
    children: tuple[Union[Gap, Row], ...]

    @property
    def row_nodes(self) -> list[Row]:
        return [child for child in self.children if isinstance(child, Row)]

    def iter_cells(self) -> Iterator[Cell]:
        """Cells in row-major order."""
        for row in self.row_nodes:
            yield from row.cells

    @property
    def image_cells(self) -> list[ImageCell]:
        return [cell for cell in self.iter_cells() if isinstance(cell, ImageCell)]

    @property
    def error_cells(self) -> list[ErrorCell]:
        return [cell for cell in self.iter_cells() if isinstance(cell, ErrorCell)]

    @property
    def blank_cells(self) -> list[BlankCell]:
        return [cell for cell in self.iter_cells() if isinstance(cell, BlankCell)]


@dataclass(frozen=True)
class ErrorView:
    """Full-panel error: icon, title and message stacked in the centre."""
    icon: Text
    title: Text
    message: Text
    padding: int = 20
    spacing: int = 8


@dataclass(frozen=True)
class Panel:
    """Root of the render tree."""
    width: int
    height: int
    background: str
    body: Union[Grid, ErrorView]
    footer: Optional[Text] = None

    @property
    def is_error(self) -> bool:
        return isinstance(self.body, ErrorView)
