"""
Render surfaces.

A render surface is the drawing capability the grid is built against: it
stretches chart images to cell size while the tree is being built, and
turns a finished tree into pixels. PillowRenderSurface is the default
implementation.
"""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Union

from PIL import Image, ImageColor, ImageDraw, ImageFont

from ..errors import RenderError
from ..logging.config import get_render_logger
from .tree import BlankCell, ErrorCell, ErrorView, Gap, Grid, ImageCell, Panel, Row, Text

logger = get_render_logger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class RenderSurface(ABC):
    """Drawing primitives used by the grid renderer."""

    @abstractmethod
    def stretch(self, image: Image.Image, width: int, height: int) -> Image.Image:
        """Redraw image into exactly width x height, ignoring its aspect ratio."""
        pass

    @abstractmethod
    def compose(self, panel: Panel) -> Image.Image:
        """Draw a render tree into a single image."""
        pass


class PillowRenderSurface(RenderSurface):
    """Draws render trees with Pillow."""

    REGULAR_FONT = "DejaVuSans.ttf"
    BOLD_FONT = "DejaVuSans-Bold.ttf"

    # Keyed by (bold, pixel size) so every cell with the same width shares fonts
    _font_cache: Dict[Tuple[bool, int], Font] = {}

    def __init__(self, resample: Image.Resampling = Image.Resampling.LANCZOS):
        self.resample = resample
        self.logger = logger

    def stretch(self, image: Image.Image, width: int, height: int) -> Image.Image:
        if image.size == (width, height):
            return image.copy()
        return image.resize((width, height), self.resample)

    def compose(self, panel: Panel) -> Image.Image:
        canvas = Image.new('RGBA', (panel.width, panel.height), self._rgba(panel.background))

        if isinstance(panel.body, Grid):
            self._draw_grid(canvas, panel.body)
        elif isinstance(panel.body, ErrorView):
            self._draw_error_view(canvas, panel.body)
        else:
            raise RenderError(
                f"Unsupported panel body: {type(panel.body).__name__}",
                node_type=type(panel.body).__name__
            )

        if panel.footer is not None:
            canvas = self._draw_footer(canvas, panel.footer)

        return canvas.convert('RGB')

    # ------------------------------------------------------------------
    # Layout walking
    # ------------------------------------------------------------------

    def _draw_grid(self, canvas: Image.Image, grid: Grid) -> None:
        draw = ImageDraw.Draw(canvas)
        y = 0
        for node in grid.children:
            if isinstance(node, Gap):
                y += node.length
            elif isinstance(node, Row):
                self._draw_row(canvas, draw, node, y)
                y += node.height
            else:
                raise RenderError(
                    f"Unexpected grid child: {type(node).__name__}",
                    node_type=type(node).__name__
                )

    def _draw_row(self, canvas: Image.Image, draw: ImageDraw.ImageDraw, row: Row, y: int) -> None:
        x = 0
        for node in row.children:
            if isinstance(node, Gap):
                x += node.length
            elif isinstance(node, ImageCell):
                draw.rectangle(self._box(x, y, node.width, node.height), fill=self._rgba(node.background))
                canvas.paste(node.image, (x, y))
                x += node.width
            elif isinstance(node, ErrorCell):
                draw.rectangle(self._box(x, y, node.width, node.height), fill=self._rgba(node.background))
                self._draw_centered_lines(draw, node.lines, x, y, node.width, node.height, node.line_spacing)
                x += node.width
            elif isinstance(node, BlankCell):
                x += node.width
            else:
                raise RenderError(
                    f"Unexpected row child: {type(node).__name__}",
                    node_type=type(node).__name__
                )

    def _draw_error_view(self, canvas: Image.Image, view: ErrorView) -> None:
        draw = ImageDraw.Draw(canvas)
        width, height = canvas.size
        self._draw_centered_lines(
            draw,
            (view.icon, view.title, view.message),
            view.padding,
            view.padding,
            max(width - 2 * view.padding, 0),
            max(height - 2 * view.padding, 0),
            view.spacing
        )

    def _draw_footer(self, canvas: Image.Image, footer: Text) -> Image.Image:
        # Drawn over the bottom edge so the grid keeps its full height
        overlay = Image.new('RGBA', canvas.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        font = self._font(footer.size, footer.bold)
        left, top, right, bottom = draw.textbbox((0, 0), footer.text, font=font)
        x = (canvas.width - (right - left)) // 2 - left
        y = canvas.height - (bottom - top) - 1 - top
        draw.text((x, y), footer.text, font=font, fill=self._rgba(footer.color, footer.alpha))
        return Image.alpha_composite(canvas, overlay)

    # ------------------------------------------------------------------
    # Text helpers
    # ------------------------------------------------------------------

    def _draw_centered_lines(self, draw: ImageDraw.ImageDraw, lines, left: int, top: int,
                             width: int, height: int, spacing: int) -> None:
        measured = []
        for line in lines:
            font = self._font(line.size, line.bold)
            bbox = draw.textbbox((0, 0), line.text, font=font)
            measured.append((line, font, bbox))

        block_height = sum(bbox[3] - bbox[1] for _, _, bbox in measured)
        block_height += spacing * max(len(measured) - 1, 0)

        y = top + (height - block_height) // 2
        for line, font, bbox in measured:
            line_width = bbox[2] - bbox[0]
            line_height = bbox[3] - bbox[1]
            x = left + (width - line_width) // 2
            draw.text((x - bbox[0], y - bbox[1]), line.text, font=font, fill=self._rgba(line.color, line.alpha))
            y += line_height + spacing

    def _font(self, size: float, bold: bool = False) -> Font:
        pixel_size = max(int(round(size)), 1)
        cache_key = (bold, pixel_size)

        if cache_key in PillowRenderSurface._font_cache:
            return PillowRenderSurface._font_cache[cache_key]

        font_name = self.BOLD_FONT if bold else self.REGULAR_FONT
        try:
            font = ImageFont.truetype(font_name, pixel_size)
        except OSError:
            self.logger.debug("TrueType font unavailable, using PIL default", font=font_name, size=pixel_size)
            font = ImageFont.load_default(size=pixel_size)

        PillowRenderSurface._font_cache[cache_key] = font
        return font

    @staticmethod
    def _box(x: int, y: int, width: int, height: int) -> Tuple[int, int, int, int]:
        return (x, y, x + width - 1, y + height - 1)

    @staticmethod
    def _rgba(color: str, alpha: float = 1.0) -> Tuple[int, int, int, int]:
        rgba = ImageColor.getcolor(color, 'RGBA')
        return (rgba[0], rgba[1], rgba[2], int(round(rgba[3] * alpha)))
