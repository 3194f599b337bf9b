"""
Configuration error classifications.

Structural misconfiguration (too many symbols, a canvas too small for the
grid, invalid parameters) cannot be rendered around and is always fatal.
"""

from typing import Optional

from .recovery import UnrecoverableError


class ConfigurationError(UnrecoverableError):
    """Invalid or inconsistent configuration."""

    def __init__(self, message: str, field: Optional[str] = None,
                 errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.errors = errors or []


class InvalidCountError(ConfigurationError):
    """Symbol count falls outside the supported grid layouts."""

    def __init__(self, count: int, min_count: int = 1, max_count: int = 6, **kwargs):
        super().__init__(
            f"Stock count must be between {min_count} and {max_count}, got {count}",
            field="stock_symbols",
            **kwargs
        )
        self.count = count
        self.min_count = min_count
        self.max_count = max_count


class LayoutError(ConfigurationError):
    """Canvas cannot hold the requested grid."""

    def __init__(self, message: str, canvas_width: Optional[int] = None,
                 canvas_height: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
