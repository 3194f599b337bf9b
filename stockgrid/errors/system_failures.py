"""
System failure error classifications for unexpected internal errors.

These exceptions signal a bug or a broken collaborator rather than bad
input, and are surfaced as the full-panel error.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class SchedulerInvariantError(SystemFailureError):
    """The fetch scheduler lost track of a submitted task."""

    def __init__(self, message: str, missing_symbols: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_symbols = missing_symbols or []


class RenderError(SystemFailureError):
    """The render surface could not draw a node of the render tree."""

    def __init__(self, message: str, node_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.node_type = node_type
