"""
Recovery strategy classifications for error handling.

These base classes split errors by whether the pipeline can carry on
without them (a single chart is replaced by a placeholder) or must abandon
the whole render.
"""

from typing import Optional, Dict, Any


class RecoverableError(Exception):
    """Base for errors that only affect a single chart cell."""

    def __init__(self, message: str, retry_count: int = 0,
                 max_retries: int = 0, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.retry_count = retry_count
        self.max_retries = max_retries
        self.context = context or {}
        self.recoverable = True


class UnrecoverableError(Exception):
    """Base for errors that abort the render and show the full-panel error."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False
