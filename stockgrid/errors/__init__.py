"""
Error classification system for the chart grid pipeline.

This module provides the exception hierarchy used across layout planning,
chart fetching and panel rendering. Per-chart fetch failures are recoverable
and end up as placeholder cells; configuration and system failures abort the
render and are shown as a full-panel error.
"""

from .configuration import (
    ConfigurationError,
    InvalidCountError,
    LayoutError,
)
from .fetch import (
    FetchError,
    DecodeFailure,
    FetchTimeoutError,
    TransportError,
)
from .system_failures import (
    SystemFailureError,
    SchedulerInvariantError,
    RenderError,
)
from .recovery import (
    RecoverableError,
    UnrecoverableError,
)

__all__ = [
    # Configuration Errors
    "ConfigurationError",
    "InvalidCountError",
    "LayoutError",
    # Fetch Errors
    "FetchError",
    "DecodeFailure",
    "FetchTimeoutError",
    "TransportError",
    # System Failures
    "SystemFailureError",
    "SchedulerInvariantError",
    "RenderError",
    # Recovery Categories
    "RecoverableError",
    "UnrecoverableError",
]
