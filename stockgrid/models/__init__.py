"""
Data models module.

Per-render value objects shared by the fetch pipeline and the renderers.
"""
from .results import ErrorEntry, ErrorLog, FetchResult, FetchTask

__all__ = ["ErrorEntry", "ErrorLog", "FetchResult", "FetchTask"]
