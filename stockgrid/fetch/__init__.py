"""
Chart download pipeline: fetch capability, retry wrapper and bounded scheduler.
"""
from .base import ImageFetcher
from .http_fetcher import HttpImageFetcher
from .retry import RetryingFetcher
from .scheduler import BoundedFetchScheduler

__all__ = ["ImageFetcher", "HttpImageFetcher", "RetryingFetcher", "BoundedFetchScheduler"]
