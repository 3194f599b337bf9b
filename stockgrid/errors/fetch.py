"""
Chart fetch error classifications.

Attempt-level errors (timeouts, transport failures, undecodable payloads)
are raised by image fetchers and absorbed by the retry wrapper. Once every
attempt is spent the wrapper raises a plain FetchError for the symbol.
"""

from typing import Optional

from .recovery import RecoverableError


class FetchError(RecoverableError):
    """A chart could not be fetched."""

    def __init__(self, message: str, symbol: Optional[str] = None,
                 url: Optional[str] = None, retries_exhausted: Optional[int] = None,
                 attempts: int = 0, last_error: Optional[Exception] = None, **kwargs):
        super().__init__(
            message,
            retry_count=max(attempts - 1, 0),
            max_retries=retries_exhausted or 0,
            **kwargs
        )
        self.symbol = symbol
        self.url = url
        self.retries_exhausted = retries_exhausted
        self.attempts = attempts
        self.last_error = last_error


class DecodeFailure(FetchError):
    """Transport succeeded but the payload was not a usable image."""

    def __init__(self, message: str = "Image could not be decoded", **kwargs):
        super().__init__(message, **kwargs)


class FetchTimeoutError(FetchError):
    """A single attempt exceeded its time bound."""

    def __init__(self, message: str, timeout_seconds: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds


class TransportError(FetchError):
    """Network or HTTP level failure for a single attempt."""

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
