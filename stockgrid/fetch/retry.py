"""Retry wrapper around a single image fetcher."""

import time
from collections.abc import Callable
from typing import Optional

from PIL import Image

from ..errors import DecodeFailure, FetchError, UnrecoverableError
from ..logging.config import get_fetch_logger, log_fetch_attempt
from .base import ImageFetcher

logger = get_fetch_logger(__name__)


class RetryingFetcher:
    """
    Fetches an image with bounded retries and linear backoff.

    Makes up to max_retries + 1 attempts. The first attempt that yields a
    decoded image wins. After the n-th failed attempt (1-indexed) it waits
    base_delay_ms * n before trying again; there is no wait after the last.
    """

    def __init__(
        self,
        fetcher: ImageFetcher,
        max_retries: int = 2,
        timeout_seconds: float = 10.0,
        base_delay_ms: int = 500,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.fetcher = fetcher
        self.max_retries = max_retries
        self.timeout_seconds = timeout_seconds
        self.base_delay_ms = base_delay_ms
        self.sleep = sleep
        self.logger = logger

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def backoff_delay_ms(self, attempt: int) -> int:
        """Delay after the given failed attempt."""
        return self.base_delay_ms * attempt

    def fetch_with_retry(self, url: str, symbol: Optional[str] = None) -> Image.Image:
        """
        Fetch an image, retrying failed attempts.

        Args:
            url: Image URL
            symbol: Stock symbol, for logs and the raised error

        Returns:
            Decoded image

        Raises:
            FetchError: When every attempt failed
            UnrecoverableError: Raised by the fetcher; passed through on the first attempt
        """
        last_error: Optional[Exception] = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                image = self.fetcher.fetch(url, self.timeout_seconds)
                if image is not None:
                    log_fetch_attempt(self.logger, symbol or url, attempt, self.max_attempts, True)
                    return image
                raise DecodeFailure(symbol=symbol, url=url)

            except FetchError as e:
                last_error = e

            except UnrecoverableError:
                # Configuration error - don't retry
                raise

            except Exception as e:
                # Unknown error - treat as retryable
                last_error = e

            log_fetch_attempt(
                self.logger,
                symbol or url,
                attempt,
                self.max_attempts,
                False,
                reason=f"{type(last_error).__name__}: {last_error}"
            )

            if attempt < self.max_attempts:
                self.sleep(self.backoff_delay_ms(attempt) / 1000.0)

        raise FetchError(
            f"Download failed (retried {self.max_retries} times)",
            symbol=symbol,
            url=url,
            retries_exhausted=self.max_retries,
            attempts=self.max_attempts,
            last_error=last_error
        )
