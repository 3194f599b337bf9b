"""HTTP image fetcher built on urllib and Pillow."""

import socket
import time
from collections.abc import Callable
from io import BytesIO
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from PIL import Image, UnidentifiedImageError

from ..errors import ConfigurationError, FetchTimeoutError, TransportError
from ..logging.config import get_fetch_logger
from .base import ImageFetcher

logger = get_fetch_logger(__name__)

READ_CHUNK_BYTES = 64 * 1024


class HttpImageFetcher(ImageFetcher):
    """Downloads chart images with a GET request and decodes them with Pillow."""

    def __init__(self, user_agent: str = "stockgrid/0.1",
                 headers: Optional[dict[str, str]] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.logger = logger
        self.clock = clock
        self.headers = {
            'User-Agent': user_agent,
            'Accept': 'image/png,image/*;q=0.9,*/*;q=0.5',
        }
        if headers:
            self.headers.update(headers)

    def fetch(self, url: str, timeout_seconds: float) -> Optional[Image.Image]:
        """Download and decode one image within timeout_seconds."""
        parsed = urlparse(url)
        if not parsed.scheme or not parsed.netloc:
            raise ConfigurationError(f"Invalid chart URL: {url}", field="chart_url_template")

        payload = self._download(url, timeout_seconds)
        return self.decode(payload, url)

    def _download(self, url: str, timeout_seconds: float) -> bytes:
        deadline = self.clock() + timeout_seconds
        req = Request(url, headers=self.headers, method='GET')

        try:
            with urlopen(req, timeout=timeout_seconds) as response:
                response_code = response.getcode()
                if not 200 <= response_code < 300:
                    raise TransportError(
                        f"HTTP {response_code}",
                        url=url,
                        status_code=response_code
                    )

                chunks = []
                while True:
                    if self.clock() > deadline:
                        raise FetchTimeoutError(
                            f"Download exceeded {timeout_seconds}s",
                            url=url,
                            timeout_seconds=timeout_seconds
                        )
                    chunk = response.read(READ_CHUNK_BYTES)
                    if not chunk:
                        break
                    chunks.append(chunk)

                return b"".join(chunks)

        except HTTPError as e:
            raise TransportError(f"HTTP {e.code}: {e.reason}", url=url, status_code=e.code) from e

        except socket.timeout as e:
            raise FetchTimeoutError(
                f"Timed out after {timeout_seconds}s",
                url=url,
                timeout_seconds=timeout_seconds
            ) from e

        except URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise FetchTimeoutError(
                    f"Timed out after {timeout_seconds}s",
                    url=url,
                    timeout_seconds=timeout_seconds
                ) from e
            raise TransportError(f"Network error: {e.reason}", url=url) from e

        except OSError as e:
            raise TransportError(f"Network error: {e}", url=url) from e

    def decode(self, payload: bytes, url: Optional[str] = None) -> Optional[Image.Image]:
        """Decode an image payload, returning None if it is not a usable image."""
        if not payload:
            self.logger.debug("Empty image payload", url=url)
            return None

        try:
            image = Image.open(BytesIO(payload))
            image.load()
        except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
            self.logger.debug("Image payload could not be decoded", url=url, error=str(e))
            return None

        return image.convert("RGB")
