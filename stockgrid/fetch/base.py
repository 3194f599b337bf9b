"""Base class for chart image fetchers."""

from abc import ABC, abstractmethod
from typing import Optional

from PIL import Image


class ImageFetcher(ABC):
    """Fetches a single remote image."""

    @abstractmethod
    def fetch(self, url: str, timeout_seconds: float) -> Optional[Image.Image]:
        """
        Make one attempt at downloading and decoding an image.

        Args:
            url: Image URL
            timeout_seconds: Time bound for the whole attempt

        Returns:
            Decoded image, or None if the response held no usable image

        Raises:
            FetchTimeoutError: If the attempt ran past its time bound
            TransportError: On network or HTTP failures
        """
        pass
