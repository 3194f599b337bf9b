"""
Fetch pipeline data models.

Tasks and results are immutable. The error log is the only mutable
structure and is owned by a single render pass; fetch workers append to it
from their own threads.
"""

import threading
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True)
class FetchTask:
    """One chart to download."""
    symbol: str
    position: int       # Index in the input symbol list


@dataclass(frozen=True)
class FetchResult:
    """Outcome of downloading one chart."""
    symbol: str
    image: Optional["Image.Image"]
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls, symbol: str, image: "Image.Image") -> "FetchResult":
        return cls(symbol=symbol, image=image, success=True)

    @classmethod
    def failed(cls, symbol: str, error: Optional[str] = None) -> "FetchResult":
        return cls(symbol=symbol, image=None, success=False, error=error)


@dataclass(frozen=True)
class ErrorEntry:
    """A single logged fetch failure."""
    symbol: str
    message: str

    def __str__(self) -> str:
        return f"{self.symbol}: {self.message}"


class ErrorLog:
    """Append-only record of fetch failures for one render pass."""

    def __init__(self) -> None:
        self._entries: list[ErrorEntry] = []
        self._lock = threading.Lock()

    def append(self, symbol: str, message: str) -> ErrorEntry:
        entry = ErrorEntry(symbol=symbol, message=message)
        with self._lock:
            self._entries.append(entry)
        return entry

    @property
    def entries(self) -> tuple[ErrorEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    @property
    def symbols(self) -> list[str]:
        return [entry.symbol for entry in self.entries]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[ErrorEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return len(self) > 0
