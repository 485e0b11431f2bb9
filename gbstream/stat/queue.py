"""Fixed-size ring buffer of timestamped usage samples."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Any

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_CAPACITY = 255


@dataclass(frozen=True)
class PercentData:
    """One sample: a usage percentage, or upload/download rates in bits."""

    time: datetime
    used: float = 0.0
    up: float = 0.0
    down: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Encode as a JSON-ready mapping."""
        return {
            "time": self.time.strftime(TIME_FORMAT),
            "used": self.used,
            "up": self.up,
            "down": self.down,
        }


class CircleQueue:
    """Thread-safe ring buffer; once full, each push overwrites the oldest sample."""

    def __init__(self, size: int) -> None:
        if not 1 <= size <= MAX_CAPACITY:
            raise ValueError(f"queue size must be between 1 and {MAX_CAPACITY}, got {size}")
        self._items: deque[PercentData] = deque(maxlen=size)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Largest number of samples held at once."""
        return self._items.maxlen or 0

    def push(self, value: PercentData) -> None:
        """Append a sample, dropping the oldest one when full."""
        with self._lock:
            self._items.append(value)

    def last(self) -> PercentData | None:
        """The newest sample, or None while empty."""
        with self._lock:
            return self._items[-1] if self._items else None

    def snapshot(self) -> list[PercentData]:
        """All held samples, oldest first."""
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)