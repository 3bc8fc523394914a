"""Tracking of neighbours discovered through HELLO messages."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable

ACTIVE_WINDOW = 10.0
"""Seconds since the last HELLO during which a neighbour counts as active."""

PURGE_AFTER = 30.0
"""Seconds of silence after which a neighbour is forgotten."""


@dataclass
class NeighborInfo:
    """A neighbour's address and the time it was last heard from."""

    ip: str
    last_seen: float


class LinkStateManager:
    """Keeps the set of known neighbours and when each was last seen.

    The manager is safe to share between the receiving thread and the
    thread that sends HELLO messages.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._neighbors: dict[str, NeighborInfo] = {}
        self._lock = threading.Lock()

    def update_neighbor(self, ip: str) -> None:
        """Record that a HELLO was just received from ``ip``."""
        with self._lock:
            self._neighbors[ip] = NeighborInfo(ip, self._clock())

    def active_neighbors(self) -> list[str]:
        """Addresses heard from within the last ten seconds."""
        now = self._clock()
        with self._lock:
            return [
                ip
                for ip, info in self._neighbors.items()
                if now - info.last_seen < ACTIVE_WINDOW
            ]

    def purge_inactive_neighbors(self) -> None:
        """Forget neighbours silent for more than thirty seconds."""
        now = self._clock()
        with self._lock:
            self._neighbors = {
                ip: info
                for ip, info in self._neighbors.items()
                if not now - info.last_seen > PURGE_AFTER
            }

    def __contains__(self, ip: object) -> bool:
        with self._lock:
            return ip in self._neighbors

    def __len__(self) -> int:
        with self._lock:
            return len(self._neighbors)