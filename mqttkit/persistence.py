"""Stores for packets that are awaiting acknowledgement."""

from __future__ import annotations

import threading
from typing import Any, Optional

_MID_MAX = 65535


def _check_mid(mid: int) -> int:
    """Return ``mid`` if it is a valid packet identifier value."""
    if not isinstance(mid, int) or not 0 <= mid <= _MID_MAX:
        raise ValueError(f"packet identifier out of range: {mid!r}")
    return mid


class MemoryPersistence:
    """Keeps packets in memory, keyed by their packet identifier.

    The store must be opened before packets are put into it.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._packets: Optional[dict[int, Any]] = None

    def open(self) -> None:
        """Prepare the store for use, keeping any packets already held."""
        with self._lock:
            if self._packets is None:
                self._packets = {}

    def put(self, mid: int, packet: Any) -> None:
        """Store ``packet`` under ``mid``, replacing any earlier one.

        Raises RuntimeError if the store has not been opened.
        """
        with self._lock:
            if self._packets is None:
                raise RuntimeError("persistence is not open")
            self._packets[mid] = packet

    def get(self, mid: int) -> Optional[Any]:
        """Return the packet stored under ``mid``, or None."""
        with self._lock:
            if self._packets is None:
                return None
            return self._packets.get(mid)

    def all(self) -> list[Any]:
        """Return every stored packet."""
        with self._lock:
            if self._packets is None:
                return []
            return list(self._packets.values())

    def delete(self, mid: int) -> None:
        """Remove the packet stored under ``mid`` if there is one."""
        with self._lock:
            if self._packets is not None:
                self._packets.pop(mid, None)

    def close(self) -> None:
        """Discard every packet and close the store."""
        with self._lock:
            self._packets = None

    def reset(self) -> None:
        """Discard every packet and leave the store open and empty."""
        with self._lock:
            self._packets = {}


class NoopPersistence:
    """A store that keeps nothing; it only tracks whether it is open."""

    def __init__(self) -> None:
        self.is_open = False

    def open(self) -> None:
        """Mark the store as open."""
        self.is_open = True

    def put(self, mid: int, packet: Any) -> None:
        """Check the identifier and discard the packet."""
        _check_mid(mid)

    def get(self, mid: int) -> Optional[Any]:
        """Return None: nothing is ever stored."""
        _check_mid(mid)
        return None

    def all(self) -> list[Any]:
        """Return an empty list: nothing is ever stored."""
        return []

    def delete(self, mid: int) -> None:
        """Check the identifier; there is nothing to remove."""
        _check_mid(mid)

    def close(self) -> None:
        """Mark the store as closed."""
        self.is_open = False

    def reset(self) -> None:
        """Leave the store open and empty."""
        self.is_open = True