"""Allocation of packet identifiers and tracking of their pending contexts."""

from __future__ import annotations

import heapq
import threading
from typing import Any, Optional

MID_MIN = 1
MID_MAX = 65535


class MessageIDs:
    """Hands out the lowest free packet identifier and remembers its context.

    Identifiers range from 1 to 65534 inclusive.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._reset()

    def _reset(self) -> None:
        self._index: dict[int, Any] = {}
        # Every id >= _next is free; _freed holds free ids below _next.
        self._next = MID_MIN
        self._freed: list[int] = []

    def request(self, context: Any) -> int:
        """Associate ``context`` with the lowest free id and return that id.

        Raises RuntimeError when every identifier is in use.
        """
        with self._lock:
            while self._freed:
                mid = heapq.heappop(self._freed)
                if mid not in self._index:
                    self._index[mid] = context
                    return mid
            if self._next < MID_MAX:
                mid = self._next
                self._next += 1
                self._index[mid] = context
                return mid
            raise RuntimeError("no free message ids available")

    def get(self, mid: int) -> Optional[Any]:
        """Return the context stored for ``mid``, or None."""
        with self._lock:
            return self._index.get(mid)

    def free(self, mid: int) -> None:
        """Release ``mid`` so it can be handed out again."""
        with self._lock:
            if self._index.pop(mid, _MISSING) is not _MISSING:
                heapq.heappush(self._freed, mid)

    def clear(self) -> None:
        """Forget every allocated identifier."""
        with self._lock:
            self._reset()


_MISSING = object()