"""Minimal logging interface used for debug and error output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Destination for log lines.

    Implementations must provide :meth:`println`; :meth:`printf` formats
    its arguments with ``%`` and hands the result to :meth:`println`
    unless overridden.
    """

    @abstractmethod
    def println(self, *args: Any) -> None:
        """Log the arguments, separated by spaces, as one line."""

    def printf(self, fmt: str, *args: Any) -> None:
        """Log ``fmt`` formatted with ``args`` as one line."""
        self.println(fmt % args if args else fmt)


class NoopLogger(Logger):
    """A logger that discards everything it is given.

    It only keeps a count of the messages it has dropped.
    """

    def __init__(self) -> None:
        self.discarded = 0

    def println(self, *args: Any) -> None:
        """Discard the message."""
        self.discarded += 1

    def printf(self, fmt: str, *args: Any) -> None:
        """Discard the message without formatting it."""
        self.discarded += 1