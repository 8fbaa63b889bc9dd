"""User properties carried in the properties section of MQTT v5 packets."""

from __future__ import annotations

from typing import Iterable, NamedTuple


class UserProperty(NamedTuple):
    """A single key/value pair supplied by the user."""

    key: str
    value: str


class UserProperties(list):
    """An ordered list of user properties; keys may repeat."""

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        super().__init__(UserProperty(key, value) for key, value in items)

    def add(self, key: str, value: str) -> "UserProperties":
        """Append a new property and return this list to allow chaining."""
        self.append(UserProperty(key, value))
        return self

    def get(self, key: str) -> str:
        """Return the value of the first property named ``key``, or ``""``."""
        return next((prop.value for prop in self if prop.key == key), "")

    def get_all(self, key: str) -> list[str]:
        """Return the values of every property named ``key``, in order."""
        return [prop.value for prop in self if prop.key == key]


def bool_to_byte(value: object) -> int:
    """Encode a flag as the single byte value used on the wire (1 or 0).

    Raises TypeError for values that are neither booleans nor integers.
    """
    if not isinstance(value, (bool, int)):
        raise TypeError(f"expected a bool, got {type(value).__name__}")
    return int(bool(value))


__all__ = ["UserProperty", "UserProperties", "bool_to_byte"]