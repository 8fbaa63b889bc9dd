"""Errors raised by the client."""

from __future__ import annotations

from mqttkit.connection import Disconnect


class DisconnectError(Exception):
    """Raised or reported when the server sends a DISCONNECT."""

    def __init__(self, disconnect: Disconnect, err: BaseException | str) -> None:
        super().__init__(disconnect, err)
        self.disconnect = disconnect
        self.err = err

    def __str__(self) -> str:
        props = self.disconnect.properties
        reason = props.reason_string if props is not None else ""
        return f"{self.err} - {self.disconnect.reason_code}: {reason}"