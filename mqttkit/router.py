"""Dispatch of received publications to message handlers by topic."""

from __future__ import annotations

import dataclasses
import threading
from typing import Callable, Optional

from mqttkit.messages import Publish
from mqttkit.trace import Logger, NoopLogger

MessageHandler = Callable[[Publish], None]


def _alias_of(publish: Publish) -> Optional[int]:
    props = publish.properties
    return props.topic_alias if props is not None else None


def match(route: str, topic: str) -> bool:
    """Report whether the subscription ``route`` covers ``topic``."""
    return route == topic or route_includes_topic(route, topic)


def _match_deep(route: list[str], topic: list[str]) -> bool:
    for route_part, topic_part in zip(route, topic):
        if route_part == "#":
            return True
        if route_part != "+" and route_part != topic_part:
            return False
    if len(route) == len(topic):
        return True
    if len(route) > len(topic):
        return route[len(topic)] == "#"
    return False


def route_includes_topic(route: str, topic: str) -> bool:
    """Report whether the levels of ``route`` match those of ``topic``."""
    return _match_deep(route_split(route), topic_split(topic))


def route_split(route: str) -> list[str]:
    """Split a subscription route into levels, dropping a ``$share`` prefix."""
    if not route:
        return []
    parts = route.split("/")
    if route.startswith("$share"):
        return parts[1:]
    return parts


def topic_split(topic: str) -> list[str]:
    """Split a topic name into its levels."""
    if not topic:
        return []
    return topic.split("/")


class StandardRouter:
    """Routes publications to every handler whose route matches the topic.

    Several handlers may be registered for the same route.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._subscriptions: dict[str, list[MessageHandler]] = {}
        self._aliases: dict[int, str] = {}
        self._debug: Logger = NoopLogger()

    def register_handler(self, topic: str, handler: MessageHandler) -> None:
        """Add ``handler`` for publications matching ``topic``."""
        self._debug.println("Registering handler for:", topic)
        with self._lock:
            self._subscriptions.setdefault(topic, []).append(handler)

    def unregister_handler(self, topic: str) -> None:
        """Remove every handler registered for ``topic``."""
        self._debug.println("Unregistering handler for:", topic)
        with self._lock:
            self._subscriptions.pop(topic, None)

    def route(self, publish: Publish) -> None:
        """Call every handler whose route matches the publication's topic.

        A publication carrying a topic alias and a topic registers the
        alias; one carrying only an alias is routed by the stored topic.
        """
        self._debug.println("Routing message for:", publish.topic)
        with self._lock:
            alias = _alias_of(publish)
            if alias is not None:
                if publish.topic:
                    self._aliases[alias] = publish.topic
                topic = self._aliases.get(alias, "")
            else:
                topic = publish.topic
            matched = [
                handler
                for route, handlers in self._subscriptions.items()
                if match(route, topic)
                for handler in handlers
            ]
        for handler in matched:
            handler(publish)

    def set_debug(self, logger: Logger) -> None:
        """Use ``logger`` for debug output."""
        self._debug = logger


class SingleHandlerRouter:
    """Routes every publication to one handler.

    When a publication uses a known topic alias, the handler receives a
    copy whose topic is the aliased topic.
    """

    def __init__(self, handler: Optional[MessageHandler]) -> None:
        self._lock = threading.Lock()
        self._aliases: dict[int, str] = {}
        self._handler = handler
        self._debug: Logger = NoopLogger()

    def register_handler(self, topic: str, handler: MessageHandler) -> None:
        """Replace the handler; ``topic`` is ignored."""
        self._handler = handler

    def unregister_handler(self, topic: str) -> None:
        """Leave the single handler in place, noting the request in the debug log."""
        self._debug.println("Ignoring request to unregister handler for:", topic)

    def route(self, publish: Publish) -> None:
        """Pass the publication to the handler."""
        message = publish
        alias = _alias_of(publish)
        if alias is not None:
            with self._lock:
                if publish.topic:
                    self._aliases[alias] = publish.topic
                topic = self._aliases.get(alias)
            if topic is not None:
                message = dataclasses.replace(publish, topic=topic)
        if self._handler is None:
            raise RuntimeError("no message handler set")
        self._handler(message)

    def set_debug(self, logger: Logger) -> None:
        """Use ``logger`` for debug output."""
        self._debug = logger