"""Automatic assignment of topic aliases to outgoing publications."""

from __future__ import annotations

import threading

from mqttkit.messages import Publish, PublishProperties


class TopicAliasHandler:
    """Assigns alias numbers 1..maximum to topics and rewrites publications.

    Alias 0 is never assigned; it stands for "no alias".
    """

    def __init__(self, maximum: int) -> None:
        self._lock = threading.Lock()
        self._alias_max = maximum + 1
        self._aliases: list[str] = [""] * (maximum + 1)

    def get_topic(self, alias: int) -> str:
        """Return the topic assigned to ``alias``, or ``""``."""
        if alias > self._alias_max:
            return ""
        with self._lock:
            if 0 <= alias < len(self._aliases):
                return self._aliases[alias]
            return ""

    def get_alias(self, topic: str) -> int:
        """Return the alias assigned to ``topic``, or 0 if there is none."""
        with self._lock:
            return next((i for i, t in enumerate(self._aliases) if t == topic), 0)

    def set_alias(self, topic: str) -> int:
        """Assign the lowest free alias to ``topic``; return 0 if none is free."""
        with self._lock:
            for alias, current in enumerate(self._aliases[1:], start=1):
                if alias > self._alias_max:
                    break
                if not current:
                    self._aliases[alias] = topic
                    return alias
            return 0

    def reset_alias(self, topic: str, alias: int) -> None:
        """Assign ``alias`` to ``topic``, replacing what it stood for."""
        with self._lock:
            self._aliases[alias] = topic

    def publish_hook(self, publish: Publish) -> None:
        """Rewrite ``publish`` in place to use a topic alias where possible.

        An alias already set on the publication is recorded for its topic.
        Otherwise a known or newly assigned alias replaces the topic; if no
        alias is free the publication is left unchanged.
        """
        if publish.properties is not None and publish.properties.topic_alias is not None:
            self.reset_alias(publish.topic, publish.properties.topic_alias)
            return

        alias = self.get_alias(publish.topic) or self.set_alias(publish.topic)
        if alias:
            if publish.properties is None:
                publish.properties = PublishProperties()
            publish.properties.topic_alias = alias
            publish.topic = ""