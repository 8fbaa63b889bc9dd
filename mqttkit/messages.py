"""Publish, subscribe and unsubscribe MQTT v5 packets and their responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mqttkit.properties import UserProperties


@dataclass
class PublishProperties:
    """Properties that can be set on a PUBLISH packet."""

    correlation_data: Optional[bytes] = None
    content_type: str = ""
    response_topic: str = ""
    payload_format: Optional[int] = None
    message_expiry: Optional[int] = None
    subscription_identifier: Optional[int] = None
    topic_alias: Optional[int] = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Publish:
    """An MQTT PUBLISH packet."""

    qos: int = 0
    retain: bool = False
    topic: str = ""
    properties: Optional[PublishProperties] = None
    payload: bytes = b""

    def __str__(self) -> str:
        lines = [
            f"topic: {self.topic}  qos: {self.qos}  retain: {str(self.retain).lower()}\n"
        ]
        props = self.properties
        if props is not None:
            if props.payload_format is not None:
                lines.append(f"PayloadFormat: {props.payload_format}\n")
            if props.message_expiry is not None:
                lines.append(f"MessageExpiry: {props.message_expiry}\n")
            if props.content_type:
                lines.append(f"ContentType: {props.content_type}\n")
            if props.response_topic:
                lines.append(f"ResponseTopic: {props.response_topic}\n")
            if props.correlation_data is not None:
                data = " ".join(str(b) for b in props.correlation_data)
                lines.append(f"CorrelationData: [{data}]\n")
            if props.topic_alias is not None:
                lines.append(f"TopicAlias: {props.topic_alias}\n")
            if props.subscription_identifier is not None:
                lines.append(f"SubscriptionIdentifier: {props.subscription_identifier}\n")
            lines.extend(f"User: {p.key} : {p.value}\n" for p in props.user)
        lines.append(bytes(self.payload).decode("utf-8", errors="replace"))
        return "".join(lines)


@dataclass
class PublishResponseProperties:
    """Properties of a response to a QoS 1 or QoS 2 publish."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class PublishResponse:
    """A PUBACK, PUBREC or PUBCOMP answering a QoS 1 or QoS 2 publish."""

    properties: Optional[PublishResponseProperties] = None
    reason_code: int = 0


@dataclass
class SubackProperties:
    """Properties that can be set on a SUBACK packet."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Suback:
    """An MQTT SUBACK packet, one reason code per requested subscription."""

    properties: Optional[SubackProperties] = None
    reasons: list[int] = field(default_factory=list)


@dataclass
class SubscribeOptions:
    """Options for a single subscription."""

    qos: int = 0
    retain_handling: int = 0
    no_local: bool = False
    retain_as_published: bool = False


@dataclass
class SubscribeProperties:
    """Properties that can be set on a SUBSCRIBE packet."""

    subscription_identifier: Optional[int] = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Subscribe:
    """An MQTT SUBSCRIBE packet mapping topic filters to their options."""

    properties: Optional[SubscribeProperties] = None
    subscriptions: dict[str, SubscribeOptions] = field(default_factory=dict)


@dataclass
class UnsubackProperties:
    """Properties that can be set on an UNSUBACK packet."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Unsuback:
    """An MQTT UNSUBACK packet, one reason code per topic filter."""

    reasons: list[int] = field(default_factory=list)
    properties: Optional[UnsubackProperties] = None


@dataclass
class UnsubscribeProperties:
    """Properties that can be set on an UNSUBSCRIBE packet."""

    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Unsubscribe:
    """An MQTT UNSUBSCRIBE packet."""

    topics: list[str] = field(default_factory=list)
    properties: Optional[UnsubscribeProperties] = None