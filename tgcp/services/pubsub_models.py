"""Pub/Sub topics and subscriptions, and their conversion from API resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Topic:
    name: str
    project_id: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    kms_key_name: str = ""
    message_storage: str = ""


@dataclass(frozen=True)
class Subscription:
    name: str
    topic: str = ""
    push_endpoint: str = ""  # empty for pull subscriptions
    ack_deadline: int = 0
    retain_acked: bool = False
    retention_duration: str = ""
    dead_letter_topic: str = ""
    state: str = ""


def short_name(long_name: str) -> str:
    """Last path segment of a resource name."""
    return long_name.split("/")[-1]


def topic_from_resource(resource: Mapping[str, Any], project_id: str) -> Topic:
    """Build a Topic from a topic resource as returned by the Pub/Sub API."""
    return Topic(
        name=short_name(resource.get("name", "")),
        project_id=project_id,
        labels=dict(resource.get("labels") or {}),
        kms_key_name=resource.get("kmsKeyName", ""),
    )


def subscription_from_resource(resource: Mapping[str, Any]) -> Subscription:
    """Build a Subscription from a subscription resource as returned by the Pub/Sub API."""
    dead_letter = resource.get("deadLetterPolicy")
    push = resource.get("pushConfig")
    return Subscription(
        name=short_name(resource.get("name", "")),
        topic=short_name(resource.get("topic", "")),
        push_endpoint=push.get("pushEndpoint", "") if push else "",
        ack_deadline=int(resource.get("ackDeadlineSeconds", 0) or 0),
        retain_acked=bool(resource.get("retainAckedMessages", False)),
        retention_duration=resource.get("messageRetentionDuration", ""),
        dead_letter_topic=short_name(dead_letter.get("deadLetterTopic", "")) if dead_letter else "",
        state=resource.get("state", ""),
    )