"""Spanner instances and their conversion from API resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class SpannerInstance:
    name: str  # short instance id
    display_name: str = ""
    project_id: str = ""
    config: str = ""  # regional-us-central1
    state: str = ""  # READY
    node_count: int = 0
    processing_units: int = 0
    labels: dict[str, str] = field(default_factory=dict)


def instance_from_resource(resource: Mapping[str, Any], project_id: str) -> SpannerInstance:
    """Build a SpannerInstance from an instance resource as returned by the Spanner API.

    Names look like projects/{project}/instances/{instance}; configs like
    projects/{project}/instanceConfigs/{config}.
    """
    return SpannerInstance(
        name=resource.get("name", "").split("/")[-1],
        display_name=resource.get("displayName", ""),
        project_id=project_id,
        config=resource.get("config", "").split("/")[-1],
        state=resource.get("state", ""),
        node_count=int(resource.get("nodeCount", 0) or 0),
        processing_units=int(resource.get("processingUnits", 0) or 0),
        labels=dict(resource.get("labels") or {}),
    )