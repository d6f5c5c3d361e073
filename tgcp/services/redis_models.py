"""Memorystore (Redis) instances and their conversion from API resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class RedisInstance:
    name: str  # short instance id
    display_name: str = ""
    project_id: str = ""
    location: str = ""
    tier: str = ""  # BASIC, STANDARD_HA
    memory_size_gb: int = 0
    redis_version: str = ""  # REDIS_6_X
    host: str = ""
    port: int = 0
    state: str = ""  # READY, CREATING
    authorized_network: str = ""


def instance_from_resource(resource: Mapping[str, Any], project_id: str) -> RedisInstance:
    """Build a RedisInstance from an instance resource as returned by the Redis API.

    Names look like projects/{project}/locations/{location}/instances/{id};
    networks like projects/{project}/global/networks/{network}.
    """
    parts = resource.get("name", "").split("/")
    location = parts[-3] if len(parts) > 3 else ""
    network = resource.get("authorizedNetwork", "").split("/")[-1]
    return RedisInstance(
        name=parts[-1],
        display_name=resource.get("displayName", ""),
        project_id=project_id,
        location=location,
        tier=resource.get("tier", ""),
        memory_size_gb=int(resource.get("memorySizeGb", 0) or 0),
        redis_version=resource.get("redisVersion", ""),
        host=resource.get("host", ""),
        port=int(resource.get("port", 0) or 0),
        state=resource.get("state", ""),
        authorized_network=network,
    )