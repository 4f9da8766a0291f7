"""Static service metadata consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """
    Build and deployment metadata reported on /info.

    ``database_url`` must already have its password masked; it is shown
    verbatim.
    """

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    database_url: str
    database_schema: str
    max_concurrent_lookups: int
