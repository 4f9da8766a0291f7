from __future__ import annotations

from datetime import timezone

import pytest

from devdb.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth


def test_dependency_status_defaults() -> None:
    status = DependencyStatus(name="database", status=ServiceStatus.UP)
    assert status.checked_at.tzinfo == timezone.utc
    assert status.details == {}


def test_system_health_container() -> None:
    dependency = DependencyStatus(name="database", status=ServiceStatus.DOWN)
    health = SystemHealth(status=ServiceStatus.DEGRADED, dependencies=[dependency])
    assert health.dependencies[0] is dependency
    assert health.status is ServiceStatus.DEGRADED


@pytest.mark.parametrize(
    "statuses, expected",
    [
        ([], ServiceStatus.UP),
        ([ServiceStatus.UP, ServiceStatus.UP], ServiceStatus.UP),
        ([ServiceStatus.UP, ServiceStatus.UNKNOWN], ServiceStatus.UNKNOWN),
        ([ServiceStatus.UNKNOWN, ServiceStatus.DEGRADED], ServiceStatus.DEGRADED),
        ([ServiceStatus.DEGRADED, ServiceStatus.DOWN], ServiceStatus.DOWN),
    ],
)
def test_service_status_aggregate_priority(statuses, expected) -> None:
    assert ServiceStatus.aggregate(statuses) is expected


def test_system_health_from_dependencies_aggregates() -> None:
    health = SystemHealth.from_dependencies(
        DependencyStatus(name=name, status=status)
        for name, status in [("a", ServiceStatus.UP), ("b", ServiceStatus.DOWN)]
    )

    assert health.status is ServiceStatus.DOWN
    assert [dep.name for dep in health.dependencies] == ["a", "b"]


def test_service_status_is_serving_only_when_not_down() -> None:
    assert ServiceStatus.UP.is_serving
    assert ServiceStatus.DEGRADED.is_serving
    assert ServiceStatus.UNKNOWN.is_serving
    assert not ServiceStatus.DOWN.is_serving
