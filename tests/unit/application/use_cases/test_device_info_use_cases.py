from __future__ import annotations

import asyncio

import pytest

from devdb.application.use_cases.device_info_use_cases import (
    GetDeviceInfoUseCase,
    ResolveDeviceInfoUseCase,
)
from devdb.domain.entities.device import (
    ControlItem,
    DeviceInfo,
    InfoEntry,
    Property,
)
from devdb.domain.entities.errors import (
    DataStoreUnavailableError,
    DeviceQueryError,
    RowDecodeError,
)


def _batch(repository, max_concurrent_lookups: int = 1) -> GetDeviceInfoUseCase:
    return GetDeviceInfoUseCase(
        resolver=ResolveDeviceInfoUseCase(device_repository=repository),
        max_concurrent_lookups=max_concurrent_lookups,
    )


@pytest.mark.asyncio
async def test_resolve_device_info_builds_full_entry(dev_a_repository) -> None:
    use_case = ResolveDeviceInfoUseCase(device_repository=dev_a_repository)

    entry = await use_case.execute("DEV_A")

    assert entry.name == "DEV_A"
    assert entry.device == DeviceInfo(
        index=1042,
        description="Outdoor temperature",
        reading=Property(primary_units="V", common_units="degF"),
        setting=None,
        control=(
            ControlItem(value=0, short_name="RESET", long_name="Reset device"),
            ControlItem(value=1, short_name="ON", long_name="Turn on"),
        ),
    )
    assert dev_a_repository.scaling_calls == ["DEV_A"]
    assert dev_a_repository.control_calls == ["DEV_A"]


@pytest.mark.asyncio
async def test_resolve_unknown_device_is_not_an_error(dev_a_repository) -> None:
    use_case = ResolveDeviceInfoUseCase(device_repository=dev_a_repository)

    entry = await use_case.execute("DEV_UNKNOWN")

    assert entry.is_error is False
    assert entry.device == DeviceInfo()


@pytest.mark.asyncio
async def test_scaling_error_skips_control_query(make_device_repository, rows) -> None:
    repository = make_device_repository(
        scaling={
            "Z:BROKEN": [rows.scaling(12), RowDecodeError("Z:BROKEN", "description", 7)]
        },
        control={"Z:BROKEN": [rows.control(1, "ON", "Turn on")]},
    )
    use_case = ResolveDeviceInfoUseCase(device_repository=repository)

    entry = await use_case.execute("Z:BROKEN")

    assert entry.is_error is True
    assert entry.device is None
    assert "description" in entry.error_message
    assert repository.control_calls == []


@pytest.mark.asyncio
async def test_control_error_only_clears_control(make_device_repository, rows) -> None:
    repository = make_device_repository(
        scaling={"DEV_B": [rows.scaling(13, device_index=5)]},
        control={
            "DEV_B": [
                rows.control(0, "RESET", "Reset"),
                DeviceQueryError("DEV_B", "Control query failed for DEV_B"),
            ]
        },
    )
    use_case = ResolveDeviceInfoUseCase(device_repository=repository)

    entry = await use_case.execute("DEV_B")

    assert entry.is_error is False
    assert entry.device.index == 5
    assert entry.device.setting is not None
    assert entry.device.control is None


@pytest.mark.asyncio
async def test_resolve_propagates_data_store_unavailable(
    make_device_repository,
) -> None:
    repository = make_device_repository(
        scaling={"DEV_A": [DataStoreUnavailableError("Device database unavailable")]}
    )
    use_case = ResolveDeviceInfoUseCase(device_repository=repository)

    with pytest.raises(DataStoreUnavailableError):
        await use_case.execute("DEV_A")


@pytest.mark.asyncio
async def test_batch_preserves_order_and_duplicates(dev_a_repository) -> None:
    reply = await _batch(dev_a_repository).execute(["DEV_A", "DEV_UNKNOWN", "DEV_A"])

    assert [entry.name for entry in reply.entries] == [
        "DEV_A",
        "DEV_UNKNOWN",
        "DEV_A",
    ]
    assert reply.entries[0] == reply.entries[2]
    assert reply.entries[1].device == DeviceInfo()
    assert dev_a_repository.scaling_calls == ["DEV_A", "DEV_UNKNOWN", "DEV_A"]


@pytest.mark.asyncio
async def test_batch_with_empty_list_returns_empty_reply(dev_a_repository) -> None:
    reply = await _batch(dev_a_repository).execute([])

    assert len(reply) == 0
    assert dev_a_repository.scaling_calls == []


@pytest.mark.asyncio
async def test_batch_isolates_per_device_failures(make_device_repository, rows) -> None:
    repository = make_device_repository(
        scaling={
            "GOOD": [rows.scaling(12)],
            "BAD": [DeviceQueryError("BAD", "Scaling query failed for BAD")],
        }
    )

    reply = await _batch(repository).execute(["BAD", "GOOD"])

    assert reply.entries[0].error_message == "Scaling query failed for BAD"
    assert reply.entries[1].is_error is False


@pytest.mark.asyncio
async def test_batch_aborts_when_data_store_unavailable(
    make_device_repository, rows
) -> None:
    repository = make_device_repository(
        scaling={
            "GOOD": [rows.scaling(12)],
            "DOWN": [DataStoreUnavailableError("Device database unavailable")],
        }
    )

    with pytest.raises(DataStoreUnavailableError):
        await _batch(repository).execute(["GOOD", "DOWN", "GOOD"])

    assert repository.scaling_calls == ["GOOD", "DOWN"]


@pytest.mark.asyncio
async def test_concurrent_batch_keeps_request_order(
    make_device_repository, rows
) -> None:
    repository = make_device_repository(
        scaling={
            "SLOW": [rows.scaling(12, device_index=1)],
            "FAST": [rows.scaling(12, device_index=2)],
        },
        delays={"SLOW": 0.05},
    )

    reply = await _batch(repository, max_concurrent_lookups=4).execute(
        ["SLOW", "FAST", "SLOW"]
    )

    assert [entry.device.index for entry in reply.entries] == [1, 2, 1]


@pytest.mark.asyncio
async def test_concurrent_batch_respects_limit(make_device_repository) -> None:
    in_flight = 0
    peak = 0

    class _Resolver:
        async def execute(self, name):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return await ResolveDeviceInfoUseCase(make_device_repository()).execute(
                name
            )

    use_case = GetDeviceInfoUseCase(resolver=_Resolver(), max_concurrent_lookups=2)

    reply = await use_case.execute([f"DEV_{i}" for i in range(6)])

    assert len(reply) == 6
    assert peak == 2


@pytest.mark.asyncio
async def test_concurrent_batch_propagates_data_store_unavailable(
    make_device_repository, rows
) -> None:
    repository = make_device_repository(
        scaling={
            "SLOW": [rows.scaling(12)],
            "DOWN": [DataStoreUnavailableError("Device database unavailable")],
        },
        delays={"SLOW": 0.05},
    )

    with pytest.raises(DataStoreUnavailableError):
        await _batch(repository, max_concurrent_lookups=3).execute(
            ["SLOW", "DOWN", "SLOW"]
        )


class _TrackingResolver:
    """Records which lookups started, finished or were cancelled."""

    def __init__(self, delay: float = 0.05) -> None:
        self.delay = delay
        self.started: list[str] = []
        self.finished: list[str] = []
        self.cancelled: list[str] = []

    async def execute(self, name: str) -> InfoEntry:
        self.started.append(name)
        if name == "DOWN":
            raise DataStoreUnavailableError("Device database unavailable")
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled.append(name)
            raise
        self.finished.append(name)
        return InfoEntry.found(name, DeviceInfo())


@pytest.mark.asyncio
async def test_concurrent_batch_cancels_siblings_when_data_store_unavailable() -> None:
    resolver = _TrackingResolver()
    use_case = GetDeviceInfoUseCase(resolver=resolver, max_concurrent_lookups=3)

    with pytest.raises(DataStoreUnavailableError):
        await use_case.execute(["SLOW_1", "DOWN", "SLOW_2"])

    await asyncio.sleep(resolver.delay * 2)
    assert resolver.finished == []
    assert sorted(resolver.cancelled) == ["SLOW_1", "SLOW_2"]


@pytest.mark.asyncio
async def test_cancelling_batch_cancels_outstanding_lookups() -> None:
    resolver = _TrackingResolver(delay=10)
    use_case = GetDeviceInfoUseCase(resolver=resolver, max_concurrent_lookups=2)

    batch = asyncio.create_task(use_case.execute(["DEV_1", "DEV_2", "DEV_3"]))
    while len(resolver.started) < 2:
        await asyncio.sleep(0)
    batch.cancel()

    with pytest.raises(asyncio.CancelledError):
        await batch

    assert sorted(resolver.cancelled) == ["DEV_1", "DEV_2"]
    assert resolver.finished == []
    assert resolver.started == ["DEV_1", "DEV_2"]


def test_batch_rejects_non_positive_limit(dev_a_repository) -> None:
    with pytest.raises(ValueError):
        _batch(dev_a_repository, max_concurrent_lookups=0)
