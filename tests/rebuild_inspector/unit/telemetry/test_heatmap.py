from __future__ import annotations

from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.telemetry.heatmap import HeatmapAggregator
from tests.rebuild_inspector.conftest import FakeLayoutHandle, resolve_fake_handle


def test_snapshot_with_no_registrations_is_empty() -> None:
    aggregator = HeatmapAggregator(resolve_fake_handle)
    assert aggregator.snapshot(lambda name: 0) == []


def test_snapshot_joins_rects_with_counts() -> None:
    aggregator = HeatmapAggregator(resolve_fake_handle)
    aggregator.register("Header", FakeLayoutHandle(Rect(0, 0, 100, 40)))
    aggregator.register("Untracked", FakeLayoutHandle(Rect(0, 50, 100, 40)))
    counts = {"Header": 7}

    entries = aggregator.snapshot(lambda name: counts.get(name, 0))

    assert [(e.name, e.rect, e.count) for e in entries] == [
        ("Header", Rect(0, 0, 100, 40), 7),
        ("Untracked", Rect(0, 50, 100, 40), 0),
    ]


def test_snapshot_skips_stale_and_zero_size_handles() -> None:
    aggregator = HeatmapAggregator(resolve_fake_handle)
    detached = FakeLayoutHandle(Rect(0, 0, 10, 10))
    detached.attached = False
    aggregator.register("Detached", detached)
    aggregator.register("Collapsed", FakeLayoutHandle(Rect(5, 5, 0, 10)))
    aggregator.register("Unknown", object())
    aggregator.register("Visible", FakeLayoutHandle(Rect(1, 2, 3, 4)))

    entries = aggregator.snapshot(lambda name: 1)

    assert [entry.name for entry in entries] == ["Visible"]


def test_snapshot_skips_handles_whose_resolver_raises() -> None:
    def _resolver(handle: object) -> Rect | None:
        if handle == "boom":
            raise LookupError("render object gone")
        return Rect(0, 0, 1, 1)

    aggregator = HeatmapAggregator(_resolver)
    aggregator.register("Broken", "boom")
    aggregator.register("Fine", "ok")

    assert [entry.name for entry in aggregator.snapshot(lambda name: 0)] == ["Fine"]


def test_register_overwrites_and_unregister_is_tolerant() -> None:
    aggregator = HeatmapAggregator(resolve_fake_handle)
    aggregator.register("Tile", FakeLayoutHandle(Rect(0, 0, 1, 1)))
    aggregator.register("Tile", FakeLayoutHandle(Rect(9, 9, 2, 2)))
    aggregator.unregister("Missing")

    assert aggregator.registered_count == 1
    assert aggregator.snapshot(lambda name: 0)[0].rect == Rect(9, 9, 2, 2)

    aggregator.unregister("Tile")
    assert aggregator.snapshot(lambda name: 0) == []


def test_disabled_aggregator_ignores_registrations() -> None:
    aggregator = HeatmapAggregator(resolve_fake_handle, enabled=False)
    aggregator.register("Tile", FakeLayoutHandle(Rect(0, 0, 1, 1)))
    assert aggregator.registered_count == 0
    assert aggregator.snapshot(lambda name: 0) == []


def test_rect_inflate_grows_every_side() -> None:
    assert Rect(10, 10, 20, 30).inflate(1.0) == Rect(9, 9, 22, 32)
