"""Tests for the canvas stroke store."""

from __future__ import annotations

import threading

import pytest

from inkgroup.engine.pipeline import recompute
from inkgroup.engine.store import StrokeStore
from inkgroup.models.settings import GroupingSettings
from tests.conftest import line_stroke, loop_stroke, scenario_strokes


@pytest.fixture
def store():
    s = StrokeStore(debounce_ms=30)
    yield s
    s.close()


def test_add_schedules_debounced_recompute(store):
    fired = threading.Event()
    store.scheduler.subscribe(lambda _r: fired.set())
    for stroke in scenario_strokes():
        store.add(stroke)
    assert store.scheduler.pending
    assert store.result.num_groups == 0
    assert fired.wait(timeout=2.0)
    assert store.result.partition() == {frozenset({"A", "B"}), frozenset({"C"})}


def test_apply_snapshot_recomputes_immediately(store):
    result = store.apply_snapshot(scenario_strokes())
    assert not store.scheduler.pending
    assert result.num_groups == 2
    assert len(store) == 3


def test_snapshot_replaces_previous_strokes(store):
    store.apply_snapshot(scenario_strokes())
    result = store.apply_snapshot([line_stroke("x", 0, 0, 10, 0, 0, 100)])
    assert "A" not in store
    assert result.partition() == {frozenset({"x"})}


def test_only_active_layer_is_grouped(store):
    strokes = [*scenario_strokes(), loop_stroke("bg", 50, 50, 50, 0, 500, layer=0)]
    result = store.apply_snapshot(strokes)
    assert result.group_of("bg") is None
    assert len(store) == 4

    result = store.set_active_layer(0)
    assert result.partition() == {frozenset({"bg"})}


def test_update_and_delete(store):
    store.apply_snapshot(scenario_strokes())
    store.update(loop_stroke("C", 50, 50, 50, 700, 1200))
    store.delete("B")
    assert store.scheduler.pending
    result = store.scheduler.flush()
    assert result.partition() == {frozenset({"A", "C"})}


def test_update_unknown_raises(store):
    with pytest.raises(KeyError):
        store.update(line_stroke("nope", 0, 0, 1, 1, 0, 10))


def test_delete_unknown_raises(store):
    with pytest.raises(KeyError):
        store.delete("nope")


def test_delete_many(store):
    store.apply_snapshot(scenario_strokes())
    assert store.delete_many(["A", "B", "zzz"]) == 2
    assert store.scheduler.flush().partition() == {frozenset({"C"})}


def test_clear(store):
    store.apply_snapshot(scenario_strokes())
    result = store.clear()
    assert len(store) == 0
    assert result.num_groups == 0


def test_settings_change_recomputes(store):
    store.apply_snapshot(scenario_strokes())
    before = store.scheduler.recompute_count
    new_settings = GroupingSettings(grouping_threshold=0.9, idle_time=4.0)
    result = store.set_grouping_settings(new_settings)
    assert store.grouping_settings.grouping_threshold == 0.9
    assert store.scheduler.recompute_count == before + 1
    assert not store.scheduler.pending
    assert result.partition() == recompute(scenario_strokes(), new_settings).partition()
