"""In-memory stroke collection for one canvas.

Owns the strokes, the grouping settings and the active layer, and drives a
RecomputeScheduler: single-stroke edits regroup after the debounce window,
snapshot restores (undo/redo) and setting changes regroup immediately.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from inkgroup.config import settings as app_settings
from inkgroup.engine.context import GroupingResult, Stroke
from inkgroup.engine.pipeline import GroupingPipeline
from inkgroup.engine.scheduler import RecomputeScheduler
from inkgroup.models.settings import GroupingSettings

logger = logging.getLogger(__name__)


class StrokeStore:
    def __init__(
        self,
        grouping_settings: GroupingSettings | None = None,
        active_layer: int | None = None,
        pipeline: GroupingPipeline | None = None,
        debounce_ms: float | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._strokes: dict[str, Stroke] = {}
        self.grouping_settings = grouping_settings or GroupingSettings(
            grouping_threshold=app_settings.default_threshold,
            idle_time=app_settings.default_idle_time,
        )
        self.active_layer = app_settings.default_layer if active_layer is None else active_layer
        self.scheduler = RecomputeScheduler(self.snapshot, pipeline=pipeline, debounce_ms=debounce_ms)

    # --- Reads ---

    def __len__(self) -> int:
        with self._lock:
            return len(self._strokes)

    def __contains__(self, stroke_id: str) -> bool:
        with self._lock:
            return stroke_id in self._strokes

    def get(self, stroke_id: str) -> Stroke | None:
        with self._lock:
            return self._strokes.get(stroke_id)

    def all(self) -> list[Stroke]:
        with self._lock:
            return list(self._strokes.values())

    def active_strokes(self) -> list[Stroke]:
        with self._lock:
            return [s for s in self._strokes.values() if s.layer == self.active_layer]

    def snapshot(self) -> tuple[list[Stroke], GroupingSettings]:
        """Strokes on the active layer plus current settings, read atomically."""
        with self._lock:
            return self.active_strokes(), self.grouping_settings

    @property
    def result(self) -> GroupingResult:
        return self.scheduler.result

    # --- Debounced mutations ---

    def add(self, stroke: Stroke) -> None:
        with self._lock:
            self._strokes[stroke.id] = stroke
        self.scheduler.schedule()

    def update(self, stroke: Stroke) -> None:
        with self._lock:
            if stroke.id not in self._strokes:
                raise KeyError(stroke.id)
            self._strokes[stroke.id] = stroke
        self.scheduler.schedule()

    def delete(self, stroke_id: str) -> None:
        with self._lock:
            del self._strokes[stroke_id]
        self.scheduler.schedule()

    def delete_many(self, stroke_ids: Iterable[str]) -> int:
        with self._lock:
            removed = sum(1 for sid in list(stroke_ids) if self._strokes.pop(sid, None) is not None)
        if removed:
            self.scheduler.schedule()
        return removed

    # --- Immediate mutations ---

    def apply_snapshot(self, strokes: Iterable[Stroke]) -> GroupingResult:
        """Replace every stroke (undo/redo restore) and regroup now."""
        with self._lock:
            self._strokes = {s.id: s for s in strokes}
        logger.debug("Applied snapshot of %d strokes", len(self))
        return self.scheduler.recompute_now()

    def clear(self) -> GroupingResult:
        with self._lock:
            self._strokes.clear()
        return self.scheduler.recompute_now()

    def set_grouping_settings(self, grouping_settings: GroupingSettings) -> GroupingResult:
        with self._lock:
            self.grouping_settings = grouping_settings
        return self.scheduler.recompute_now()

    def set_active_layer(self, layer: int) -> GroupingResult:
        with self._lock:
            self.active_layer = layer
        return self.scheduler.recompute_now()

    def close(self) -> None:
        self.scheduler.cancel()
