"""Recompute scheduling and the query surface over the latest grouping.

Mutation signals are debounced through a single timer slot: each call to
``schedule()`` cancels the pending timer and starts a new one, so only the
last signal of a burst triggers a recompute. ``recompute_now()`` bypasses the
debounce (undo/redo, settings changes).

Every result carries the sequence number it was computed under. A result
older than the last one delivered is never handed to subscribers.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence

from inkgroup.config import settings as app_settings
from inkgroup.engine.context import EMPTY_RESULT, GroupingResult, Stroke
from inkgroup.engine.pipeline import GroupingPipeline
from inkgroup.models.settings import GroupingSettings

logger = logging.getLogger(__name__)

StrokeSource = Callable[[], tuple[Sequence[Stroke], GroupingSettings]]
Subscriber = Callable[[GroupingResult], None]


class RecomputeScheduler:
    def __init__(
        self,
        source: StrokeSource,
        pipeline: GroupingPipeline | None = None,
        debounce_ms: float | None = None,
    ) -> None:
        self._source = source
        self._pipeline = pipeline or GroupingPipeline()
        self.debounce_ms = app_settings.debounce_ms if debounce_ms is None else debounce_ms
        self._lock = threading.RLock()
        self._deliver_lock = threading.RLock()
        self._timer: threading.Timer | None = None
        self._generation = 0
        self._result: GroupingResult = EMPTY_RESULT
        self._sequence = 0
        self._delivered = 0
        self._subscribers: list[Subscriber] = []
        self.recompute_count = 0

    # --- Triggers ---

    def schedule(self) -> None:
        """Signal that the stroke set changed; recompute after a quiet period."""
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            timer = threading.Timer(self.debounce_ms / 1000, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()
        logger.debug("Recompute scheduled in %.0fms", self.debounce_ms)

    def recompute_now(self) -> GroupingResult:
        """Cancel any pending recompute and run one immediately."""
        with self._lock:
            self._cancel_locked()
            sequence, result = self._recompute_locked()
        logger.debug("Immediate recompute")
        self._notify(sequence, result)
        return result

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()

    def flush(self) -> GroupingResult:
        """Run a pending recompute now, if any; otherwise return the last result."""
        with self._lock:
            if self._timer is None:
                return self._result
        return self.recompute_now()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def _fire(self, generation: int) -> None:
        with self._lock:
            # Superseded by a newer schedule() or cancelled after the timer started
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
            sequence, result = self._recompute_locked()
        logger.debug("Debounced recompute fired")
        self._notify(sequence, result)

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _recompute_locked(self) -> tuple[int, GroupingResult]:
        strokes, grouping_settings = self._source()
        self._result = self._pipeline.run(strokes, grouping_settings)
        self.recompute_count += 1
        self._sequence += 1
        return self._sequence, self._result

    # --- Subscribers ---

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Receive every new result. Returns an unsubscribe function."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, sequence: int, result: GroupingResult) -> None:
        # One delivery at a time; a newer result already delivered wins
        with self._deliver_lock:
            with self._lock:
                if sequence <= self._delivered:
                    logger.debug("Dropped stale result #%d (delivered #%d)", sequence, self._delivered)
                    return
                self._delivered = sequence
                subscribers = list(self._subscribers)
            for callback in subscribers:
                callback(result)

    # --- Queries over the last result ---

    @property
    def result(self) -> GroupingResult:
        with self._lock:
            return self._result

    def group_id_for_stroke(self, stroke_id: str) -> str | None:
        return self.result.group_of(stroke_id)

    def stroke_ids_in_group(self, group_id: str) -> list[str]:
        return self.result.members_of(group_id)

    def group_members_for_stroke(self, stroke_id: str) -> list[str]:
        return self.result.members_for_stroke(stroke_id)
