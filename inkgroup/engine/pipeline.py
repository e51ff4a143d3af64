"""Grouping pipeline — features → pair scores → union-find, timed per stage."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from inkgroup.engine.clustering import (
    behavior_flow,
    behavior_threshold,
    build_groups,
    effective_idle_time,
    should_merge,
    summarize_behavior,
)
from inkgroup.engine.config import GroupingConfig
from inkgroup.engine.context import GroupingContext, GroupingResult, Stroke
from inkgroup.engine.features import extract_features
from inkgroup.engine.registry import FactorRegistry, get_registry
from inkgroup.engine.scoring import score_all_pairs
from inkgroup.models.settings import GroupingSettings

logger = logging.getLogger(__name__)


class DuplicateStrokeError(ValueError):
    """Two input strokes share an id; the result could not be a partition."""


class GroupingPipeline:
    """Runs one full recompute. Holds no state between calls."""

    def __init__(
        self,
        registry: FactorRegistry | None = None,
        config: GroupingConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or GroupingConfig()

    def prepare(self, strokes: Sequence[Stroke], settings: GroupingSettings) -> GroupingContext:
        """Extract features and derive the session-wide behavior adjustments."""
        features = [f for f in (extract_features(s, self.config) for s in strokes) if f is not None]
        summary = summarize_behavior(features)
        flow = behavior_flow(summary, settings.idle_time, len(features), self.config)
        return GroupingContext(
            features=features,
            config=self.config,
            idle_time=effective_idle_time(settings.idle_time, flow, self.config),
            behavior_threshold=behavior_threshold(settings.grouping_threshold, flow, self.config),
            behavior_flow=flow,
        )

    def run(self, strokes: Sequence[Stroke], settings: GroupingSettings | None = None) -> GroupingResult:
        settings = settings or GroupingSettings()
        strokes = list(strokes)
        _check_unique_ids(strokes)
        start = time.perf_counter()

        ctx = self.prepare(strokes, settings)
        t_features = time.perf_counter()
        logger.debug(
            "  features: %d/%d strokes, flow=%.3f, idle=%.2fs, bar=%.3f in %.1fms",
            ctx.num_features,
            len(strokes),
            ctx.behavior_flow,
            ctx.idle_time,
            ctx.behavior_threshold,
            (t_features - start) * 1000,
        )

        pairs = score_all_pairs(ctx, self.registry)
        t_scores = time.perf_counter()
        logger.debug("  scored %d pairs in %.1fms", len(pairs), (t_scores - t_features) * 1000)

        merges = [
            p
            for p in pairs
            if should_merge(p, ctx.tau_ms, ctx.behavior_threshold, ctx.behavior_flow, self.config)
        ]
        result = build_groups(strokes, ctx.features, merges)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Grouping complete: %d strokes → %d groups in %.1fms",
            len(strokes),
            result.num_groups,
            total,
        )
        return result


def _check_unique_ids(strokes: list[Stroke]) -> None:
    seen: set[str] = set()
    for stroke in strokes:
        if stroke.id in seen:
            raise DuplicateStrokeError(f"Duplicate stroke ID: {stroke.id}")
        seen.add(stroke.id)


def recompute(
    strokes: Sequence[Stroke],
    settings: GroupingSettings | None = None,
    config: GroupingConfig | None = None,
) -> GroupingResult:
    """Full synchronous recompute over ``strokes``."""
    return GroupingPipeline(config=config).run(strokes, settings)


def create_pipeline(config: GroupingConfig | None = None) -> GroupingPipeline:
    """Factory function for creating a pipeline instance."""
    return GroupingPipeline(config=config)
