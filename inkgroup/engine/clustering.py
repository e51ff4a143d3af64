"""Cluster building — union-find over pairs above an adaptive threshold.

The threshold relaxes slightly for smooth sessions (uniform speed, short
pauses), measured by the behavior flow. A burst exception joins rapid
consecutive strokes of one gesture that land just under the bar.
"""

from __future__ import annotations

import logging

import numpy as np

from inkgroup.engine.config import GroupingConfig
from inkgroup.engine.context import BehaviorSummary, GroupingResult, Stroke, StrokeFeatures
from inkgroup.engine.scoring import PairScore
from inkgroup.utils.geometry import clamp01

logger = logging.getLogger(__name__)

_MIN_MEAN_SPEED = 1e-3


class DisjointSet:
    """Union-find over indices 0..n-1 with path compression."""

    def __init__(self, n: int) -> None:
        self.parent = list(range(n))

    def find(self, x: int) -> int:
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, a: int, b: int) -> bool:
        """Attach b's root under a's root. False if already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        self.parent[rb] = ra
        return True


def summarize_behavior(features: list[StrokeFeatures]) -> BehaviorSummary:
    if not features:
        return BehaviorSummary()

    speeds = np.array([f.speed for f in features], dtype=np.float64)
    mean_speed = float(np.mean(speeds))
    speed_std = float(np.std(speeds))
    speed_cv = speed_std / mean_speed if mean_speed > _MIN_MEAN_SPEED else 0.0

    by_start = sorted(features, key=lambda f: f.start_time)
    gaps = [max(0.0, cur.start_time - prev.end_time) for prev, cur in zip(by_start, by_start[1:])]
    mean_gap = float(np.mean(gaps)) if gaps else 0.0

    return BehaviorSummary(
        mean_speed=mean_speed,
        speed_cv=speed_cv,
        mean_gap_ms=mean_gap,
    )


def behavior_flow(summary: BehaviorSummary, idle_time: float, n_features: int, config: GroupingConfig) -> float:
    """Smoothness of the session in [0, 1]; 1 = uniform speed and short pauses."""
    if n_features == 0:
        return 0.0
    gap_norm = summary.mean_gap_ms / (idle_time * 1000) if idle_time > 0 else 0.0
    gap_score = clamp01(1 - gap_norm / config.flow_gap_span)
    speed_consistency = clamp01(1 - min(2.0, summary.speed_cv) / 2)
    return clamp01(config.flow_speed_weight * speed_consistency + config.flow_gap_weight * gap_score)


def effective_idle_time(idle_time: float, flow: float, config: GroupingConfig) -> float:
    """Irregular sessions tolerate longer pauses between strokes of one object."""
    return idle_time * (1 + config.idle_stretch * (1 - flow))


def behavior_threshold(base_threshold: float, flow: float, config: GroupingConfig) -> float:
    return clamp01(base_threshold - config.flow_threshold_relief * flow)


def adaptive_threshold(pair: PairScore, bar: float, flow: float, config: GroupingConfig) -> float:
    """Per-pair bar, lowered a little for pairs already close in time and space.

    Never drops below ``config.min_adaptive_threshold``, whatever the base
    threshold.
    """
    affinity = (pair.temporal + pair.spatial) * 0.5
    relaxed = bar - config.affinity_threshold_relief * affinity - config.flow_pair_relief * flow
    return max(config.min_adaptive_threshold, relaxed)


def is_burst(pair: PairScore, tau_ms: float, bar: float, config: GroupingConfig) -> bool:
    window = tau_ms * config.burst_window_scale
    return (
        pair.delta_ms <= window
        and pair.spatial >= config.burst_spatial_min
        and (pair.geometry >= config.burst_geometry_min or pair.spatial >= config.burst_spatial_strong)
        and pair.score >= bar * config.burst_score_ratio
    )


def should_merge(pair: PairScore, tau_ms: float, bar: float, flow: float, config: GroupingConfig) -> bool:
    if pair.score >= adaptive_threshold(pair, bar, flow, config):
        return True
    return is_burst(pair, tau_ms, bar, config)


def build_groups(
    strokes: list[Stroke],
    features: list[StrokeFeatures],
    merges: list[PairScore],
) -> GroupingResult:
    """Union the merged pairs and label each root; featureless strokes become singletons."""
    dsu = DisjointSet(len(features))
    for pair in merges:
        dsu.union(pair.i, pair.j)

    group_to_strokes: dict[str, set[str]] = {}
    stroke_to_group: dict[str, str] = {}
    for idx, feat in enumerate(features):
        group_id = f"group_{dsu.find(idx)}"
        group_to_strokes.setdefault(group_id, set()).add(feat.id)
        stroke_to_group[feat.id] = group_id

    for stroke in strokes:
        if stroke.id not in stroke_to_group:
            group_id = f"group_{stroke.id}"
            # A stroke id like "3" would otherwise collide with root index 3
            while group_id in group_to_strokes:
                group_id += "_"
            stroke_to_group[stroke.id] = group_id
            group_to_strokes[group_id] = {stroke.id}

    logger.debug(
        "Built %d groups from %d strokes (%d merges)",
        len(group_to_strokes),
        len(strokes),
        len(merges),
    )
    return GroupingResult(stroke_to_group=stroke_to_group, group_to_strokes=group_to_strokes)
