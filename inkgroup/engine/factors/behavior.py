"""Drawing-behavior similarity (speed and path length)."""

from __future__ import annotations

from inkgroup.engine.context import GroupingContext, StrokeFeatures
from inkgroup.engine.registry import Factor, factor
from inkgroup.utils.geometry import clamp01

_SPEED_EPS = 1e-3
_LENGTH_EPS = 1.0


def _similarity(va: float, vb: float, eps: float, tolerance: float) -> float:
    largest = max(va, vb, eps)
    return 1.0 - clamp01(abs(va - vb) / (largest * tolerance))


@factor(id=Factor.BEHAVIOR, description="Mean of speed and length similarity")
def behavior_score(a: StrokeFeatures, b: StrokeFeatures, ctx: GroupingContext) -> float:
    cfg = ctx.config
    speed_sim = _similarity(a.speed, b.speed, _SPEED_EPS, cfg.speed_tolerance)
    length_sim = _similarity(a.length, b.length, _LENGTH_EPS, cfg.length_tolerance)
    return (speed_sim + length_sim) * 0.5
