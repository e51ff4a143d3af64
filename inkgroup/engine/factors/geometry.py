"""Geometric relationship between two strokes.

Takes the strongest of four cues: bounding-box overlap, touching endpoints,
a closed loop centred on the other stroke, and enclosure (spots in a body,
eyes in a face).
"""

from __future__ import annotations

from inkgroup.engine.config import GroupingConfig
from inkgroup.engine.context import GroupingContext, StrokeFeatures
from inkgroup.engine.registry import Factor, factor
from inkgroup.utils.geometry import bbox_overlap_area, bbox_overlaps, clamp01, distance


def endpoint_threshold(a: StrokeFeatures, b: StrokeFeatures, config: GroupingConfig) -> float:
    return max(
        config.min_endpoint_threshold,
        (a.brush_size + b.brush_size) * config.endpoint_threshold_scale,
    )


def endpoints_near(a: StrokeFeatures, b: StrokeFeatures, config: GroupingConfig) -> bool:
    limit = endpoint_threshold(a, b, config)
    return any(
        distance(pa, pb) <= limit
        for pa in (a.start, a.end)
        for pb in (b.start, b.end)
    )


def loop_centers_other(loop: StrokeFeatures, other: StrokeFeatures, config: GroupingConfig) -> bool:
    if not loop.closed_loop:
        return False
    reach = max(loop.width, loop.height) * config.closed_loop_center_scale
    return distance(loop.center, other.center) <= reach


def outer_size_factor(outer_area: float, config: GroupingConfig) -> float:
    """Attenuate enclosure as the outer box grows past the soft cap."""
    cap = config.enclosure_outer_area_soft_cap
    size_score = (1 / (1 + outer_area / cap)) ** 1.5
    small_boost = clamp01(1 - outer_area / (cap * 0.5))
    penalty = clamp01(1 - outer_area / (cap * 2))
    return size_score * (0.6 + 0.4 * small_boost) * (0.5 + 0.5 * penalty)


def enclosure_score(outer: StrokeFeatures, inner: StrokeFeatures, config: GroupingConfig) -> float:
    """How strongly ``inner`` reads as a detail inside ``outer``.

    Zero unless most of inner's box lies within outer's box. Peaks when inner
    is roughly a fifth of outer's area. Capped below 1 so enclosure alone
    never forces a merge.
    """
    inner_area = inner.area
    outer_area = outer.area
    portion = bbox_overlap_area(outer.bounds, inner.bounds) / inner_area
    if portion < config.enclosure_portion_threshold:
        return 0.0

    ratio = inner_area / outer_area
    ratio_score = clamp01(
        1 - abs(ratio - config.enclosure_ratio_target) / config.enclosure_ratio_range
    )
    raw = portion * ratio_score * outer_size_factor(outer_area, config)
    return clamp01(raw) * config.enclosure_max_score


@factor(id=Factor.GEOMETRY, description="Overlap, endpoint contact, loop centring and enclosure")
def geometry_score(a: StrokeFeatures, b: StrokeFeatures, ctx: GroupingContext) -> float:
    cfg = ctx.config
    score = 0.0
    if bbox_overlaps(a.bounds, b.bounds):
        score = max(score, cfg.overlap_score)
    if endpoints_near(a, b, cfg):
        score = max(score, cfg.endpoint_score)
    if loop_centers_other(a, b, cfg) or loop_centers_other(b, a, cfg):
        score = max(score, cfg.closed_loop_score)
    return max(score, enclosure_score(a, b, cfg), enclosure_score(b, a, cfg))
