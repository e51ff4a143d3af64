"""Spatial proximity of stroke centers within an adaptive acceptance radius."""

from __future__ import annotations

from inkgroup.engine.config import GroupingConfig
from inkgroup.engine.context import GroupingContext, StrokeFeatures
from inkgroup.engine.registry import Factor, factor
from inkgroup.utils.geometry import clamp01, distance


def spatial_range(a: StrokeFeatures, b: StrokeFeatures, config: GroupingConfig) -> float:
    """Radius grows with both stroke extent and brush thickness."""
    return max(
        config.min_spatial_range,
        (a.size + b.size) * config.spatial_range_scale
        + (a.brush_size + b.brush_size) * config.brush_range_scale,
    )


@factor(id=Factor.SPATIAL, description="Center distance relative to the combined stroke range")
def spatial_score(a: StrokeFeatures, b: StrokeFeatures, ctx: GroupingContext) -> float:
    return 1.0 - clamp01(distance(a.center, b.center) / spatial_range(a, b, ctx.config))
