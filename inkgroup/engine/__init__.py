"""Stroke grouping engine."""

from inkgroup.engine.context import (
    AffineTransform,
    BoundingBox,
    GroupingResult,
    Stroke,
    StrokeFeatures,
    StrokePoint,
)
from inkgroup.engine.pipeline import DuplicateStrokeError, GroupingPipeline, recompute
from inkgroup.engine.registry import Factor, factor, get_registry
from inkgroup.engine.scheduler import RecomputeScheduler
from inkgroup.engine.store import StrokeStore
from inkgroup.models.settings import GroupingSettings

__all__ = [
    "AffineTransform",
    "BoundingBox",
    "DuplicateStrokeError",
    "Factor",
    "GroupingPipeline",
    "GroupingResult",
    "GroupingSettings",
    "RecomputeScheduler",
    "Stroke",
    "StrokeFeatures",
    "StrokePoint",
    "StrokeStore",
    "factor",
    "get_registry",
    "recompute",
]
