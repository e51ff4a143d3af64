"""Per-stroke feature extraction.

Points are mapped to world space through the stroke's affine transform
before any geometry. Duration and box dimensions are floored at 1 so that
later stages can divide by them.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from inkgroup.engine.config import GroupingConfig
from inkgroup.engine.context import BoundingBox, Stroke, StrokeFeatures
from inkgroup.utils.geometry import apply_affine, bbox, distance, path_length


def world_points(stroke: Stroke) -> NDArray[np.float64]:
    """Nx2 world-space coordinates of the stroke's points."""
    pts = np.array([(p.x, p.y) for p in stroke.points], dtype=np.float64).reshape(-1, 2)
    t = stroke.transform
    if t is None or t.is_identity:
        return pts
    return apply_affine(pts, *t.as_tuple())


def compute_bounding_box(stroke: Stroke, points: NDArray[np.float64] | None = None) -> BoundingBox | None:
    """World-space bounds padded by half the (scaled) brush size."""
    if not stroke.points:
        return None
    if points is None:
        points = world_points(stroke)
    x0, y0, x1, y1 = bbox(points)
    scale = max(1.0, stroke.transform.max_scale) if stroke.transform is not None else 1.0
    pad = stroke.size * scale / 2
    return BoundingBox(
        min_x=x0 - pad,
        min_y=y0 - pad,
        max_x=x1 + pad,
        max_y=y1 + pad,
        width=(x1 - x0) + 2 * pad,
        height=(y1 - y0) + 2 * pad,
        center_x=(x0 + x1) / 2,
        center_y=(y0 + y1) / 2,
    )


def extract_features(stroke: Stroke, config: GroupingConfig | None = None) -> StrokeFeatures | None:
    """Derive the feature vector for one stroke. None when it has no points."""
    if not stroke.points:
        return None
    config = config or GroupingConfig()

    points = world_points(stroke)
    start = (float(points[0, 0]), float(points[0, 1]))
    end = (float(points[-1, 0]), float(points[-1, 1]))
    start_time = stroke.started_at + stroke.points[0].t
    end_time = stroke.started_at + stroke.points[-1].t
    duration = max(1.0, end_time - start_time)
    length = path_length(points)

    bounds = stroke.bounding or compute_bounding_box(stroke, points)
    width = max(1.0, bounds.width)
    height = max(1.0, bounds.height)
    size = max(1.0, float(np.hypot(width, height)))

    closed_loop = distance(start, end) <= max(config.min_closed_loop_distance, stroke.size * 2)

    return StrokeFeatures(
        id=stroke.id,
        start=start,
        end=end,
        start_time=start_time,
        end_time=end_time,
        duration=duration,
        center=(bounds.center_x, bounds.center_y),
        width=width,
        height=height,
        size=size,
        length=length,
        speed=length / duration,
        brush_size=stroke.size,
        closed_loop=closed_loop,
    )
