"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

Bounds = tuple[float, float, float, float]


def clamp01(value: float) -> float:
    """Clamp to [0, 1]."""
    if value <= 0:
        return 0.0
    if value >= 1:
        return 1.0
    return float(value)


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def apply_affine(
    points: NDArray[np.float64],
    a: float,
    b: float,
    c: float,
    d: float,
    e: float,
    f: float,
) -> NDArray[np.float64]:
    """Apply the 2D affine (a, b, c, d, e, f) to an Nx2 array.

    x' = a*x + c*y + e, y' = b*x + d*y + f (canvas matrix convention).
    """
    x = points[:, 0]
    y = points[:, 1]
    return np.column_stack((a * x + c * y + e, b * x + d * y + f))


def path_length(points: NDArray[np.float64]) -> float:
    """Sum of consecutive point distances."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))


def bbox(points: NDArray[np.float64]) -> Bounds:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_overlaps(a: Bounds, b: Bounds) -> bool:
    """Strict overlap: boxes that only touch along an edge do not count."""
    overlap_x = min(a[2], b[2]) - max(a[0], b[0])
    overlap_y = min(a[3], b[3]) - max(a[1], b[1])
    return overlap_x > 0 and overlap_y > 0


def bbox_overlap_area(a: Bounds, b: Bounds) -> float:
    """Compute overlap area of two bboxes."""
    x_overlap = max(0.0, min(a[2], b[2]) - max(a[0], b[0]))
    y_overlap = max(0.0, min(a[3], b[3]) - max(a[1], b[1]))
    return x_overlap * y_overlap
