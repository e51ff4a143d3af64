"""Engine data model.

Caller-owned input → Stroke (read-only to the engine)
Per-stroke derived state → StrokeFeatures
Per-call shared state → GroupingContext
Output → GroupingResult
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from inkgroup.engine.config import GroupingConfig


@dataclass(frozen=True)
class StrokePoint:
    x: float
    y: float
    # Milliseconds, relative to Stroke.started_at
    t: float = 0.0


@dataclass(frozen=True)
class AffineTransform:
    """Canvas-style 2D affine: x' = a*x + c*y + e, y' = b*x + d*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @property
    def is_identity(self) -> bool:
        return (self.a, self.b, self.c, self.d, self.e, self.f) == (1, 0, 0, 1, 0, 0)

    @property
    def max_scale(self) -> float:
        return max((self.a**2 + self.b**2) ** 0.5, (self.c**2 + self.d**2) ** 0.5)

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)


IDENTITY = AffineTransform()


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float
    center_x: float
    center_y: float


@dataclass(frozen=True)
class Stroke:
    """One continuous pen gesture."""

    id: str
    points: tuple[StrokePoint, ...] = ()
    color: str = "#000000"
    # Brush size in pixels
    size: float = 2.0
    transform: AffineTransform | None = None
    # Cached world-space bounds; computed from points when absent
    bounding: BoundingBox | None = None
    layer: int = 1
    # Offset of this stroke on the session timeline (ms)
    started_at: float = 0.0


@dataclass(frozen=True)
class StrokeFeatures:
    id: str
    start: tuple[float, float]
    end: tuple[float, float]
    start_time: float
    end_time: float
    duration: float
    center: tuple[float, float]
    width: float
    height: float
    size: float
    length: float
    speed: float
    brush_size: float
    closed_loop: bool

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            self.center[0] - half_w,
            self.center[1] - half_h,
            self.center[0] + half_w,
            self.center[1] + half_h,
        )

    @property
    def area(self) -> float:
        return max(1.0, self.width * self.height)


@dataclass(frozen=True)
class BehaviorSummary:
    """Session-wide drawing statistics over all featured strokes."""

    mean_speed: float = 0.0
    speed_cv: float = 0.0
    mean_gap_ms: float = 0.0


@dataclass
class GroupingContext:
    """Shared state for one recompute. Rebuilt from scratch on every call."""

    features: list[StrokeFeatures] = field(default_factory=list)
    config: GroupingConfig = field(default_factory=GroupingConfig)
    # Effective values after behavior adjustment
    idle_time: float = 1.5
    behavior_threshold: float = 0.5
    behavior_flow: float = 0.0

    @property
    def tau_ms(self) -> float:
        return max(self.config.min_temporal_tau_ms, self.idle_time * 1000)

    @property
    def num_features(self) -> int:
        return len(self.features)


@dataclass(frozen=True)
class GroupingResult:
    """Partition of the input stroke ids. Group ids are not stable across calls."""

    stroke_to_group: Mapping[str, str] = field(default_factory=dict)
    group_to_strokes: Mapping[str, frozenset[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stroke_to_group", MappingProxyType(dict(self.stroke_to_group)))
        object.__setattr__(
            self,
            "group_to_strokes",
            MappingProxyType({gid: frozenset(ids) for gid, ids in self.group_to_strokes.items()}),
        )

    @property
    def num_groups(self) -> int:
        return len(self.group_to_strokes)

    def group_of(self, stroke_id: str) -> str | None:
        return self.stroke_to_group.get(stroke_id)

    def members_of(self, group_id: str) -> list[str]:
        return sorted(self.group_to_strokes.get(group_id, ()))

    def members_for_stroke(self, stroke_id: str) -> list[str]:
        """Members of the stroke's group; an unknown stroke is its own group."""
        group_id = self.stroke_to_group.get(stroke_id)
        if group_id is None:
            return [stroke_id]
        return self.members_of(group_id)

    def stable_ids(self) -> dict[str, str]:
        """Raw group id → smallest member stroke id (stable across recomputes)."""
        return {gid: min(ids) for gid, ids in self.group_to_strokes.items()}

    def partition(self) -> set[frozenset[str]]:
        """Group membership without labels, for comparing two results."""
        return set(self.group_to_strokes.values())


EMPTY_RESULT = GroupingResult()
