"""Factor registry — every affinity factor is a standalone function registered via decorator.

Usage:
    @factor(id=Factor.SPATIAL, description="Centroid distance within adaptive range")
    def spatial_score(a: StrokeFeatures, b: StrokeFeatures, ctx: GroupingContext) -> float:
        return 1 - clamp01(distance(a.center, b.center) / spatial_range(a, b, ctx.config))

Adding a factor = creating one module with the decorator and giving it a weight
in GroupingConfig. The scorer evaluates every registered factor per pair.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from inkgroup.engine.context import GroupingContext, StrokeFeatures

logger = logging.getLogger(__name__)

FactorFn = Callable[["StrokeFeatures", "StrokeFeatures", "GroupingContext"], float]


class Factor(str, enum.Enum):
    TEMPORAL = "temporal"
    SPATIAL = "spatial"
    GEOMETRY = "geometry"
    BEHAVIOR = "behavior"


@dataclass
class FactorSpec:
    id: Factor
    fn: FactorFn
    description: str = ""


class FactorRegistry:
    """Registry of pairwise affinity factors."""

    def __init__(self) -> None:
        self._factors: dict[Factor, FactorSpec] = {}

    def register(self, spec: FactorSpec) -> None:
        if spec.id in self._factors:
            raise ValueError(f"Duplicate factor ID: {spec.id.value}")
        self._factors[spec.id] = spec
        logger.debug("Registered factor %s", spec.id.value)

    def get(self, factor_id: Factor) -> FactorSpec:
        return self._factors[factor_id]

    def all(self) -> list[FactorSpec]:
        order = list(Factor)
        return sorted(self._factors.values(), key=lambda s: order.index(s.id))

    def __contains__(self, factor_id: Factor) -> bool:
        return factor_id in self._factors

    @property
    def count(self) -> int:
        return len(self._factors)


# Module-level singleton
_registry = FactorRegistry()


def get_registry() -> FactorRegistry:
    """The default registry, with the built-in factors loaded."""
    import inkgroup.engine.factors  # noqa: F401  (registers on import)

    return _registry


def factor(*, id: Factor, description: str = ""):
    """Decorator to register a factor function."""

    def decorator(fn: FactorFn) -> FactorFn:
        _registry.register(FactorSpec(id=id, fn=fn, description=description))
        return fn

    return decorator
