"""Pairwise affinity scoring.

Every registered factor is evaluated for the pair, then combined:

1. A strong temporal or geometric signal alone forces a near-certain score.
2. A pair weak on temporal, spatial and geometry at once scores 0.
3. Otherwise the weighted sum of all factors.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from inkgroup.engine.config import GroupingConfig
from inkgroup.engine.context import GroupingContext, StrokeFeatures
from inkgroup.engine.factors.temporal import temporal_delta_ms
from inkgroup.engine.registry import Factor, FactorRegistry, get_registry


@dataclass(frozen=True)
class PairScore:
    i: int
    j: int
    score: float
    delta_ms: float
    factors: dict[Factor, float] = field(default_factory=dict)

    @property
    def temporal(self) -> float:
        return self.factors.get(Factor.TEMPORAL, 0.0)

    @property
    def spatial(self) -> float:
        return self.factors.get(Factor.SPATIAL, 0.0)

    @property
    def geometry(self) -> float:
        return self.factors.get(Factor.GEOMETRY, 0.0)

    @property
    def behavior(self) -> float:
        return self.factors.get(Factor.BEHAVIOR, 0.0)


def weighted_sum(factors: dict[Factor, float], config: GroupingConfig) -> float:
    w = config.weights
    return (
        w.temporal * factors.get(Factor.TEMPORAL, 0.0)
        + w.spatial * factors.get(Factor.SPATIAL, 0.0)
        + w.geometry * factors.get(Factor.GEOMETRY, 0.0)
        + w.behavior * factors.get(Factor.BEHAVIOR, 0.0)
    )


def combine(factors: dict[Factor, float], config: GroupingConfig) -> float:
    t = factors.get(Factor.TEMPORAL, 0.0)
    s = factors.get(Factor.SPATIAL, 0.0)
    g = factors.get(Factor.GEOMETRY, 0.0)

    if max(t, g) >= config.high_confidence_threshold:
        return max(config.high_confidence_score, weighted_sum(factors, config))

    if t < config.temporal_gate and s < config.spatial_gate and g < config.geometry_gate:
        return 0.0

    return weighted_sum(factors, config)


def score_pair(
    a: StrokeFeatures,
    b: StrokeFeatures,
    ctx: GroupingContext,
    registry: FactorRegistry | None = None,
    *,
    i: int = 0,
    j: int = 1,
) -> PairScore:
    registry = registry or get_registry()
    factors = {spec.id: spec.fn(a, b, ctx) for spec in registry.all()}
    return PairScore(
        i=i,
        j=j,
        score=combine(factors, ctx.config),
        delta_ms=temporal_delta_ms(a, b),
        factors=factors,
    )


def score_all_pairs(ctx: GroupingContext, registry: FactorRegistry | None = None) -> list[PairScore]:
    """Score every unordered pair (i < j) of ctx.features. O(n^2)."""
    registry = registry or get_registry()
    feats = ctx.features
    n = len(feats)
    return [
        score_pair(feats[i], feats[j], ctx, registry, i=i, j=j)
        for i in range(n)
        for j in range(i + 1, n)
    ]
