"""Temporal proximity.

Strokes drawn back to back score near 1; the score decays faster than
linearly once the gap passes the idle window tau.
"""

from __future__ import annotations

import math

from inkgroup.engine.context import GroupingContext, StrokeFeatures
from inkgroup.engine.registry import Factor, factor


def temporal_delta_ms(a: StrokeFeatures, b: StrokeFeatures) -> float:
    """Smallest of the four start/end cross gaps."""
    return min(
        abs(a.start_time - b.start_time),
        abs(a.end_time - b.end_time),
        abs(a.end_time - b.start_time),
        abs(b.end_time - a.start_time),
    )


@factor(id=Factor.TEMPORAL, description="Exponential decay of the closest start/end time gap")
def temporal_score(a: StrokeFeatures, b: StrokeFeatures, ctx: GroupingContext) -> float:
    delta = temporal_delta_ms(a, b)
    return math.exp(-((delta / ctx.tau_ms) ** ctx.config.temporal_exponent))
