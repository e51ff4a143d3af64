"""Grouping configuration — tuning constants for the affinity model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FactorWeights:
    temporal: float = 0.4
    spatial: float = 0.35
    geometry: float = 0.2
    behavior: float = 0.05


@dataclass(frozen=True)
class GroupingConfig:
    """Constants shared by feature extraction, scoring and clustering."""

    weights: FactorWeights = field(default_factory=FactorWeights)

    # Behavior similarity. Larger tolerances let slow/variable strokes match.
    speed_tolerance: float = 2.0
    length_tolerance: float = 1.5

    # Temporal decay
    min_temporal_tau_ms: float = 1000.0
    temporal_exponent: float = 1.35

    # Spatial acceptance radius
    min_spatial_range: float = 40.0
    spatial_range_scale: float = 0.5
    brush_range_scale: float = 2.0

    # Closed loops
    min_closed_loop_distance: float = 10.0
    closed_loop_center_scale: float = 0.6

    # Endpoint proximity
    endpoint_threshold_scale: float = 1.5
    min_endpoint_threshold: float = 10.0

    # Geometry relationship scores
    overlap_score: float = 0.6
    endpoint_score: float = 0.9
    closed_loop_score: float = 0.7

    # Enclosure (spots-in-body, eyes-in-face)
    enclosure_portion_threshold: float = 0.6
    enclosure_ratio_target: float = 0.2
    enclosure_ratio_range: float = 0.25
    enclosure_outer_area_soft_cap: float = 60000.0
    enclosure_max_score: float = 0.85

    # Pair-score decision
    high_confidence_threshold: float = 0.85
    high_confidence_score: float = 0.95
    temporal_gate: float = 0.2
    spatial_gate: float = 0.4
    geometry_gate: float = 0.6

    # Adaptive threshold (behavior flow)
    flow_speed_weight: float = 0.6
    flow_gap_weight: float = 0.4
    flow_gap_span: float = 1.5
    idle_stretch: float = 0.75
    flow_threshold_relief: float = 0.05
    affinity_threshold_relief: float = 0.1
    flow_pair_relief: float = 0.04
    min_adaptive_threshold: float = 0.3

    # Burst exception: rapid consecutive strokes of one gesture
    burst_window_scale: float = 1.1
    burst_spatial_min: float = 0.6
    burst_geometry_min: float = 0.5
    burst_spatial_strong: float = 0.75
    burst_score_ratio: float = 0.85
