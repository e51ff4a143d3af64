"""Grouping settings — validated and clamped before they reach the scorer."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_THRESHOLD = 0.5
DEFAULT_IDLE_TIME = 1.5


class GroupingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    grouping_threshold: float = Field(
        default=DEFAULT_THRESHOLD,
        alias="groupingThreshold",
        description="Base merge threshold in [0, 1]; lower merges more",
    )
    idle_time: float = Field(
        default=DEFAULT_IDLE_TIME,
        alias="idleTime",
        description="Pause (seconds) after which strokes stop reading as one gesture",
    )

    @field_validator("grouping_threshold")
    @classmethod
    def _clamp_threshold(cls, value: float) -> float:
        if math.isnan(value):
            return DEFAULT_THRESHOLD
        return min(1.0, max(0.0, value))

    @field_validator("idle_time")
    @classmethod
    def _positive_idle_time(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            return DEFAULT_IDLE_TIME
        return value
