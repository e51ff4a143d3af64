"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from inkgroup.engine.context import GroupingResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    factors_registered: int = 0


class GroupOut(BaseModel):
    id: str
    stable_id: str
    stroke_ids: list[str]


class GroupingResponse(BaseModel):
    stroke_to_group: dict[str, str] = Field(default_factory=dict)
    groups: list[GroupOut] = Field(default_factory=list)
    processing_time_ms: float = 0.0

    @classmethod
    def from_result(cls, result: GroupingResult, processing_time_ms: float = 0.0) -> GroupingResponse:
        stable = result.stable_ids()
        groups = [
            GroupOut(id=gid, stable_id=stable[gid], stroke_ids=result.members_of(gid))
            for gid in sorted(result.group_to_strokes, key=lambda g: stable[g])
        ]
        return cls(
            stroke_to_group=dict(result.stroke_to_group),
            groups=groups,
            processing_time_ms=round(processing_time_ms, 2),
        )


class StrokeGroupResponse(BaseModel):
    stroke_id: str
    group_id: str | None = None
    member_ids: list[str] = Field(default_factory=list)


class CanvasStatusResponse(BaseModel):
    stroke_count: int = 0
    active_layer: int = 1
    pending: bool = False
    grouping_threshold: float = 0.5
    idle_time: float = 1.5
