"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from inkgroup.engine.context import AffineTransform, BoundingBox, Stroke, StrokePoint
from inkgroup.models.settings import GroupingSettings


class PointIn(BaseModel):
    x: float
    y: float
    t: float = Field(default=0.0, description="ms since the stroke started")


class TransformIn(BaseModel):
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0


class BoundingBoxIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    min_x: float = Field(..., alias="minX")
    min_y: float = Field(..., alias="minY")
    max_x: float = Field(..., alias="maxX")
    max_y: float = Field(..., alias="maxY")
    width: float
    height: float
    center_x: float = Field(..., alias="centerX")
    center_y: float = Field(..., alias="centerY")


class StrokeIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    points: list[PointIn] = Field(default_factory=list)
    color: str = "#000000"
    size: float = Field(default=2.0, ge=0, description="Brush size in pixels")
    transform: TransformIn | None = None
    bounding: BoundingBoxIn | None = None
    layer: int = 1
    started_at: float = Field(default=0.0, alias="startedAt")

    def to_stroke(self) -> Stroke:
        return Stroke(
            id=self.id,
            points=tuple(StrokePoint(p.x, p.y, p.t) for p in self.points),
            color=self.color,
            size=self.size,
            transform=AffineTransform(**self.transform.model_dump()) if self.transform else None,
            bounding=BoundingBox(**self.bounding.model_dump()) if self.bounding else None,
            layer=self.layer,
            started_at=self.started_at,
        )


class GroupRequest(BaseModel):
    strokes: list[StrokeIn] = Field(default_factory=list)
    settings: GroupingSettings = Field(default_factory=GroupingSettings)


class SnapshotRequest(BaseModel):
    strokes: list[StrokeIn] = Field(default_factory=list)


class LayerRequest(BaseModel):
    layer: int
