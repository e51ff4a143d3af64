"""Shared test fixtures and stroke builders."""

from __future__ import annotations

import math

import pytest

from inkgroup.engine.context import Stroke, StrokeFeatures, StrokePoint

# Brush size used by the scenario strokes
BRUSH = 4.0


def loop_stroke(
    stroke_id: str,
    cx: float,
    cy: float,
    radius: float,
    start_ms: float,
    end_ms: float,
    size: float = BRUSH,
    samples: int = 40,
    layer: int = 1,
) -> Stroke:
    """A closed circle drawn at constant speed. ``samples`` divisible by 4 keeps the bbox exact."""
    duration = end_ms - start_ms
    points = tuple(
        StrokePoint(
            x=cx + radius * math.cos(2 * math.pi * k / samples),
            y=cy + radius * math.sin(2 * math.pi * k / samples),
            t=duration * k / samples,
        )
        for k in range(samples + 1)
    )
    return Stroke(id=stroke_id, points=points, size=size, layer=layer, started_at=start_ms)


def line_stroke(
    stroke_id: str,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    start_ms: float,
    end_ms: float,
    size: float = BRUSH,
    samples: int = 10,
    layer: int = 1,
) -> Stroke:
    duration = end_ms - start_ms
    points = tuple(
        StrokePoint(
            x=x0 + (x1 - x0) * k / samples,
            y=y0 + (y1 - y0) * k / samples,
            t=duration * k / samples,
        )
        for k in range(samples + 1)
    )
    return Stroke(id=stroke_id, points=points, size=size, layer=layer, started_at=start_ms)


def empty_stroke(stroke_id: str, layer: int = 1) -> Stroke:
    return Stroke(id=stroke_id, points=(), layer=layer)


def make_features(
    stroke_id: str = "s",
    center: tuple[float, float] = (0.0, 0.0),
    width: float = 10.0,
    height: float = 10.0,
    start_time: float = 0.0,
    end_time: float = 100.0,
    start: tuple[float, float] | None = None,
    end: tuple[float, float] | None = None,
    length: float = 50.0,
    brush_size: float = BRUSH,
    closed_loop: bool = False,
) -> StrokeFeatures:
    duration = max(1.0, end_time - start_time)
    return StrokeFeatures(
        id=stroke_id,
        start=start if start is not None else (center[0] - width / 2, center[1]),
        end=end if end is not None else (center[0] + width / 2, center[1]),
        start_time=start_time,
        end_time=end_time,
        duration=duration,
        center=center,
        width=width,
        height=height,
        size=math.hypot(width, height),
        length=length,
        speed=length / duration,
        brush_size=brush_size,
        closed_loop=closed_loop,
    )


def scenario_strokes() -> list[Stroke]:
    """Body loop A, a dot B inside it drawn right after, and a distant later loop C."""
    return [
        loop_stroke("A", 50, 50, 50, 0, 500),
        loop_stroke("B", 50, 50, 5, 600, 650),
        loop_stroke("C", 450, 50, 50, 5000, 5500),
    ]


def mixed_strokes() -> list[Stroke]:
    """A varied sketch: a face with eyes, a separate tree, a stray scribble and an empty stroke."""
    return [
        loop_stroke("face", 200, 200, 80, 0, 900),
        loop_stroke("eye_l", 170, 180, 8, 1200, 1300),
        loop_stroke("eye_r", 230, 180, 8, 1500, 1600),
        line_stroke("mouth", 170, 240, 230, 240, 1900, 2200),
        line_stroke("trunk", 600, 500, 600, 380, 6000, 6400),
        loop_stroke("crown", 600, 330, 60, 6600, 7400),
        line_stroke("scribble", 50, 550, 120, 520, 15000, 15100),
        empty_stroke("blank"),
        line_stroke("grass", 520, 520, 700, 520, 8000, 8500),
    ]


@pytest.fixture
def scenario() -> list[Stroke]:
    return scenario_strokes()


@pytest.fixture
def mixed() -> list[Stroke]:
    return mixed_strokes()
