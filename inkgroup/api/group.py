"""POST /api/group — stateless grouping of a stroke list."""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException

from inkgroup.engine.pipeline import DuplicateStrokeError, create_pipeline
from inkgroup.models.requests import GroupRequest
from inkgroup.models.responses import GroupingResponse

router = APIRouter()


@router.post("/group", response_model=GroupingResponse)
def group_strokes(request: GroupRequest) -> GroupingResponse:
    start = time.perf_counter()
    strokes = [s.to_stroke() for s in request.strokes]
    try:
        result = create_pipeline().run(strokes, request.settings)
    except DuplicateStrokeError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000
    return GroupingResponse.from_result(result, elapsed)
