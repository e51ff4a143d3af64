"""Canvas session endpoints — a server-side StrokeStore with debounced regrouping."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from inkgroup.dependencies import get_store
from inkgroup.engine.store import StrokeStore
from inkgroup.models.requests import LayerRequest, SnapshotRequest, StrokeIn
from inkgroup.models.responses import CanvasStatusResponse, GroupingResponse, StrokeGroupResponse
from inkgroup.models.settings import GroupingSettings

router = APIRouter(prefix="/canvas", tags=["canvas"])


def _status(store: StrokeStore) -> CanvasStatusResponse:
    return CanvasStatusResponse(
        stroke_count=len(store),
        active_layer=store.active_layer,
        pending=store.scheduler.pending,
        grouping_threshold=store.grouping_settings.grouping_threshold,
        idle_time=store.grouping_settings.idle_time,
    )


@router.get("", response_model=CanvasStatusResponse)
def canvas_status(store: StrokeStore = Depends(get_store)) -> CanvasStatusResponse:
    return _status(store)


@router.post("/strokes", response_model=CanvasStatusResponse, status_code=202)
def add_stroke(stroke: StrokeIn, store: StrokeStore = Depends(get_store)) -> CanvasStatusResponse:
    store.add(stroke.to_stroke())
    return _status(store)


@router.delete("/strokes/{stroke_id}", response_model=CanvasStatusResponse, status_code=202)
def delete_stroke(stroke_id: str, store: StrokeStore = Depends(get_store)) -> CanvasStatusResponse:
    try:
        store.delete(stroke_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=f"Unknown stroke: {stroke_id}") from e
    return _status(store)


@router.put("/snapshot", response_model=GroupingResponse)
def apply_snapshot(request: SnapshotRequest, store: StrokeStore = Depends(get_store)) -> GroupingResponse:
    return GroupingResponse.from_result(store.apply_snapshot(s.to_stroke() for s in request.strokes))


@router.post("/recompute", response_model=GroupingResponse)
def recompute(store: StrokeStore = Depends(get_store)) -> GroupingResponse:
    return GroupingResponse.from_result(store.scheduler.recompute_now())


@router.get("/groups", response_model=GroupingResponse)
def groups(store: StrokeStore = Depends(get_store)) -> GroupingResponse:
    return GroupingResponse.from_result(store.result)


@router.get("/strokes/{stroke_id}/group", response_model=StrokeGroupResponse)
def stroke_group(stroke_id: str, store: StrokeStore = Depends(get_store)) -> StrokeGroupResponse:
    if stroke_id not in store:
        raise HTTPException(status_code=404, detail=f"Unknown stroke: {stroke_id}")
    scheduler = store.scheduler
    return StrokeGroupResponse(
        stroke_id=stroke_id,
        group_id=scheduler.group_id_for_stroke(stroke_id),
        member_ids=scheduler.group_members_for_stroke(stroke_id),
    )


@router.put("/settings", response_model=GroupingResponse)
def update_settings(request: GroupingSettings, store: StrokeStore = Depends(get_store)) -> GroupingResponse:
    return GroupingResponse.from_result(store.set_grouping_settings(request))


@router.put("/layer", response_model=GroupingResponse)
def set_layer(request: LayerRequest, store: StrokeStore = Depends(get_store)) -> GroupingResponse:
    return GroupingResponse.from_result(store.set_active_layer(request.layer))
