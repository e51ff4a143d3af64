"""Health check."""

from __future__ import annotations

from fastapi import APIRouter

from inkgroup import __version__
from inkgroup.engine.registry import get_registry
from inkgroup.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        factors_registered=get_registry().count,
    )
