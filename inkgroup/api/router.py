"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from inkgroup.api import canvas, group, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(group.router)
api_router.include_router(canvas.router)
