"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from inkgroup.config import settings
from inkgroup.engine.store import StrokeStore


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_store() -> StrokeStore:
    """The process-wide canvas session."""
    return StrokeStore()
