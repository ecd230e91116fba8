"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from rxart.config import settings
from rxart.engine.cache import ArtworkCache
from rxart.engine.config import EngineConfig
from rxart.engine.pipeline import Pipeline, create_pipeline


@lru_cache(maxsize=1)
def get_pipeline() -> Pipeline:
    """Process-wide pipeline sharing one bounded render cache."""
    config = EngineConfig(default_size=settings.default_canvas_size)
    return create_pipeline(config=config, cache=ArtworkCache(maxsize=settings.cache_size))
