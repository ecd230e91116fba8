"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from rxart.config import settings


class ArtworkRequest(BaseModel):
    question: str = Field(default="", description="Free-text medical question")
    confidence: float = Field(
        default=settings.default_confidence,
        ge=0.0,
        le=1.0,
        description="Upstream consultation confidence",
    )
    size: float = Field(
        default=settings.default_canvas_size,
        ge=16,
        le=4096,
        description="Canvas edge length in pixels",
    )
    salt: str = Field(default="", description="Appended to the text before hashing")
    theme: Literal["bone", "muscle", "joint", "general"] | None = Field(
        default=None,
        description="Theme used when no question is given",
    )
    adapt_to_time_context: bool = Field(
        default=False,
        description="Saturate acute / mute chronic palettes",
    )
