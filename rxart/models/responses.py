"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    subspecialties: int = 0


class AnalysisSummary(BaseModel):
    body_parts: list[str] = Field(default_factory=list)
    conditions: list[str] = Field(default_factory=list)
    treatment_context: str = "general"
    emotional_tone: str = "neutral"
    subspecialty: str = "general"
    complexity_level: int = 1
    question_length: int = 0
    medical_term_count: int = 0
    time_context: str = "none"


class SeedSummary(BaseModel):
    value: float
    hash: str
    variations: dict[str, float] = Field(default_factory=dict)


class PaletteSummary(BaseModel):
    primary: str
    secondary: str
    accent: str
    background: str
    gradient_stops: list[str] = Field(default_factory=list)


class RaritySummary(BaseModel):
    id: str
    tier: str
    verification_hash: str


class ArtworkResponse(BaseModel):
    analysis: AnalysisSummary
    seed: SeedSummary
    palette: PaletteSummary
    rarity: RaritySummary
    metadata: dict[str, Any] = Field(default_factory=dict)
    svg: str
    element_count: int = 0
    processing_time_ms: float = 0.0
    cached: bool = False
