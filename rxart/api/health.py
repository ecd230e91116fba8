"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from rxart import __version__
from rxart.engine.composition import STRUCTURAL_MOTIFS
from rxart.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        subspecialties=len(STRUCTURAL_MOTIFS),
    )
