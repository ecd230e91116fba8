"""POST /api/artwork — question text to artwork, metadata and SVG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from rxart.dependencies import get_pipeline
from rxart.engine.classifier import ordered_body_parts, ordered_conditions
from rxart.engine.context import ArtworkResult
from rxart.engine.metadata import SUBSPECIALTY_DISPLAY, build_metadata, question_excerpt
from rxart.engine.pipeline import Pipeline
from rxart.models.requests import ArtworkRequest
from rxart.models.responses import (
    AnalysisSummary,
    ArtworkResponse,
    PaletteSummary,
    RaritySummary,
    SeedSummary,
)
from rxart.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

router = APIRouter()


def render_svg(result: ArtworkResult) -> str:
    return serialize_svg(
        result.composition,
        result.palette,
        result.seed,
        result.size,
        title=f"{SUBSPECIALTY_DISPLAY[result.analysis.subspecialty]} artwork",
        description=question_excerpt(result.question),
    )


def result_to_response(
    result: ArtworkResult,
    pipeline: Pipeline,
    elapsed_ms: float = 0.0,
    cached: bool = False,
) -> ArtworkResponse:
    analysis = result.analysis
    variations = result.seed.variations
    return ArtworkResponse(
        analysis=AnalysisSummary(
            body_parts=ordered_body_parts(analysis),
            conditions=ordered_conditions(analysis),
            treatment_context=analysis.treatment_context.value,
            emotional_tone=analysis.emotional_tone.value,
            subspecialty=analysis.subspecialty.value,
            complexity_level=analysis.complexity_level,
            question_length=analysis.question_length,
            medical_term_count=analysis.medical_term_count,
            time_context=analysis.time_context.value,
        ),
        seed=SeedSummary(
            value=result.seed.value,
            hash=result.seed.hash,
            variations={
                "position": variations.position,
                "rotation": variations.rotation,
                "scale": variations.scale,
                "density": variations.density,
                "complexity": variations.complexity,
            },
        ),
        palette=PaletteSummary(
            primary=result.palette.primary,
            secondary=result.palette.secondary,
            accent=result.palette.accent,
            background=result.palette.background,
            gradient_stops=list(result.palette.gradient_stops),
        ),
        rarity=RaritySummary(
            id=result.rarity.id,
            tier=result.rarity.tier.label,
            verification_hash=result.rarity.verification_hash,
        ),
        metadata=build_metadata(result, pipeline.config),
        svg=render_svg(result),
        element_count=result.composition.element_count,
        processing_time_ms=round(elapsed_ms, 1),
        cached=cached,
    )


def _run(req: ArtworkRequest, pipeline: Pipeline) -> tuple[ArtworkResult, bool]:
    try:
        result, cached = pipeline.run_with_status(
            req.question,
            req.confidence,
            size=req.size,
            salt=req.salt,
            theme=req.theme,
            adapt_to_time_context=req.adapt_to_time_context,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return result, cached


@router.post("/artwork", response_model=ArtworkResponse)
def artwork(req: ArtworkRequest, pipeline: Pipeline = Depends(get_pipeline)) -> ArtworkResponse:
    start = time.perf_counter()
    result, cached = _run(req, pipeline)
    elapsed = (time.perf_counter() - start) * 1000
    logger.debug("POST /artwork %s in %.1fms (cached=%s)", result.rarity.id, elapsed, cached)
    return result_to_response(result, pipeline, elapsed, cached)


@router.post("/artwork/svg")
def artwork_svg(req: ArtworkRequest, pipeline: Pipeline = Depends(get_pipeline)) -> Response:
    result, _ = _run(req, pipeline)
    return Response(content=render_svg(result), media_type="image/svg+xml")
