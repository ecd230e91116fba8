"""Companion metadata panel — display strings derived from a pipeline result."""

from __future__ import annotations

from typing import Any

from rxart.engine.classifier import ordered_body_parts, ordered_conditions
from rxart.engine.config import EngineConfig
from rxart.engine.context import ArtworkResult, EmotionalTone, Subspecialty
from rxart.engine.palette import describe_palette

EXCERPT_LENGTH = 80

TONE_DISPLAY: dict[EmotionalTone, str] = {
    EmotionalTone.HOPE: "Hope & Recovery",
    EmotionalTone.CONCERN: "Concern & Urgency",
    EmotionalTone.CONFIDENCE: "Confidence & Strength",
    EmotionalTone.FRUSTRATION: "Frustration & Challenge",
    EmotionalTone.UNCERTAINTY: "Uncertainty & Inquiry",
    EmotionalTone.NEUTRAL: "Neutral & Balanced",
}

SUBSPECIALTY_DISPLAY: dict[Subspecialty, str] = {
    Subspecialty.SPORTS_MEDICINE: "Sports Medicine",
    Subspecialty.JOINT_REPLACEMENT: "Joint Replacement",
    Subspecialty.TRAUMA: "Trauma & Emergency",
    Subspecialty.SPINE: "Spine & Back",
    Subspecialty.HAND_FOOT: "Hand & Foot",
    Subspecialty.GENERAL: "General Orthopedics",
}


def generation_id(seed_hash: str) -> str:
    return f"0x{seed_hash[:8]}"


def question_excerpt(question: str, length: int = EXCERPT_LENGTH) -> str:
    return question if len(question) <= length else question[:length] + "..."


def build_metadata(result: ArtworkResult, config: EngineConfig | None = None) -> dict[str, Any]:
    config = config or EngineConfig()
    analysis = result.analysis
    tier = result.rarity.tier
    return {
        "generation_id": generation_id(result.seed.hash),
        "medical_focus": SUBSPECIALTY_DISPLAY[analysis.subspecialty],
        "emotional_tone": TONE_DISPLAY[analysis.emotional_tone],
        "complexity": f"{analysis.complexity_level}/10",
        "palette_description": describe_palette(result.palette),
        "swatches": list(result.palette.gradient_stops),
        "body_parts": ordered_body_parts(analysis),
        "conditions": ordered_conditions(analysis),
        "question_excerpt": question_excerpt(result.question),
        "seed_value": f"{result.seed.value:.6f}",
        "medical_terms": analysis.medical_term_count,
        "algorithm": config.algorithm_label,
        "rarity": tier.label,
        "badge": tier.label.upper().replace("-", " "),
        "watermark": tier.watermark,
        "verification_code": result.rarity.verification_hash,
    }
