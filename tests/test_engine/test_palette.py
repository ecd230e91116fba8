"""Tests for palette generation."""

from dataclasses import replace

import pytest

from rxart.engine.classifier import classify
from rxart.engine.context import (
    EmotionalTone,
    Subspecialty,
    TextAnalysis,
    TimeContext,
    TreatmentContext,
)
from rxart.engine.palette import (
    MAX_BLEND,
    TONE_PALETTES,
    adjust_for_time_context,
    apply_treatment_context,
    blend_factor,
    blend_stops,
    describe_palette,
    generate_palette,
    is_valid_palette,
    treatment_context_colors,
)
from rxart.utils.colors import blend, parse_hex, rgb_to_hsl
from tests.conftest import ALL_QUESTIONS


def _saturation(color: str) -> float:
    return rgb_to_hsl(*parse_hex(color))[1]


def test_blend_factor_range():
    assert blend_factor(TextAnalysis(complexity_level=1)) == pytest.approx(0.1)
    assert blend_factor(TextAnalysis(complexity_level=5)) == pytest.approx(0.5)
    assert blend_factor(TextAnalysis(complexity_level=10)) == MAX_BLEND
    for level in range(1, 11):
        assert 0.0 <= blend_factor(TextAnalysis(complexity_level=level)) <= MAX_BLEND


def test_palettes_are_valid_hex():
    for text in ALL_QUESTIONS:
        palette = generate_palette(classify(text))
        assert is_valid_palette(palette)
        assert len(palette.gradient_stops) == 3


def test_palette_blends_tone_toward_subspecialty():
    analysis = TextAnalysis(
        emotional_tone=EmotionalTone.NEUTRAL,
        subspecialty=Subspecialty.HAND_FOOT,
        complexity_level=4,
    )
    palette = generate_palette(analysis)
    assert palette.primary == blend("#607D8B", "#E91E63", 0.4)
    assert palette.accent == blend("#CFD8DC", "#F8BBD9", 0.2)
    assert palette.background == blend("#ECEFF1", "#FCE4EC", 0.4 * 0.3)


def test_palette_depends_only_on_analysis():
    analysis = classify("I hope my knee heals")
    assert generate_palette(analysis) == generate_palette(analysis)


def test_blend_stops_reuses_last_target():
    stops = blend_stops(("#000000", "#000000", "#000000"), ("#ffffff",), 1.0)
    assert stops == ("#ffffff", "#ffffff", "#ffffff")


def test_acute_saturates_and_chronic_mutes():
    base = TONE_PALETTES[EmotionalTone.HOPE]
    acute = adjust_for_time_context(base, TimeContext.ACUTE)
    chronic = adjust_for_time_context(base, TimeContext.CHRONIC)
    assert _saturation(acute.primary) >= _saturation(base.primary)
    assert _saturation(chronic.primary) < _saturation(base.primary)
    assert _saturation(chronic.secondary) < _saturation(base.secondary)
    assert chronic.accent == base.accent
    assert chronic.gradient_stops == base.gradient_stops


def test_other_time_contexts_leave_palette_alone():
    base = TONE_PALETTES[EmotionalTone.CONCERN]
    for context in (TimeContext.RECENT, TimeContext.ONGOING, TimeContext.NONE):
        assert adjust_for_time_context(base, context) is base


def test_treatment_context_colors():
    assert treatment_context_colors(TreatmentContext.GENERAL) == {}
    assert treatment_context_colors(TreatmentContext.PREVENTION) == {}
    overrides = treatment_context_colors(TreatmentContext.POST_SURGICAL)
    assert overrides["accent"] == "#E8F5E8"
    assert len(overrides["gradient_stops"]) == 3


def test_apply_treatment_context():
    base = TONE_PALETTES[EmotionalTone.NEUTRAL]
    adjusted = apply_treatment_context(base, TreatmentContext.ACUTE)
    assert adjusted.accent == "#FFEBEE"
    assert adjusted.gradient_stops == ("#F44336", "#EF5350", "#FFCDD2")
    assert adjusted.primary == base.primary
    assert apply_treatment_context(base, TreatmentContext.GENERAL) is base


def test_describe_palette():
    assert describe_palette(TONE_PALETTES[EmotionalTone.HOPE]) == "Healing Greens"
    assert describe_palette(TONE_PALETTES[EmotionalTone.CONCERN]) == "Urgent Reds"
    assert describe_palette(TONE_PALETTES[EmotionalTone.CONFIDENCE]) == "Confident Blues"
    assert describe_palette(TONE_PALETTES[EmotionalTone.NEUTRAL]) == "Custom Palette"


def test_invalid_palette_detected():
    palette = TONE_PALETTES[EmotionalTone.HOPE]
    assert is_valid_palette(palette)
    assert not is_valid_palette(replace(palette, accent="green"))
