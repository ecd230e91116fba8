"""Palette generator — blend a tone palette toward a subspecialty palette.

Blend weight is ``min(complexity_level / 10, 0.7)`` for primary, secondary and
the gradient stops, half that for accent and 0.3x for background, so busier
questions take on more of their subspecialty's colour.
"""

from __future__ import annotations

from dataclasses import replace

from rxart.engine.context import (
    ColorPalette,
    EmotionalTone,
    Subspecialty,
    TextAnalysis,
    TimeContext,
    TreatmentContext,
)
from rxart.utils.colors import adjust_saturation, blend, parse_hex

MAX_BLEND = 0.7
ACCENT_WEIGHT = 0.5
BACKGROUND_WEIGHT = 0.3


def _palette(primary: str, secondary: str, accent: str, background: str, stops: tuple[str, str, str]) -> ColorPalette:
    return ColorPalette(primary, secondary, accent, background, stops)


TONE_PALETTES: dict[EmotionalTone, ColorPalette] = {
    EmotionalTone.HOPE: _palette(
        "#4CAF50", "#81C784", "#C8E6C9", "#E8F5E8", ("#4CAF50", "#66BB6A", "#A5D6A7")
    ),
    EmotionalTone.CONCERN: _palette(
        "#F44336", "#EF5350", "#FFCDD2", "#FFEBEE", ("#F44336", "#E57373", "#FFCDD2")
    ),
    EmotionalTone.CONFIDENCE: _palette(
        "#2196F3", "#42A5F5", "#BBDEFB", "#E3F2FD", ("#1976D2", "#2196F3", "#64B5F6")
    ),
    EmotionalTone.FRUSTRATION: _palette(
        "#FF9800", "#FFB74D", "#FFE0B2", "#FFF3E0", ("#F57C00", "#FF9800", "#FFCC02")
    ),
    EmotionalTone.UNCERTAINTY: _palette(
        "#9E9E9E", "#BDBDBD", "#F5F5F5", "#FAFAFA", ("#757575", "#9E9E9E", "#E0E0E0")
    ),
    EmotionalTone.NEUTRAL: _palette(
        "#607D8B", "#78909C", "#CFD8DC", "#ECEFF1", ("#455A64", "#607D8B", "#90A4AE")
    ),
}

# (primary, secondary) per subspecialty; only the primary is blended in.
SUBSPECIALTY_PALETTES: dict[Subspecialty, tuple[ColorPalette, ColorPalette]] = {
    Subspecialty.SPORTS_MEDICINE: (
        _palette("#FF6B35", "#F7931E", "#FFE135", "#FFF8E1", ("#FF6B35", "#FF8F65", "#FFB347")),
        _palette("#4CAF50", "#66BB6A", "#A5D6A7", "#E8F5E8", ("#388E3C", "#4CAF50", "#81C784")),
    ),
    Subspecialty.JOINT_REPLACEMENT: (
        _palette("#3F51B5", "#5C6BC0", "#C5CAE9", "#E8EAF6", ("#303F9F", "#3F51B5", "#7986CB")),
        _palette("#607D8B", "#78909C", "#B0BEC5", "#ECEFF1", ("#455A64", "#607D8B", "#90A4AE")),
    ),
    Subspecialty.TRAUMA: (
        _palette("#D32F2F", "#F44336", "#FFCDD2", "#FFEBEE", ("#C62828", "#D32F2F", "#EF5350")),
        _palette("#FF5722", "#FF7043", "#FFCCBC", "#FFF3E0", ("#E64A19", "#FF5722", "#FF8A65")),
    ),
    Subspecialty.SPINE: (
        _palette("#795548", "#8D6E63", "#D7CCC8", "#EFEBE9", ("#5D4037", "#795548", "#A1887F")),
        _palette("#9C27B0", "#AB47BC", "#E1BEE7", "#F3E5F5", ("#7B1FA2", "#9C27B0", "#BA68C8")),
    ),
    Subspecialty.HAND_FOOT: (
        _palette("#E91E63", "#F06292", "#F8BBD9", "#FCE4EC", ("#C2185B", "#E91E63", "#F06292")),
        _palette("#FF9800", "#FFB74D", "#FFE0B2", "#FFF3E0", ("#F57C00", "#FF9800", "#FFCC02")),
    ),
    Subspecialty.GENERAL: (
        _palette("#2196F3", "#42A5F5", "#BBDEFB", "#E3F2FD", ("#1976D2", "#2196F3", "#64B5F6")),
        _palette("#607D8B", "#78909C", "#CFD8DC", "#ECEFF1", ("#455A64", "#607D8B", "#90A4AE")),
    ),
}

# Accent and gradient overrides per stage of care.
TREATMENT_CONTEXT_COLORS: dict[TreatmentContext, dict[str, object]] = {
    TreatmentContext.POST_SURGICAL: {
        "accent": "#E8F5E8",
        "gradient_stops": ("#4CAF50", "#81C784", "#C8E6C9"),
    },
    TreatmentContext.REHABILITATION: {
        "accent": "#E3F2FD",
        "gradient_stops": ("#2196F3", "#64B5F6", "#BBDEFB"),
    },
    TreatmentContext.ACUTE: {
        "accent": "#FFEBEE",
        "gradient_stops": ("#F44336", "#EF5350", "#FFCDD2"),
    },
    TreatmentContext.CHRONIC: {
        "accent": "#FFF3E0",
        "gradient_stops": ("#FF9800", "#FFB74D", "#FFE0B2"),
    },
}

# (primary factor, secondary factor)
_TIME_SATURATION: dict[TimeContext, tuple[float, float]] = {
    TimeContext.ACUTE: (1.2, 1.1),
    TimeContext.CHRONIC: (0.8, 0.9),
}

# Display labels keyed by the primary colours that identify them.
_PALETTE_DESCRIPTIONS: tuple[tuple[str, frozenset[str]], ...] = (
    ("Healing Greens", frozenset({"#4caf50", "#66bb6a"})),
    ("Urgent Reds", frozenset({"#f44336", "#d32f2f"})),
    ("Confident Blues", frozenset({"#2196f3", "#1976d2"})),
    ("Dynamic Oranges", frozenset({"#ff9800", "#f57c00"})),
    ("Neutral Grays", frozenset({"#9e9e9e", "#757575"})),
)


def blend_factor(analysis: TextAnalysis) -> float:
    """Subspecialty weight in [0, 0.7]."""
    return max(0.0, min(analysis.complexity_level / 10, MAX_BLEND))


def generate_palette(analysis: TextAnalysis) -> ColorPalette:
    tone = TONE_PALETTES[analysis.emotional_tone]
    target, _ = SUBSPECIALTY_PALETTES[analysis.subspecialty]
    factor = blend_factor(analysis)

    return ColorPalette(
        primary=blend(tone.primary, target.primary, factor),
        secondary=blend(tone.secondary, target.secondary, factor),
        accent=blend(tone.accent, target.accent, factor * ACCENT_WEIGHT),
        background=blend(tone.background, target.background, factor * BACKGROUND_WEIGHT),
        gradient_stops=blend_stops(tone.gradient_stops, target.gradient_stops, factor),
    )


def blend_stops(stops: tuple[str, ...], targets: tuple[str, ...], factor: float) -> tuple[str, ...]:
    """Blend stop i toward target i, reusing the last target when it runs out."""
    return tuple(
        blend(stop, targets[i] if i < len(targets) else targets[-1], factor)
        for i, stop in enumerate(stops)
    )


def treatment_context_colors(context: TreatmentContext) -> dict[str, object]:
    """Partial palette override for a treatment context; empty for ``general``."""
    return dict(TREATMENT_CONTEXT_COLORS.get(context, {}))


def apply_treatment_context(palette: ColorPalette, context: TreatmentContext) -> ColorPalette:
    overrides = treatment_context_colors(context)
    return replace(palette, **overrides) if overrides else palette


def adjust_for_time_context(palette: ColorPalette, time_context: TimeContext) -> ColorPalette:
    """Acute questions get more saturated, chronic ones more muted."""
    factors = _TIME_SATURATION.get(time_context)
    if factors is None:
        return palette
    primary_factor, secondary_factor = factors
    return replace(
        palette,
        primary=adjust_saturation(palette.primary, primary_factor),
        secondary=adjust_saturation(palette.secondary, secondary_factor),
    )


def describe_palette(palette: ColorPalette) -> str:
    primary = palette.primary.lower()
    for label, colors in _PALETTE_DESCRIPTIONS:
        if primary in colors:
            return label
    return "Custom Palette"


def is_valid_palette(palette: ColorPalette) -> bool:
    colors = [palette.primary, palette.secondary, palette.accent, palette.background]
    colors.extend(palette.gradient_stops)
    return all(c.startswith("#") and len(c) == 7 and parse_hex(c) is not None for c in colors)
