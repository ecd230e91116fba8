"""Composition generator — analysis + palette + seed to a four-layer element tree.

Layers, in paint order:
    background  rounded gradient card plus a scatter of faint dots
    structural  the subspecialty motif (one generator per Subspecialty)
    detail      condition overlays (pain rings, inflammation glow)
    overlay     healing-progress arc and the pulse line

Every coordinate, radius and stroke width is ``size`` times a quantity derived
from the inputs, so the same inputs at another size give a uniformly scaled
copy of the same picture.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

import numpy as np

from rxart.engine.context import (
    ColorPalette,
    ElementKind,
    LayeredComposition,
    Seed,
    Subspecialty,
    TextAnalysis,
    TreatmentContext,
    VisualElement,
)
from rxart.utils.geometry import format_number, polyline_path, regular_polygon

logger = logging.getLogger(__name__)

# Fixed overlay colours that carry meaning regardless of palette.
PAIN_COLOR = "#ff4444"
INFLAMMATION_COLOR = "#ffaa00"
HEALING_COLOR = "#4CAF50"

# Conditions that gate structural/detail overlays.
FRACTURE_CONDITION = "fracture"
PAIN_CONDITION = "pain"
INFLAMMATION_CONDITION = "inflammation"

PULSE_POINTS = 20
PAIN_INDICATORS = 3
HEXAGON_SIDES = 6


def gradient_id(seed: Seed) -> str:
    """Id of the radial gradient the background card fills with."""
    return f"gradient-{seed.hash[:6]}"


def _styled(kind: ElementKind, attributes: dict, class_name: str | None = None) -> VisualElement:
    return VisualElement(kind=kind, attributes=attributes, class_name=class_name)


def generate_composition(
    analysis: TextAnalysis,
    palette: ColorPalette,
    seed: Seed,
    size: float = 200,
) -> LayeredComposition:
    if size <= 0:
        raise ValueError(f"Canvas size must be positive, got {size}")

    composition = LayeredComposition(
        background=tuple(_background(palette, seed, size)),
        structural=tuple(_structural(analysis, palette, seed, size)),
        detail=tuple(_detail(analysis, seed, size)),
        overlay=tuple(_overlay(analysis, palette, seed, size)),
    )
    logger.debug(
        "Composition %s at %s: %d elements (%s motif)",
        seed.hash[:6],
        format_number(size),
        composition.element_count,
        analysis.subspecialty.value,
    )
    return composition


# --- Background -------------------------------------------------------------


def _background(palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    elements = [
        _styled(
            ElementKind.RECT,
            {
                "x": 0,
                "y": 0,
                "width": size,
                "height": size,
                "fill": f"url(#{gradient_id(seed)})",
                "rx": size * 0.1,
            },
        )
    ]
    elements.extend(_texture(palette, seed, size))
    return elements


def _texture(palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    count = math.floor(seed.variations.density * 20) + 5
    dots = []
    for i in range(count):
        t = (seed.value + i * 0.137) % 1
        dots.append(
            _styled(
                ElementKind.CIRCLE,
                {
                    "cx": t * size,
                    "cy": ((t * 7) % 1) * size,
                    "r": size * 0.01 * (1 + seed.variations.scale),
                    "fill": palette.accent,
                    "opacity": 0.3,
                },
            )
        )
    return dots


# --- Structural motifs ------------------------------------------------------


def _spine(analysis: TextAnalysis, palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    elements: list[VisualElement] = []
    center_x = size / 2
    count = min(max(5, analysis.complexity_level), 12)
    spacing = (size * 0.7) / count
    variations = seed.variations

    for i in range(count):
        y = size * 0.15 + i * spacing
        x = center_x + math.sin(i * 0.5) * variations.position * 0.1 * size
        radius = (size * 0.08) * (1 + variations.scale * 0.3)

        elements.append(
            _styled(
                ElementKind.ELLIPSE,
                {
                    "cx": x,
                    "cy": y,
                    "rx": radius,
                    "ry": radius * 0.6,
                    "fill": palette.primary,
                    "opacity": 0.8,
                    "transform": (
                        f"rotate({format_number(variations.rotation * 10)} "
                        f"{format_number(x)} {format_number(y)})"
                    ),
                },
                "vertebra",
            )
        )

        if analysis.complexity_level > 3:
            for side in (-1, 1):
                elements.append(
                    _styled(
                        ElementKind.CIRCLE,
                        {
                            "cx": x + side * radius * 0.8,
                            "cy": y,
                            "r": radius * 0.3,
                            "fill": palette.secondary,
                            "opacity": 0.6,
                        },
                        "vertebra-process",
                    )
                )

    elements.append(
        _styled(
            ElementKind.PATH,
            {
                "d": _spinal_cord(center_x, size, count, seed),
                "stroke": palette.accent,
                "stroke-width": size * 0.015,
                "fill": "none",
                "opacity": 0.7,
            },
            "spinal-cord",
        )
    )
    return elements


def _spinal_cord(center_x: float, size: float, count: int, seed: Seed) -> str:
    points = [(center_x, size * 0.1)]
    for i in range(1, count + 1):
        y = size * 0.15 + i * (size * 0.7) / count
        x = center_x + math.sin(i * 0.5) * seed.variations.position * size * 0.05
        points.append((x, y))
    return polyline_path(points)


def _sports(analysis: TextAnalysis, palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    elements: list[VisualElement] = []
    value = seed.value

    for i in range(min(analysis.complexity_level + 2, 8)):
        elements.append(
            _styled(
                ElementKind.LINE,
                {
                    "x1": (value + i * 0.1) * size,
                    "y1": (value + i * 0.2) * size,
                    "x2": ((value + i * 0.3) % 1) * size,
                    "y2": ((value + i * 0.4) % 1) * size,
                    "stroke": palette.primary,
                    "stroke-width": size * 0.01,
                    "opacity": 0.6,
                },
                "flow-line",
            )
        )

    for i in range(max(1, analysis.complexity_level // 3)):
        elements.append(
            _styled(
                ElementKind.CIRCLE,
                {
                    "cx": ((value + i * 0.5) % 1) * size,
                    "cy": ((value + i * 0.6) % 1) * size,
                    "r": size * 0.1 * (1 + seed.variations.scale),
                    "fill": "none",
                    "stroke": palette.accent,
                    "stroke-width": size * 0.005,
                    "opacity": 0.5,
                },
                "energy-burst",
            )
        )
    return elements


def _joint(analysis: TextAnalysis, palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    center = size / 2
    offset = seed.variations.position * size * 0.1
    hexagon = regular_polygon(center, center, size * 0.15, HEXAGON_SIDES)

    return [
        _styled(
            ElementKind.CIRCLE,
            {"cx": center, "cy": center, "r": size * 0.25, "fill": palette.primary, "opacity": 0.7},
            "joint-socket",
        ),
        _styled(
            ElementKind.CIRCLE,
            {
                "cx": center + offset,
                "cy": center + offset,
                "r": size * 0.18,
                "fill": palette.secondary,
                "opacity": 0.8,
            },
            "joint-ball",
        ),
        _styled(
            ElementKind.PATH,
            {
                "d": polyline_path(hexagon),
                "stroke": palette.secondary,
                "stroke-width": size * 0.01,
                "fill": "none",
                "opacity": 0.6,
            },
            "stability-outline",
        ),
    ]


def _trauma(analysis: TextAnalysis, palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    elements: list[VisualElement] = []
    center = size / 2
    length = size * 0.3 * (1 + seed.variations.scale)

    for i in range(min(analysis.complexity_level, 5)):
        angle = (seed.value + i * 0.2) * math.pi * 2
        elements.append(
            _styled(
                ElementKind.LINE,
                {
                    "x1": center,
                    "y1": center,
                    "x2": center + math.cos(angle) * length,
                    "y2": center + math.sin(angle) * length,
                    "stroke": palette.primary,
                    "stroke-width": size * 0.015,
                    "opacity": 0.7,
                    "stroke-linecap": "round",
                },
                "impact-line",
            )
        )

    if FRACTURE_CONDITION in analysis.conditions:
        elements.extend(_fracture_lines(palette, seed, size))
    return elements


def _fracture_lines(palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    variations = seed.variations
    count = 2 + math.floor(variations.complexity * 3)
    length = variations.scale * size * 0.4
    angle = variations.rotation * math.pi
    dash = f"{format_number(size * 0.02)},{format_number(size * 0.01)}"

    lines = []
    for i in range(count):
        start_x = (seed.value + i * 0.15) * size
        start_y = ((seed.value + i * 0.25) % 1) * size
        lines.append(
            _styled(
                ElementKind.LINE,
                {
                    "x1": start_x,
                    "y1": start_y,
                    "x2": start_x + math.cos(angle) * length,
                    "y2": start_y + math.sin(angle) * length,
                    "stroke": palette.secondary,
                    "stroke-width": size * 0.008,
                    "opacity": 0.8,
                    "stroke-dasharray": dash,
                },
                "fracture-line",
            )
        )
    return lines


def _hand_foot(analysis: TextAnalysis, palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    radius = size * 0.02 * (0.5 + seed.variations.scale)
    return [
        _styled(
            ElementKind.CIRCLE,
            {
                "cx": ((seed.value + i * 0.1) % 1) * size,
                "cy": ((seed.value + i * 0.2) % 1) * size,
                "r": radius,
                "fill": palette.accent,
                "opacity": 0.4,
            },
            "detail-dot",
        )
        for i in range(analysis.complexity_level * 2)
    ]


def _general(analysis: TextAnalysis, palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    """Andry tree: roots, then trunk, then branches."""
    center = size / 2
    scale = seed.variations.scale

    roots = []
    root_count = min(analysis.medical_term_count, 8)
    root_length = size * 0.12 * (0.7 + scale * 0.6)
    for i in range(root_count):
        angle = math.pi + (i / root_count - 0.5) * math.pi
        roots.append(
            _styled(
                ElementKind.LINE,
                {
                    "x1": center,
                    "y1": center,
                    "x2": center + math.cos(angle) * root_length,
                    "y2": center + math.sin(angle) * root_length,
                    "stroke": palette.accent,
                    "stroke-width": size * 0.005,
                    "opacity": 0.5,
                },
                "root",
            )
        )

    trunk_height = size * 0.4
    trunk_width = size * 0.06
    trunk = _styled(
        ElementKind.RECT,
        {
            "x": center - trunk_width / 2,
            "y": center - trunk_height / 2,
            "width": trunk_width,
            "height": trunk_height,
            "fill": palette.primary,
            "rx": trunk_width * 0.3,
            "opacity": 0.8,
        },
        "trunk",
    )

    branches = []
    branch_count = min(analysis.complexity_level, 6)
    branch_length = size * 0.15 * (0.8 + scale * 0.4)
    for i in range(branch_count):
        angle = (i / branch_count) * math.pi * 2
        branches.append(
            _styled(
                ElementKind.LINE,
                {
                    "x1": center,
                    "y1": center,
                    "x2": center + math.cos(angle) * branch_length,
                    "y2": center + math.sin(angle) * branch_length,
                    "stroke": palette.secondary,
                    "stroke-width": size * 0.01,
                    "opacity": 0.7,
                },
                "branch",
            )
        )

    return [*roots, trunk, *branches]


MotifGenerator = Callable[[TextAnalysis, ColorPalette, Seed, float], list[VisualElement]]

STRUCTURAL_MOTIFS: dict[Subspecialty, MotifGenerator] = {
    Subspecialty.SPINE: _spine,
    Subspecialty.SPORTS_MEDICINE: _sports,
    Subspecialty.JOINT_REPLACEMENT: _joint,
    Subspecialty.TRAUMA: _trauma,
    Subspecialty.HAND_FOOT: _hand_foot,
    Subspecialty.GENERAL: _general,
}


def _structural(analysis: TextAnalysis, palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    motif = STRUCTURAL_MOTIFS.get(analysis.subspecialty, _general)
    return motif(analysis, palette, seed, size)


# --- Detail -----------------------------------------------------------------


def _detail(analysis: TextAnalysis, seed: Seed, size: float) -> list[VisualElement]:
    elements: list[VisualElement] = []

    if PAIN_CONDITION in analysis.conditions:
        for i in range(PAIN_INDICATORS):
            elements.append(
                _styled(
                    ElementKind.CIRCLE,
                    {
                        "cx": ((seed.value + i * 0.3) % 1) * size,
                        "cy": ((seed.value + i * 0.4) % 1) * size,
                        "r": size * 0.03,
                        "fill": "none",
                        "stroke": PAIN_COLOR,
                        "stroke-width": size * 0.003,
                        "opacity": 0.6,
                    },
                    "pain-indicator",
                )
            )

    if INFLAMMATION_CONDITION in analysis.conditions:
        elements.append(
            _styled(
                ElementKind.CIRCLE,
                {
                    "cx": size / 2,
                    "cy": size / 2,
                    "r": size * 0.25,
                    "fill": INFLAMMATION_COLOR,
                    "opacity": 0.2,
                },
                "inflammation-glow",
            )
        )

    return elements


# --- Overlay ----------------------------------------------------------------

_HEALING_CONTEXTS = (TreatmentContext.POST_SURGICAL, TreatmentContext.REHABILITATION)


def _overlay(analysis: TextAnalysis, palette: ColorPalette, seed: Seed, size: float) -> list[VisualElement]:
    elements: list[VisualElement] = []
    if analysis.treatment_context in _HEALING_CONTEXTS:
        elements.append(_healing_arc(seed, size))
    elements.append(_pulse(palette, seed, size))
    return elements


def _healing_arc(seed: Seed, size: float) -> VisualElement:
    progress = seed.variations.complexity
    radius = size * 0.15
    circumference = 2 * math.pi * radius
    center = format_number(size / 2)
    dash = f"{format_number(circumference * progress)} {format_number(circumference * (1 - progress))}"
    return _styled(
        ElementKind.CIRCLE,
        {
            "cx": size / 2,
            "cy": size / 2,
            "r": radius,
            "fill": "none",
            "stroke": HEALING_COLOR,
            "stroke-width": size * 0.01,
            "stroke-dasharray": dash,
            "stroke-linecap": "round",
            "opacity": 0.7,
            "transform": f"rotate(-90 {center} {center})",
        },
        "healing-progress",
    )


def _pulse(palette: ColorPalette, seed: Seed, size: float) -> VisualElement:
    base_y = size * 0.9
    steps = np.arange(1, PULSE_POINTS + 1)
    xs = steps / PULSE_POINTS * size
    ys = base_y + np.sin(steps * 0.8) * seed.variations.density * size * 0.05
    points = np.vstack(([0.0, base_y], np.column_stack((xs, ys))))
    return _styled(
        ElementKind.PATH,
        {
            "d": polyline_path(points),
            "stroke": palette.accent,
            "stroke-width": size * 0.008,
            "fill": "none",
            "opacity": 0.6,
        },
        "pulse",
    )
