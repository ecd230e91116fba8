"""Seed generator — deterministic seed, hash and variation channels.

The hash is the classic 32-bit ``h = h * 31 + code_unit`` rolling hash over the
UTF-16 code units of the text, and every pseudo-random draw is one step of the
Numerical Recipes LCG (a=1664525, c=1013904223, m=2^32). Both are kept
bit-compatible with previously generated artwork, so a stored question
renders exactly as it did.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from rxart.engine.context import (
    EmotionalTone,
    Seed,
    SeedVariations,
    Subspecialty,
    TextAnalysis,
    TreatmentContext,
)
from rxart.utils.colors import adjust_hsl

LCG_A = 1664525
LCG_C = 1013904223
LCG_M = 2**32

# Root seed is scaled to an integer before feeding the LCG.
SEED_SCALE = 1_000_000
# Stride between consecutive element sub-seeds.
ELEMENT_STRIDE = 137

# One prime per channel: position, rotation, scale, density.
CHANNEL_PRIMES = (31, 37, 41, 43)

_INT32_MAX = 0xFFFFFFFF


def rolling_hash(text: str) -> int:
    """Signed-32-bit ``h*31 + c`` hash over UTF-16 code units, absolute value."""
    h = 0
    encoded = text.encode("utf-16-le", errors="surrogatepass")
    for (code_unit,) in struct.iter_unpack("<H", encoded):
        h = (h * 31 + code_unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def hash_text(text: str) -> str:
    """Lower-case hex of :func:`rolling_hash`, no padding."""
    return format(rolling_hash(text), "x")


def hash_to_unit(hash_hex: str) -> float:
    """First 8 hex digits normalised by 0xFFFFFFFF."""
    return int(hash_hex[:8], 16) / _INT32_MAX


def lcg(seed: int) -> float:
    """One LCG step, returned as a float in [0, 1)."""
    return ((LCG_A * seed + LCG_C) % LCG_M) / LCG_M


def generate_seed(text: str, analysis: TextAnalysis) -> Seed:
    """Derive the seed for ``text``. The hash depends on the text only."""
    hash_hex = hash_text(text)
    value = hash_to_unit(hash_hex)
    return Seed(value=value, hash=hash_hex, variations=_variations(value, analysis))


def _variations(value: float, analysis: TextAnalysis) -> SeedVariations:
    root = int(value * SEED_SCALE)
    p_position, p_rotation, p_scale, p_density = CHANNEL_PRIMES
    level = analysis.complexity_level / 10
    return SeedVariations(
        position=lcg(root * p_position),
        rotation=lcg(root * p_rotation),
        scale=lcg(root * p_scale),
        density=lcg(root * p_density) * level,
        complexity=min(level, 1.0),
    )


def element_seeds(seed: Seed, count: int) -> list[float]:
    """``count`` sub-seeds for element-level placement."""
    root = int(seed.value * SEED_SCALE)
    return [lcg(root + i * ELEMENT_STRIDE) for i in range(count)]


# --- Derived distributions -------------------------------------------------

# Per-axis placement pattern by subspecialty: (x, y).
_DISTRIBUTIONS: dict[Subspecialty, tuple[str, str]] = {
    Subspecialty.SPINE: ("center", "linear"),
    Subspecialty.SPORTS_MEDICINE: ("spread", "spread"),
    Subspecialty.JOINT_REPLACEMENT: ("center", "center"),
    Subspecialty.TRAUMA: ("spread", "spread"),
    Subspecialty.HAND_FOOT: ("linear", "center"),
    Subspecialty.GENERAL: ("center", "center"),
}


@dataclass(frozen=True)
class ValueRange:
    low: float
    high: float

    def at(self, t: float) -> float:
        return self.low + t * (self.high - self.low)


_SCALE_RANGES: dict[TreatmentContext, ValueRange] = {
    TreatmentContext.ACUTE: ValueRange(0.8, 1.4),
    TreatmentContext.CHRONIC: ValueRange(0.9, 1.1),
    TreatmentContext.POST_SURGICAL: ValueRange(0.7, 1.3),
    TreatmentContext.REHABILITATION: ValueRange(0.8, 1.2),
}
_DEFAULT_SCALE_RANGE = ValueRange(0.8, 1.2)

# (base degrees, variance degrees)
_ROTATION_RANGES: dict[EmotionalTone, tuple[float, float]] = {
    EmotionalTone.CONCERN: (-15.0, 30.0),
    EmotionalTone.HOPE: (0.0, 10.0),
    EmotionalTone.FRUSTRATION: (-20.0, 40.0),
    EmotionalTone.CONFIDENCE: (0.0, 5.0),
    EmotionalTone.UNCERTAINTY: (-10.0, 20.0),
}
_DEFAULT_ROTATION_RANGE = (0.0, 15.0)

OPACITY_MIN = 0.2
OPACITY_MAX = 1.0


def apply_distribution(t: float, pattern: str) -> float:
    """Map a uniform draw onto a placement pattern."""
    if pattern == "center":
        return 0.3 + t * 0.4
    if pattern == "linear":
        return t * 0.6 if t < 0.5 else 0.4 + (t - 0.5) * 1.2
    return t


def positions(seed: Seed, analysis: TextAnalysis, count: int) -> list[tuple[float, float]]:
    """Unit-square positions shaped by the subspecialty's distribution."""
    draws = element_seeds(seed, count * 2)
    x_pattern, y_pattern = _DISTRIBUTIONS[analysis.subspecialty]
    return [
        (apply_distribution(draws[2 * i], x_pattern), apply_distribution(draws[2 * i + 1], y_pattern))
        for i in range(count)
    ]


def scales(seed: Seed, analysis: TextAnalysis, count: int) -> list[float]:
    scale_range = _SCALE_RANGES.get(analysis.treatment_context, _DEFAULT_SCALE_RANGE)
    return [scale_range.at(t) for t in element_seeds(seed, count)]


def rotations(seed: Seed, analysis: TextAnalysis, count: int) -> list[float]:
    """Rotation angles in degrees; calmer tones rotate less."""
    base, variance = _ROTATION_RANGES.get(analysis.emotional_tone, _DEFAULT_ROTATION_RANGE)
    return [base + t * variance for t in element_seeds(seed, count)]


def opacities(seed: Seed, analysis: TextAnalysis, count: int) -> list[float]:
    base = 0.6 + (analysis.complexity_level / 10) * 0.3
    variance = 0.3
    return [
        max(OPACITY_MIN, min(OPACITY_MAX, base + (t - 0.5) * variance))
        for t in element_seeds(seed, count)
    ]


def timings(seed: Seed, count: int) -> list[float]:
    """Animation delays in milliseconds, 500-2500."""
    return [t * 2000 + 500 for t in element_seeds(seed, count)]


def color_variations(seed: Seed, base_color: str, count: int) -> list[str]:
    """Jitter ``base_color`` by up to ±15° hue, ±10% saturation, ±5% lightness."""
    variations = []
    for t in element_seeds(seed, count):
        offset = t - 0.5
        variations.append(adjust_hsl(base_color, offset * 30, offset * 0.2, offset * 0.1))
    return variations
