"""Tests for seed generation and derived distributions."""

import pytest

from rxart.engine.classifier import classify
from rxart.engine.context import EmotionalTone, Subspecialty, TextAnalysis, TreatmentContext
from rxart.engine.seed import (
    LCG_C,
    LCG_M,
    apply_distribution,
    color_variations,
    element_seeds,
    generate_seed,
    hash_text,
    hash_to_unit,
    lcg,
    opacities,
    positions,
    rolling_hash,
    rotations,
    scales,
    timings,
)
from rxart.utils.colors import is_hex_color
from tests.conftest import ALL_QUESTIONS, ANKLE_SPRAIN, FALL_FRACTURE


def test_rolling_hash_known_values():
    assert rolling_hash("") == 0
    assert rolling_hash("a") == 97
    assert rolling_hash("ab") == 97 * 31 + 98
    assert rolling_hash("hello") == 99162322


def test_rolling_hash_wraps_to_signed_32_bit():
    # Famous string whose 32-bit hash is exactly INT_MIN
    assert rolling_hash("polygenelubricants") == 2**31
    assert hash_text("polygenelubricants") == "80000000"


def test_rolling_hash_uses_utf16_code_units():
    # U+1F600 is the surrogate pair D83D DE00
    assert rolling_hash("\U0001F600") == 0xD83D * 31 + 0xDE00


def test_hash_text_is_lowercase_hex():
    assert hash_text("hello") == format(99162322, "x")
    assert hash_text("") == "0"


def test_hash_to_unit():
    assert hash_to_unit("0") == 0.0
    assert hash_to_unit("ffffffff") == 1.0
    assert hash_to_unit("80000000") == pytest.approx(0.5)


def test_lcg():
    assert lcg(0) == LCG_C / LCG_M
    assert lcg(1) == (1664525 + 1013904223) / 2**32
    for seed in (0, 1, 12345, 2**40):
        assert 0.0 <= lcg(seed) < 1.0


def test_empty_text_seed():
    seed = generate_seed("", TextAnalysis())
    assert seed.hash == "0"
    assert seed.value == 0.0
    # root 0 -> every channel is the first LCG step
    assert seed.variations.position == lcg(0)
    assert seed.variations.rotation == lcg(0)
    assert seed.variations.scale == lcg(0)
    assert seed.variations.density == pytest.approx(lcg(0) * 0.1)
    assert seed.variations.complexity == pytest.approx(0.1)


def test_seed_is_deterministic():
    for text in ALL_QUESTIONS:
        analysis = classify(text)
        assert generate_seed(text, analysis) == generate_seed(text, analysis)


def test_seed_ranges():
    for text in ALL_QUESTIONS:
        seed = generate_seed(text, classify(text))
        assert 0.0 <= seed.value <= 1.0
        v = seed.variations
        for channel in (v.position, v.rotation, v.scale, v.density, v.complexity):
            assert 0.0 <= channel <= 1.0


def test_hash_depends_on_text_only():
    low = TextAnalysis(complexity_level=1)
    high = TextAnalysis(complexity_level=10)
    a = generate_seed(ANKLE_SPRAIN, low)
    b = generate_seed(ANKLE_SPRAIN, high)
    assert a.hash == b.hash
    assert a.value == b.value
    assert b.variations.density == pytest.approx(a.variations.density * 10)
    assert b.variations.complexity == 1.0


def test_different_text_different_seed():
    a = generate_seed(ANKLE_SPRAIN, TextAnalysis())
    b = generate_seed(FALL_FRACTURE, TextAnalysis())
    assert a.hash != b.hash


def test_element_seeds():
    seed = generate_seed(ANKLE_SPRAIN, classify(ANKLE_SPRAIN))
    draws = element_seeds(seed, 10)
    assert len(draws) == 10
    assert all(0.0 <= d < 1.0 for d in draws)
    assert element_seeds(seed, 10) == draws
    assert element_seeds(seed, 0) == []


def test_apply_distribution():
    assert apply_distribution(0.0, "center") == pytest.approx(0.3)
    assert apply_distribution(1.0, "center") == pytest.approx(0.7)
    assert apply_distribution(0.25, "linear") == pytest.approx(0.15)
    assert apply_distribution(0.75, "linear") == pytest.approx(0.7)
    assert apply_distribution(0.42, "spread") == 0.42


def test_positions_follow_subspecialty():
    analysis = TextAnalysis(subspecialty=Subspecialty.JOINT_REPLACEMENT)
    seed = generate_seed(ANKLE_SPRAIN, analysis)
    for x, y in positions(seed, analysis, 12):
        assert 0.3 <= x <= 0.7
        assert 0.3 <= y <= 0.7


def test_scales_follow_treatment_context():
    analysis = TextAnalysis(treatment_context=TreatmentContext.CHRONIC)
    seed = generate_seed(ANKLE_SPRAIN, analysis)
    assert all(0.9 <= s <= 1.1 for s in scales(seed, analysis, 20))


def test_rotations_follow_tone():
    analysis = TextAnalysis(emotional_tone=EmotionalTone.CONFIDENCE)
    seed = generate_seed(ANKLE_SPRAIN, analysis)
    assert all(0.0 <= r <= 5.0 for r in rotations(seed, analysis, 20))


def test_opacities_clamped():
    for level in (1, 5, 10):
        analysis = TextAnalysis(complexity_level=level)
        seed = generate_seed(FALL_FRACTURE, analysis)
        assert all(0.2 <= o <= 1.0 for o in opacities(seed, analysis, 30))


def test_timings_range():
    seed = generate_seed(FALL_FRACTURE, TextAnalysis())
    assert all(500 <= t <= 2500 for t in timings(seed, 30))


def test_color_variations():
    seed = generate_seed(FALL_FRACTURE, TextAnalysis())
    colors = color_variations(seed, "#4CAF50", 5)
    assert len(colors) == 5
    assert all(is_hex_color(c) for c in colors)
    assert color_variations(seed, "#4CAF50", 5) == colors


def test_color_variations_fail_closed():
    seed = generate_seed(FALL_FRACTURE, TextAnalysis())
    assert color_variations(seed, "teal", 2) == ["teal", "teal"]
