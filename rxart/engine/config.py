"""Engine configuration — tunables and the rarity policy table."""

from __future__ import annotations

from dataclasses import dataclass, field

from rxart.engine.context import RarityTier


@dataclass(frozen=True)
class RarityThreshold:
    """A tier is reachable when both minimums are met."""

    tier: RarityTier
    min_confidence: float
    min_score: float


def _default_thresholds() -> tuple[RarityThreshold, ...]:
    # Highest tier first. score = confidence * complexity bonus (1.0 / 1.1 / 1.3),
    # so ultra-rare needs confidence >= 0.9 at the top bonus band.
    return (
        RarityThreshold(RarityTier.ULTRA_RARE, min_confidence=0.9, min_score=1.17),
        RarityThreshold(RarityTier.RARE, min_confidence=0.8, min_score=0.88),
        RarityThreshold(RarityTier.UNCOMMON, min_confidence=0.6, min_score=0.66),
        RarityThreshold(RarityTier.COMMON, min_confidence=0.0, min_score=0.0),
    )


@dataclass(frozen=True)
class EngineConfig:
    """Controls canvas defaults, fallbacks and rarity gating."""

    # Canvas edge length in pixels (600+ for the full prescription render)
    default_size: float = 200.0

    # Complexity assumed when only a theme is supplied
    fallback_complexity: int = 3

    # Rarity policy
    rarity_thresholds: tuple[RarityThreshold, ...] = field(default_factory=_default_thresholds)
    # (min complexity level, bonus), checked highest first
    complexity_bonuses: tuple[tuple[int, float], ...] = ((8, 1.3), (5, 1.1))

    # Shown in the metadata panel
    algorithm_label: str = "Arthrokinetix v1.0"
    id_prefix: str = "OIQ"
