"""Rarity classifier — (confidence, complexity level) to a tier plus id and token.

The tier is the highest entry of ``EngineConfig.rarity_thresholds`` whose
minimum confidence and minimum score are both met, where

    score = confidence * complexity_bonus(complexity_level)

Both tests only get easier as either input grows, so the tier never drops
when confidence or complexity rises. The identifier and verification hash are
derived from the artifact content, so recomputing a record gives the same
values.
"""

from __future__ import annotations

import hashlib

from rxart.engine.config import EngineConfig
from rxart.engine.context import RarityRecord, RarityTier
from rxart.engine.seed import rolling_hash

_DEFAULT_CONFIG = EngineConfig()


def _clamp_inputs(confidence: float, complexity_level: int) -> tuple[float, int]:
    confidence = min(1.0, max(0.0, float(confidence)))
    complexity_level = min(10, max(1, int(complexity_level)))
    return confidence, complexity_level


def complexity_bonus(complexity_level: int, config: EngineConfig | None = None) -> float:
    config = config or _DEFAULT_CONFIG
    for min_level, bonus in config.complexity_bonuses:
        if complexity_level >= min_level:
            return bonus
    return 1.0


def rarity_score(confidence: float, complexity_level: int, config: EngineConfig | None = None) -> float:
    confidence, complexity_level = _clamp_inputs(confidence, complexity_level)
    return confidence * complexity_bonus(complexity_level, config)


def classify_tier(
    confidence: float, complexity_level: int, config: EngineConfig | None = None
) -> RarityTier:
    config = config or _DEFAULT_CONFIG
    confidence, complexity_level = _clamp_inputs(confidence, complexity_level)
    score = confidence * complexity_bonus(complexity_level, config)

    best = RarityTier.COMMON
    for threshold in config.rarity_thresholds:
        if confidence >= threshold.min_confidence and score >= threshold.min_score:
            best = max(best, threshold.tier)
    return best


def _material(content: str, confidence: float, complexity_level: int) -> str:
    return f"{content}|{confidence:.4f}|{complexity_level}"


def artwork_id(content: str, confidence: float, complexity_level: int, prefix: str = "OIQ") -> str:
    """``OIQ-XXXXXX-XXXXXX`` from a SHA-256 of the content and scores."""
    digest = hashlib.sha256(_material(content, confidence, complexity_level).encode()).hexdigest()
    return f"{prefix}-{digest[:6]}-{digest[6:12]}".upper()


def verification_hash(content: str, confidence: float, complexity_level: int) -> str:
    """Short upper-case token printed on the artifact."""
    value = rolling_hash(_material(content, confidence, complexity_level))
    return format(value, "X")[:8]


def classify_rarity(
    confidence: float,
    complexity_level: int,
    content: str = "",
    config: EngineConfig | None = None,
) -> RarityRecord:
    """Build the rarity record. ``content`` (question text plus salt) only feeds
    the id and verification hash; the tier depends on the scores alone."""
    config = config or _DEFAULT_CONFIG
    confidence, complexity_level = _clamp_inputs(confidence, complexity_level)
    return RarityRecord(
        id=artwork_id(content, confidence, complexity_level, prefix=config.id_prefix),
        tier=classify_tier(confidence, complexity_level, config),
        verification_hash=verification_hash(content, confidence, complexity_level),
    )
