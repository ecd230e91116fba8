"""Pipeline orchestrator — classify, seed, palette, compose, rarity, in that order."""

from __future__ import annotations

import logging
import time

from rxart.engine.cache import ArtworkCache, cache_key
from rxart.engine.classifier import classify
from rxart.engine.composition import generate_composition
from rxart.engine.config import EngineConfig
from rxart.engine.context import ArtworkResult, TextAnalysis
from rxart.engine.palette import adjust_for_time_context, generate_palette
from rxart.engine.rarity import classify_rarity
from rxart.engine.seed import generate_seed

logger = logging.getLogger(__name__)

THEMES = ("bone", "muscle", "joint", "general")


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class Pipeline:
    """Runs the five generation stages. Holds only read-only config and an optional cache."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        cache: ArtworkCache | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.cache = cache

    def fallback_analysis(self) -> TextAnalysis:
        """Analysis used when only a theme is supplied."""
        return TextAnalysis(complexity_level=self.config.fallback_complexity)

    def run(
        self,
        question: str,
        confidence: float,
        size: float | None = None,
        salt: str = "",
        theme: str | None = None,
        adapt_to_time_context: bool = False,
    ) -> ArtworkResult:
        """Generate (or fetch from cache) the artwork for one question."""
        return self.run_with_status(question, confidence, size, salt, theme, adapt_to_time_context)[0]

    def run_with_status(
        self,
        question: str,
        confidence: float,
        size: float | None = None,
        salt: str = "",
        theme: str | None = None,
        adapt_to_time_context: bool = False,
    ) -> tuple[ArtworkResult, bool]:
        """Like :meth:`run`, also reporting whether this call was served from the cache."""
        size = self.config.default_size if size is None else size
        if size <= 0:
            raise ValueError(f"Canvas size must be positive, got {size}")
        if theme is not None and theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}; expected one of {THEMES}")

        key = None
        if self.cache is not None:
            key = cache_key(question, salt, confidence, size, theme, adapt_to_time_context)
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Artwork cache hit %s", key[:12])
                return cached, True

        result = self._generate(question, confidence, size, salt, theme, adapt_to_time_context)

        if self.cache is not None and key is not None:
            self.cache.put(key, result)
        return result, False

    def _generate(
        self,
        question: str,
        confidence: float,
        size: float,
        salt: str,
        theme: str | None,
        adapt_to_time_context: bool,
    ) -> ArtworkResult:
        start = time.perf_counter()

        t0 = time.perf_counter()
        if question:
            analysis = classify(question)
            text = question
        else:
            analysis = self.fallback_analysis()
            text = f"{theme or 'general'} medical artwork"
        seed_text = text + salt
        logger.debug("  classify completed in %.1fms", _elapsed_ms(t0))

        t0 = time.perf_counter()
        seed = generate_seed(seed_text, analysis)
        logger.debug("  seed completed in %.1fms", _elapsed_ms(t0))

        t0 = time.perf_counter()
        palette = generate_palette(analysis)
        if adapt_to_time_context:
            palette = adjust_for_time_context(palette, analysis.time_context)
        logger.debug("  palette completed in %.1fms", _elapsed_ms(t0))

        t0 = time.perf_counter()
        composition = generate_composition(analysis, palette, seed, size)
        logger.debug("  composition completed in %.1fms", _elapsed_ms(t0))

        t0 = time.perf_counter()
        rarity = classify_rarity(confidence, analysis.complexity_level, seed_text, self.config)
        logger.debug("  rarity completed in %.1fms", _elapsed_ms(t0))

        logger.info(
            "Artwork %s: %s motif, %d elements, %s tier in %.0fms",
            seed.hash[:8],
            analysis.subspecialty.value,
            composition.element_count,
            rarity.tier.label,
            _elapsed_ms(start),
        )
        return ArtworkResult(
            question=text,
            analysis=analysis,
            seed=seed,
            palette=palette,
            composition=composition,
            rarity=rarity,
            size=size,
            confidence=min(1.0, max(0.0, float(confidence))),
        )


def create_pipeline(
    config: EngineConfig | None = None,
    cache: ArtworkCache | None = None,
) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config, cache=cache)
