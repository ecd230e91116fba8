"""rxart procedural artwork engine."""

from rxart.engine.classifier import classify
from rxart.engine.composition import generate_composition
from rxart.engine.context import (
    ArtworkResult,
    ColorPalette,
    ElementKind,
    LayeredComposition,
    RarityRecord,
    RarityTier,
    Seed,
    TextAnalysis,
    VisualElement,
)
from rxart.engine.palette import generate_palette
from rxart.engine.pipeline import Pipeline, create_pipeline
from rxart.engine.rarity import classify_rarity
from rxart.engine.seed import generate_seed

__all__ = [
    "classify",
    "generate_seed",
    "generate_palette",
    "generate_composition",
    "classify_rarity",
    "Pipeline",
    "create_pipeline",
    "ArtworkResult",
    "ColorPalette",
    "ElementKind",
    "LayeredComposition",
    "RarityRecord",
    "RarityTier",
    "Seed",
    "TextAnalysis",
    "VisualElement",
]
