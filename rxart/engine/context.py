"""Value types flowing through the artwork pipeline.

Every stage returns a fresh frozen value; nothing here is mutated after
construction and no value holds a reference to state from another call.

TextAnalysis -> Seed -> ColorPalette -> LayeredComposition, plus RarityRecord,
bundled per invocation into ArtworkResult.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union

AttributeValue = Union[int, float, str]


class TreatmentContext(str, enum.Enum):
    PREVENTION = "prevention"
    ACUTE = "acute"
    CHRONIC = "chronic"
    POST_SURGICAL = "post-surgical"
    REHABILITATION = "rehabilitation"
    GENERAL = "general"


class EmotionalTone(str, enum.Enum):
    CONCERN = "concern"
    HOPE = "hope"
    FRUSTRATION = "frustration"
    CONFIDENCE = "confidence"
    UNCERTAINTY = "uncertainty"
    NEUTRAL = "neutral"


class Subspecialty(str, enum.Enum):
    SPORTS_MEDICINE = "sports-medicine"
    JOINT_REPLACEMENT = "joint-replacement"
    TRAUMA = "trauma"
    SPINE = "spine"
    HAND_FOOT = "hand-foot"
    GENERAL = "general"


class TimeContext(str, enum.Enum):
    ACUTE = "acute"
    CHRONIC = "chronic"
    RECENT = "recent"
    ONGOING = "ongoing"
    NONE = "none"


class ElementKind(str, enum.Enum):
    """Closed set of vector primitives a renderer must handle."""

    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    RECT = "rect"
    PATH = "path"
    LINE = "line"
    POLYGON = "polygon"


class RarityTier(enum.IntEnum):
    """Ordered rarity tiers. Compare with <, >; ``label`` is the wire name."""

    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    ULTRA_RARE = 3

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def watermark(self) -> str:
        return _WATERMARKS[self]


_WATERMARKS = {
    RarityTier.COMMON: "none",
    RarityTier.UNCOMMON: "medical_pattern",
    RarityTier.RARE: "gold_caduceus",
    RarityTier.ULTRA_RARE: "holographic",
}


@dataclass(frozen=True)
class TextAnalysis:
    """Surface-feature classification of one question."""

    body_parts: frozenset[str] = frozenset()
    conditions: frozenset[str] = frozenset()
    treatment_context: TreatmentContext = TreatmentContext.GENERAL
    emotional_tone: EmotionalTone = EmotionalTone.NEUTRAL
    subspecialty: Subspecialty = Subspecialty.GENERAL
    # 1-10
    complexity_level: int = 1
    question_length: int = 0
    medical_term_count: int = 0
    time_context: TimeContext = TimeContext.NONE


@dataclass(frozen=True)
class SeedVariations:
    position: float = 0.0
    rotation: float = 0.0
    scale: float = 0.0
    density: float = 0.0
    complexity: float = 0.0


@dataclass(frozen=True)
class Seed:
    # [0, 1)
    value: float
    # Hex of the 32-bit rolling hash of the seed text
    hash: str
    variations: SeedVariations = field(default_factory=SeedVariations)


@dataclass(frozen=True)
class ColorPalette:
    primary: str
    secondary: str
    accent: str
    background: str
    gradient_stops: tuple[str, str, str]

    def swatches(self) -> dict[str, str]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "background": self.background,
        }


@dataclass(frozen=True)
class VisualElement:
    """One vector primitive: a kind tag plus flat geometry/style attributes.

    ``attributes`` is stored as a read-only copy of the mapping passed in.
    """

    kind: ElementKind
    attributes: Mapping[str, AttributeValue]
    class_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash((self.kind, tuple(self.attributes.items()), self.class_name))

    def get(self, name: str, default: AttributeValue | None = None) -> AttributeValue | None:
        return self.attributes.get(name, default)


@dataclass(frozen=True)
class LayeredComposition:
    """Four element groups, painted background first, overlay last."""

    background: tuple[VisualElement, ...] = ()
    structural: tuple[VisualElement, ...] = ()
    detail: tuple[VisualElement, ...] = ()
    overlay: tuple[VisualElement, ...] = ()

    LAYER_NAMES = ("background", "structural", "detail", "overlay")

    def layers(self) -> Iterator[tuple[str, tuple[VisualElement, ...]]]:
        for name in self.LAYER_NAMES:
            yield name, getattr(self, name)

    @property
    def element_count(self) -> int:
        return sum(len(elements) for _, elements in self.layers())


@dataclass(frozen=True)
class RarityRecord:
    id: str
    tier: RarityTier
    verification_hash: str


@dataclass(frozen=True)
class ArtworkResult:
    """Everything one pipeline invocation produces; the unit of caching."""

    question: str
    analysis: TextAnalysis
    seed: Seed
    palette: ColorPalette
    composition: LayeredComposition
    rarity: RarityRecord
    size: float
    confidence: float
