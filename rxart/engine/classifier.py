"""Text classifier — question text to TextAnalysis from surface keyword matches.

Pattern families are module constants scanned in declaration order. Single-
valued fields (treatment context, subspecialty, time context) take the first
family that matches; emotional tone is scored by match count. Any text,
including the empty string, yields a complete analysis.
"""

from __future__ import annotations

import logging
import re

from rxart.engine.context import (
    EmotionalTone,
    Subspecialty,
    TextAnalysis,
    TimeContext,
    TreatmentContext,
)

logger = logging.getLogger(__name__)

MAX_COMPLEXITY = 10
MIN_COMPLEXITY = 1


# Word boundaries are ASCII-only; whitespace also covers NBSP and the Unicode space separators.
_WHITESPACE = r"[\s\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"


def _words(*alternatives: str) -> re.Pattern[str]:
    body = "|".join(alternatives).replace(r"\s", _WHITESPACE)
    return re.compile(r"\b(?:" + body + r")\b", re.IGNORECASE | re.ASCII)


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units; astral characters count as two."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


BODY_PART_PATTERNS: dict[str, re.Pattern[str]] = {
    "knee": _words("knee", "patella", "meniscus", "acl", "pcl", "mcl", "lcl", "kneecap"),
    "shoulder": _words(
        "shoulder", r"rotator\s*cuff", "clavicle", "scapula", "humerus", "glenohumeral"
    ),
    "spine": _words(
        "spine", "spinal", "back", "vertebra", "disc", "lumbar", "cervical", "thoracic",
        "scoliosis",
    ),
    "hip": _words("hip", "pelvis", "femur", "acetabulum", "iliac", "sacrum"),
    "ankle": _words("ankle", "foot", "toe", "heel", "achilles", "plantar", "metatarsal"),
    "wrist": _words("wrist", "hand", "finger", "thumb", "carpal", "metacarpal", "phalanx"),
    "elbow": _words("elbow", "ulna", "radius", "epicondyle", "olecranon"),
    "neck": _words("neck", "cervical", "atlas", "axis", "occipital"),
}

CONDITION_PATTERNS: dict[str, re.Pattern[str]] = {
    "pain": _words("pain", "ache", "hurt", "sore", "tender", "discomfort", "aching"),
    "injury": _words("injury", "injured", "hurt", "trauma", "accident", "fall", "twist"),
    "surgery": _words(
        "surgery", "surgical", "operation", "procedure", "implant", "replacement", "fusion"
    ),
    "arthritis": _words(
        "arthritis", "arthritic", "osteoarthritis", "rheumatoid", "degenerative"
    ),
    "fracture": _words("fracture", "break", "broken", "crack", r"stress\s*fracture"),
    "strain": _words("strain", "sprain", "tear", "pull", "stretch", "overuse"),
    "inflammation": _words(
        "inflammation", "swelling", "inflamed", "tendinitis", "bursitis"
    ),
    "weakness": _words("weakness", "weak", "instability", "unstable", r"giving\s*way"),
}

# Priority order: first match wins.
TREATMENT_CONTEXT_PATTERNS: dict[TreatmentContext, re.Pattern[str]] = {
    TreatmentContext.POST_SURGICAL: _words(
        r"after\s*surgery", r"post\s*op", "recovery", "healing", "rehabilitation"
    ),
    TreatmentContext.REHABILITATION: _words(
        "rehab", "therapy", "exercise", "strengthen", "mobility", r"range\s*of\s*motion"
    ),
    TreatmentContext.ACUTE: _words(
        "sudden", "acute", "recent", r"just\s*happened", "yesterday", "today"
    ),
    TreatmentContext.CHRONIC: _words(
        "chronic", "ongoing", "months", "years", "persistent", "constant"
    ),
    TreatmentContext.PREVENTION: _words(
        "prevent", "avoid", "protect", "strengthen", "conditioning", "training"
    ),
}

# Scored: highest match count wins, later entries win ties.
EMOTIONAL_TONE_PATTERNS: dict[EmotionalTone, re.Pattern[str]] = {
    EmotionalTone.CONCERN: _words("worried", "concerned", "anxious", "scared", "afraid", "nervous"),
    EmotionalTone.HOPE: _words("hope", "hopeful", "optimistic", "better", "improve", "heal", "recovery"),
    EmotionalTone.FRUSTRATION: _words(
        "frustrated", "annoyed", "tired", r"fed\s*up", "struggle", "difficult"
    ),
    EmotionalTone.CONFIDENCE: _words("confident", "sure", "certain", "positive", "strong", "good"),
    EmotionalTone.UNCERTAINTY: _words(
        "unsure", "uncertain", "confused", r"don't\s*know", "maybe", "possibly"
    ),
}

# Priority order: first match wins.
SUBSPECIALTY_PATTERNS: dict[Subspecialty, re.Pattern[str]] = {
    Subspecialty.SPORTS_MEDICINE: _words(
        "running", "sports", "athlete", "training", "performance", "exercise", "activity",
        "marathon", "gym",
    ),
    Subspecialty.JOINT_REPLACEMENT: _words(
        "replacement", "implant", "prosthetic", "artificial", r"total\s*knee", r"total\s*hip"
    ),
    Subspecialty.TRAUMA: _words(
        "accident", "fall", "crash", "impact", "emergency", "fracture", "break", "urgent"
    ),
    Subspecialty.SPINE: _words(
        "spine", "spinal", "back", "disc", "vertebra", "fusion", "scoliosis", "sciatica"
    ),
    Subspecialty.HAND_FOOT: _words(
        "hand", "finger", "thumb", "wrist", "foot", "toe", "ankle", "heel", "carpal", "plantar"
    ),
}

# Priority order: first match wins.
TIME_CONTEXT_PATTERNS: dict[TimeContext, re.Pattern[str]] = {
    TimeContext.ACUTE: _words(
        "sudden", "today", "yesterday", r"just\s*now", "recently", r"this\s*week"
    ),
    TimeContext.CHRONIC: _words(
        "months", "years", "ongoing", "persistent", "chronic", r"long\s*term"
    ),
    TimeContext.RECENT: _words(
        "recent", "lately", r"past\s*few", r"last\s*week", r"last\s*month"
    ),
    TimeContext.ONGOING: _words(
        "ongoing", "continuing", "still", "keeps", "always", "constant"
    ),
}


def classify(text: str) -> TextAnalysis:
    """Classify question text. Never raises; unmatched families fall back to defaults."""
    text = text or ""
    body_parts = _present(BODY_PART_PATTERNS, text)
    conditions = _present(CONDITION_PATTERNS, text)
    term_count = count_medical_terms(text)
    length = utf16_length(text)

    analysis = TextAnalysis(
        body_parts=frozenset(body_parts),
        conditions=frozenset(conditions),
        treatment_context=_first_match(
            TREATMENT_CONTEXT_PATTERNS, text, TreatmentContext.GENERAL
        ),
        emotional_tone=_score_tone(text),
        subspecialty=_first_match(SUBSPECIALTY_PATTERNS, text, Subspecialty.GENERAL),
        complexity_level=_complexity(text, term_count, len(body_parts), len(conditions)),
        question_length=length,
        medical_term_count=term_count,
        time_context=_first_match(TIME_CONTEXT_PATTERNS, text, TimeContext.NONE),
    )
    logger.debug(
        "Classified %d chars: %s/%s/%s complexity=%d",
        length,
        analysis.subspecialty.value,
        analysis.treatment_context.value,
        analysis.emotional_tone.value,
        analysis.complexity_level,
    )
    return analysis


def ordered_body_parts(analysis: TextAnalysis) -> list[str]:
    """Detected body parts in declaration order (for display)."""
    return [name for name in BODY_PART_PATTERNS if name in analysis.body_parts]


def ordered_conditions(analysis: TextAnalysis) -> list[str]:
    """Detected conditions in declaration order (for display)."""
    return [name for name in CONDITION_PATTERNS if name in analysis.conditions]


def count_medical_terms(text: str) -> int:
    """Total body-part and condition matches; overlapping families count twice."""
    total = 0
    for patterns in (BODY_PART_PATTERNS, CONDITION_PATTERNS):
        for pattern in patterns.values():
            total += len(pattern.findall(text))
    return total


def _present(patterns: dict[str, re.Pattern[str]], text: str) -> list[str]:
    return [name for name, pattern in patterns.items() if pattern.search(text)]


def _first_match(patterns, text, default):
    for category, pattern in patterns.items():
        if pattern.search(text):
            return category
    return default


def _score_tone(text: str) -> EmotionalTone:
    best = EmotionalTone.NEUTRAL
    best_score = 0
    for tone, pattern in EMOTIONAL_TONE_PATTERNS.items():
        score = len(pattern.findall(text))
        if score > 0 and score >= best_score:
            best, best_score = tone, score
    return best


def _complexity(text: str, term_count: int, n_body_parts: int, n_conditions: int) -> int:
    level = MIN_COMPLEXITY

    length = utf16_length(text)
    if length > 100:
        level += 2
    elif length > 50:
        level += 1

    level += min(term_count, 4)

    if n_body_parts > 1:
        level += n_body_parts - 1
    if n_conditions > 1:
        level += n_conditions - 1

    if text.count("?") > 1:
        level += 1

    return max(MIN_COMPLEXITY, min(level, MAX_COMPLEXITY))
