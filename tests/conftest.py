"""Shared test fixtures."""

from __future__ import annotations

import re

import numpy as np
import pytest

from rxart.engine.cache import ArtworkCache
from rxart.engine.pipeline import create_pipeline


# Sample questions

ANKLE_SPRAIN = "What is the best treatment for a mild ankle sprain?"

FALL_FRACTURE = "I had a fracture after a fall accident"

KNEE_REHAB = "How long is rehabilitation after knee replacement surgery?"

SPINE_CHRONIC = (
    "I have had chronic lower back pain for years and my lumbar disc keeps flaring up. "
    "Is surgery my only option? Will it ever improve?"
)

RUNNER_HOPEFUL = "I hope my knee gets better so I can get back to running marathons"

SHOULDER_PAIN = "My shoulder has pain and swelling"

ALL_QUESTIONS = [
    ANKLE_SPRAIN,
    FALL_FRACTURE,
    KNEE_REHAB,
    SPINE_CHRONIC,
    RUNNER_HOPEFUL,
    SHOULDER_PAIN,
    "",
]


_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?(?:e[-+]?\d+)?", re.IGNORECASE)


def path_numbers(d):
    """All numeric literals of a path data string, in order."""
    return np.array([float(n) for n in _NUMBER_RE.findall(d)], dtype=np.float64)


@pytest.fixture
def pipeline():
    return create_pipeline()


@pytest.fixture
def cached_pipeline():
    return create_pipeline(cache=ArtworkCache(maxsize=8))
