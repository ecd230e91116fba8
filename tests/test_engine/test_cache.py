"""Tests for the bounded artwork cache."""

import pytest

from rxart.engine.cache import ArtworkCache, cache_key
from rxart.engine.pipeline import create_pipeline


@pytest.fixture(scope="module")
def results():
    pipeline = create_pipeline()
    return [pipeline.run(f"knee pain {i}", 0.5) for i in range(4)]


def test_cache_key_is_stable():
    assert cache_key("q", "", 0.5, 200) == cache_key("q", "", 0.5, 200)
    assert len(cache_key("q", "", 0.5, 200)) == 64


def test_cache_key_covers_every_input():
    base = cache_key("q", "", 0.5, 200)
    assert cache_key("r", "", 0.5, 200) != base
    assert cache_key("q", "s", 0.5, 200) != base
    assert cache_key("q", "", 0.6, 200) != base
    assert cache_key("q", "", 0.5, 300) != base
    assert cache_key("q", "", 0.5, 200, theme="bone") != base
    assert cache_key("q", "", 0.5, 200, adapt_to_time_context=True) != base


def test_get_put(results):
    cache = ArtworkCache(maxsize=4)
    assert cache.get("a") is None
    cache.put("a", results[0])
    assert cache.get("a") is results[0]
    assert "a" in cache
    assert cache.hits == 1
    assert cache.misses == 1


def test_lru_eviction(results):
    cache = ArtworkCache(maxsize=2)
    cache.put("a", results[0])
    cache.put("b", results[1])
    # touch "a" so "b" becomes least recently used
    cache.get("a")
    cache.put("c", results[2])
    assert len(cache) == 2
    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache


def test_clear(results):
    cache = ArtworkCache(maxsize=2)
    cache.put("a", results[0])
    cache.get("a")
    cache.clear()
    assert len(cache) == 0
    assert cache.hits == 0
    assert cache.misses == 0


def test_invalid_maxsize():
    with pytest.raises(ValueError):
        ArtworkCache(maxsize=0)
