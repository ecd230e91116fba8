"""Bounded LRU memo of pipeline results, keyed by a content hash of the inputs."""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from collections import OrderedDict

from rxart.engine.context import ArtworkResult

logger = logging.getLogger(__name__)


def cache_key(
    question: str,
    salt: str,
    confidence: float,
    size: float,
    theme: str | None = None,
    adapt_to_time_context: bool = False,
) -> str:
    """SHA-256 over every input that changes the rendered artifact."""
    payload = json.dumps(
        [question, salt, round(float(confidence), 6), float(size), theme, adapt_to_time_context],
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode()).hexdigest()


class ArtworkCache:
    """Thread-safe LRU cache. The key space is arbitrary user text, so it is always bounded."""

    def __init__(self, maxsize: int = 256) -> None:
        if maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")
        self.maxsize = maxsize
        self._entries: OrderedDict[str, ArtworkResult] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> ArtworkResult | None:
        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return result

    def put(self, key: str, result: ArtworkResult) -> None:
        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted artwork %s", evicted[:12])

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries
