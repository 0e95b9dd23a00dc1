from __future__ import annotations

import time
from typing import Any, Hashable


class TTLCache:
    """Small in-process cache for LLM responses that are expensive to regenerate."""

    def __init__(self, ttl: float) -> None:
        self.ttl = ttl
        self._entries: dict[Hashable, tuple[float, Any]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> Any | None:
        entry = self._entries.get(key)
        if entry is not None:
            stored_at, value = entry
            if time.monotonic() - stored_at < self.ttl:
                self.hits += 1
                return value
            del self._entries[key]
        self.misses += 1
        return None

    def set(self, key: Hashable, value: Any) -> None:
        self._entries[key] = (time.monotonic(), value)

    def stats(self) -> dict[str, Any]:
        total = self.hits + self.misses
        return {
            "size": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(self.hits / total * 100, 1) if total else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
