from __future__ import annotations

import hashlib
import json
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class FileCache:
    """File-based JSON cache with TTL for lookups that rarely change.

    Used for geocoding hits and exchange-rate tables. Itineraries are never
    cached: every transit request is answered from a fresh response.

    Entries are stored as {"cached_at": <epoch>, "value": <payload>} so the
    payload handed back is exactly what was stored.
    """
    cache_dir: str
    ttl_seconds: int = 24 * 3600

    def __post_init__(self) -> None:
        os.makedirs(self.cache_dir, exist_ok=True)

    def _path_for_key(self, key: str) -> str:
        h = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return os.path.join(self.cache_dir, f"{h}.json")

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        path = self._path_for_key(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                entry = json.load(f)
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable cache entry %s", path)
            return None
        if not isinstance(entry, dict) or "value" not in entry:
            return None
        if (time.time() - float(entry.get("cached_at", 0))) > self.ttl_seconds:
            return None
        return entry["value"]

    def set(self, key: str, value: Dict[str, Any]) -> None:
        path = self._path_for_key(key)
        entry = {"cached_at": time.time(), "value": value}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(entry, f, ensure_ascii=False, indent=2)

    def get_or_fetch(self, key: str, fetch: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
        """Return the cached payload for `key`, calling `fetch` on a miss."""
        cached = self.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return cached
        value = fetch()
        self.set(key, value)
        return value
