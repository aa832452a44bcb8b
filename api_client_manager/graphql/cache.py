"""
Local response store for GraphQL clients.

Each client keeps query results here until they expire or the store is
reset. Resetting is what :meth:`ApiClientManager.reset` triggers on every
cached client, for example on sign-out.
"""

from __future__ import annotations

import copy
import hashlib
import json
import logging
import time
from typing import Any, Dict, MutableMapping, Optional, Tuple

from .models import GraphQLQuery, GraphQLResult

logger = logging.getLogger(__name__)


class ResponseCache:
    """
    In-memory response cache with TTL and entry limits.

    Examples:
        ```python
        cache = ResponseCache(ttl=60, max_entries=100)
        cache.set(cache.key_for(query), result)
        cached = cache.get(cache.key_for(query))
        ```

        Backed by a caller-owned mapping:
        ```python
        storage: dict = {}
        cache = ResponseCache(storage=storage)
        ```
    """

    def __init__(
        self,
        ttl: float = 300.0,
        max_entries: int = 1000,
        storage: Optional[MutableMapping[str, Any]] = None,
    ):
        """
        Initialize response cache.

        Args:
            ttl: Seconds a cached result stays valid, 0 disables expiry
            max_entries: Maximum number of cached results
            storage: Mapping holding the entries, a new dict if omitted
        """
        self.ttl = ttl
        self.max_entries = max_entries
        # key -> (timestamp, result)
        self._entries: MutableMapping[str, Tuple[float, GraphQLResult]] = (
            storage if storage is not None else {}
        )
        self._stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0,
            "sets": 0,
        }

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def key_for(query: GraphQLQuery) -> str:
        """Generate cache key for a query."""
        payload = json.dumps(query.to_dict(), sort_keys=True, default=str)
        return hashlib.sha256(payload.encode()).hexdigest()

    def get(self, key: str) -> Optional[GraphQLResult]:
        """
        Get a cached result.

        Returns:
            Copy of the cached result, or None if missing or expired
        """
        entry = self._entries.get(key)
        if entry is None:
            self._stats["misses"] += 1
            return None

        timestamp, result = entry
        if self.ttl and time.time() - timestamp > self.ttl:
            del self._entries[key]
            self._stats["misses"] += 1
            self._stats["evictions"] += 1
            return None

        self._stats["hits"] += 1
        cached = copy.deepcopy(result)
        cached.from_cache = True
        return cached

    def set(self, key: str, result: GraphQLResult) -> None:
        """Cache a result, evicting the oldest entry when full."""
        if self.max_entries <= 0:
            return

        if key not in self._entries:
            while len(self._entries) >= self.max_entries:
                oldest = min(self._entries, key=lambda k: self._entries[k][0])
                del self._entries[oldest]
                self._stats["evictions"] += 1

        self._entries[key] = (time.time(), copy.deepcopy(result))
        self._stats["sets"] += 1

    def clear(self) -> None:
        """Remove every cached result."""
        count = len(self._entries)
        self._entries.clear()
        logger.debug(f"Response cache cleared ({count} entries)")

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        lookups = self._stats["hits"] + self._stats["misses"]
        return {
            **self._stats,
            "entries": len(self._entries),
            "hit_rate": self._stats["hits"] / lookups if lookups else 0.0,
        }
