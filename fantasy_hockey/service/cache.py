"""
Derived State Cache

Bounded in-memory memoization for derived views, keyed by a fingerprint of
the input datasets. Recomputation happens whenever any input changes.
"""

from __future__ import annotations

import copy
import hashlib
import json
from collections import OrderedDict
from typing import Any, Callable, TypeVar

from loguru import logger
from pydantic import BaseModel

T = TypeVar("T")


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, dict):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_jsonable(item) for item in value]
        if isinstance(value, (set, frozenset)):
            items.sort(key=repr)
        return items
    return value


class DerivedStateCache:
    """
    LRU cache of derived results.

    Cached values are deep-copied on the way out so callers never share
    mutable state between invocations.
    """

    def __init__(self, max_entries: int = 32) -> None:
        self.max_entries = max_entries
        self._entries: OrderedDict[str, Any] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def fingerprint(namespace: str, *inputs: Any) -> str:
        """
        Build a cache key from a namespace and input datasets.

        Args:
            namespace: Name of the derived view
            inputs: Models, mappings, sequences or scalars

        Returns:
            Hex digest identifying the inputs
        """
        payload = json.dumps(
            [namespace, _jsonable(list(inputs))],
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        """Return the cached value for key, computing and storing it on a miss."""
        if key in self._entries:
            self.hits += 1
            self._entries.move_to_end(key)
            return copy.deepcopy(self._entries[key])

        self.misses += 1
        value = compute()
        self._entries[key] = value
        if len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted derived state {evicted[:12]}")
        return copy.deepcopy(value)

    def clear(self) -> None:
        """Drop all cached entries."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> dict[str, int]:
        return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}
