"""Cache controller for the assembled document.

Two states:

    STALE --build--> FRESH
    FRESH --invalidate() / key mismatch--> STALE

The cache key is (live route count, exclusion-store version). The route
count is compared for exact equality: any growth or shrink forces a rebuild.
Policy changes are tracked through the version counter, so a read right
after a mutation always rebuilds.

Limitation: mutating a route's metadata in place without changing the route
count is not detected.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import Enum
from typing import Any


class CacheState(str, Enum):
    """Cache states."""

    STALE = "stale"
    FRESH = "fresh"


class SchemaCache:
    """Memoizes the last built document.

    Args:
        lock: Lock shared with the ExclusionStore. Reentrant, because a
            build reads the policy through the store while holding it.
    """

    def __init__(self, lock: threading.RLock | None = None) -> None:
        self._lock = lock or threading.RLock()
        self._state = CacheState.STALE
        self._document: dict[str, Any] | None = None
        self._route_count = 0
        self._policy_version = -1
        self.builds = 0

    @property
    def lock(self) -> threading.RLock:
        """Lock shared with the exclusion store."""
        return self._lock

    @property
    def state(self) -> CacheState:
        """Current state."""
        return self._state

    def invalidate(self) -> None:
        """Mark the cached document stale."""
        with self._lock:
            self._state = CacheState.STALE

    def peek(self) -> dict[str, Any] | None:
        """Cached document if FRESH, without touching the keys."""
        with self._lock:
            return self._document if self._state is CacheState.FRESH else None

    def get_or_build(
        self,
        route_count: int,
        policy_version: int,
        build: Callable[[], dict[str, Any]],
    ) -> tuple[dict[str, Any], bool]:
        """Return the cached document or build a new one.

        Args:
            route_count: Live route count.
            policy_version: Current exclusion-store version.
            build: Full converter + assembler pass.

        Returns:
            (document, hit) where hit is True when no build happened.

        Raises:
            Exception: Whatever build raises. The cache stays STALE.
        """
        with self._lock:
            if (
                self._state is CacheState.FRESH
                and self._document is not None
                and self._route_count == route_count
                and self._policy_version == policy_version
            ):
                return self._document, True

            self._state = CacheState.STALE
            document = build()

            self._document = document
            self._route_count = route_count
            self._policy_version = policy_version
            self._state = CacheState.FRESH
            self.builds += 1
            return document, False
