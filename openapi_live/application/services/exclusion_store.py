"""Exclusion store: the runtime control surface for the exclusion policy.

Holds one ExclusionPolicy for the lifetime of a plugin instance and exposes
the only operations allowed to change it. Every operation that changes the
policy bumps a monotonic version and notifies listeners (the schema cache)
before returning. Removals that remove nothing change nothing, so they do
not invalidate.

All mutators return the store so calls chain:

    store.add_excluded_paths("/internal").add_excluded_tags("admin")

Thread safety: every read and write holds the lock shared with the schema
cache, so a reader never sees a policy without its matching version.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from typing import Any

from openapi_live.domain.protocols.logger_protocol import LoggerProtocol
from openapi_live.domain.value_objects.exclusion_policy import (
    ExclusionPolicy,
    PathEntry,
    difference,
    same_path_entry,
    union,
)


class ExclusionStore:
    """Owns the current exclusion policy.

    Args:
        initial: Initial policy (copied), or None for "exclude nothing".
        lock: Lock shared with the schema cache.
        logger: Structured logger; mutations are logged at info level.
        on_change: Listeners called after every state change.
    """

    def __init__(
        self,
        initial: ExclusionPolicy | Mapping[str, Any] | None = None,
        *,
        lock: threading.RLock | None = None,
        logger: LoggerProtocol | None = None,
        on_change: list[Callable[[], None]] | None = None,
    ) -> None:
        self._lock = lock or threading.RLock()
        self._logger = logger
        self._listeners: list[Callable[[], None]] = list(on_change or ())
        self._policy = ExclusionPolicy.from_value(initial)
        self._version = 0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        """Monotonic counter, incremented on every state change."""
        with self._lock:
            return self._version

    @property
    def policy(self) -> ExclusionPolicy | None:
        """Current policy (immutable, safe to hand out)."""
        with self._lock:
            return self._policy

    def snapshot(self) -> tuple[ExclusionPolicy | None, int]:
        """Policy and version read atomically."""
        with self._lock:
            return self._policy, self._version

    def get_exclusion(self) -> ExclusionPolicy | None:
        """Current exclusion configuration.

        The returned policy is frozen: callers cannot change store state
        through it.
        """
        return self.policy

    def add_listener(self, listener: Callable[[], None]) -> None:
        """Register a callback run after every state change."""
        with self._lock:
            self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_exclusion(
        self, policy: ExclusionPolicy | Mapping[str, Any] | None = None
    ) -> "ExclusionStore":
        """Replace the whole policy (None clears it). Always invalidates."""
        with self._lock:
            self._commit(ExclusionPolicy.from_value(policy), "set_exclusion", force=True)
        return self

    def add_excluded_paths(self, *paths: PathEntry) -> "ExclusionStore":
        """Append path entries, creating the path list if absent."""
        if not paths:
            return self
        with self._lock:
            current = self._policy or ExclusionPolicy()
            merged = list(current.path_entries)
            for path in paths:
                if not any(same_path_entry(path, existing) for existing in merged):
                    merged.append(path)
            self._commit(self._replace(current, paths=tuple(merged)), "add_excluded_paths")
        return self

    def remove_excluded_paths(self, *paths: PathEntry) -> "ExclusionStore":
        """Remove path entries; patterns match by source and flags."""
        with self._lock:
            current = self._policy
            if current is None or current.paths is None:
                return self
            survivors = tuple(
                entry
                for entry in current.path_entries
                if not any(same_path_entry(entry, path) for path in paths)
            )
            self._commit(self._replace(current, paths=survivors), "remove_excluded_paths")
        return self

    def add_excluded_tags(self, *tags: str) -> "ExclusionStore":
        """Union tags into the excluded tag list."""
        if not tags:
            return self
        with self._lock:
            current = self._policy or ExclusionPolicy()
            self._commit(
                self._replace(current, tags=union(current.tags, tags)),
                "add_excluded_tags",
            )
        return self

    def remove_excluded_tags(self, *tags: str) -> "ExclusionStore":
        """Remove tags from the excluded tag list."""
        with self._lock:
            current = self._policy
            if current is None or current.tags is None:
                return self
            self._commit(
                self._replace(current, tags=difference(current.tags, tags)),
                "remove_excluded_tags",
            )
        return self

    def add_excluded_methods(self, *methods: str) -> "ExclusionStore":
        """Union methods (case-insensitive) into the excluded method list."""
        if not methods:
            return self
        with self._lock:
            current = self._policy or ExclusionPolicy()
            self._commit(
                self._replace(
                    current, methods=union(current.methods, methods, fold_case=True)
                ),
                "add_excluded_methods",
            )
        return self

    def remove_excluded_methods(self, *methods: str) -> "ExclusionStore":
        """Remove methods (case-insensitive) from the excluded method list."""
        with self._lock:
            current = self._policy
            if current is None or current.methods is None:
                return self
            self._commit(
                self._replace(
                    current,
                    methods=difference(current.methods, methods, fold_case=True),
                ),
                "remove_excluded_methods",
            )
        return self

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _replace(current: ExclusionPolicy, **changes: Any) -> ExclusionPolicy:
        values: dict[str, Any] = {
            "paths": current.paths,
            "tags": current.tags,
            "methods": current.methods,
        }
        values.update(changes)
        return ExclusionPolicy(**values)

    def _commit(
        self, policy: ExclusionPolicy | None, operation: str, *, force: bool = False
    ) -> None:
        # Caller holds the lock.
        if not force and policy == self._policy:
            return
        self._policy = policy
        self._version += 1
        for listener in self._listeners:
            listener()
        if self._logger is not None:
            self._logger.info(
                "openapi_exclusion_updated",
                operation=operation,
                version=self._version,
                exclusion=policy.to_dict() if policy is not None else None,
            )
