"""Exclusion policy value object.

Describes which routes are left out of the generated document. Three
independent dimensions, OR-ed together by the route filter:

    paths:   literal path strings and/or compiled regular expressions
    tags:    a route matches if any of its tags is listed
    methods: matched case-insensitively against the route method

A missing dimension (None) means "no filtering on that dimension".

The policy is frozen and stores tuples only. Building one from caller input
always copies, so later mutation of the caller's list or set cannot change
filtering behavior, and handing the policy out never exposes store state.

Usage:
    policy = ExclusionPolicy.from_value({"paths": ["/internal"], "tags": ["admin"]})
    policy.path_entries   # ("/internal",)
    policy.to_dict()      # {"paths": ["/internal"], "tags": ["admin"]}
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

PathEntry = str | re.Pattern[str]


def same_path_entry(left: PathEntry, right: PathEntry) -> bool:
    """Compare path entries; patterns compare by source and flags, not identity."""
    if isinstance(left, re.Pattern) and isinstance(right, re.Pattern):
        return left.pattern == right.pattern and left.flags == right.flags
    if isinstance(left, re.Pattern) or isinstance(right, re.Pattern):
        return False
    return left == right


def _as_tuple(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (str, bytes, re.Pattern)):
        return (value,)
    return tuple(value)


@dataclass(frozen=True, kw_only=True)
class ExclusionPolicy:
    """Immutable exclusion policy.

    Attributes:
        paths: None, a single entry, or a tuple of entries.
        tags: None or tuple of tag names.
        methods: None or tuple of method names.
    """

    paths: PathEntry | tuple[PathEntry, ...] | None = None
    tags: tuple[str, ...] | None = None
    methods: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        # Lists passed straight to the constructor are copied too.
        if self.paths is not None and not isinstance(self.paths, (str, re.Pattern)):
            object.__setattr__(self, "paths", tuple(self.paths))
        for name in ("tags", "methods"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _as_tuple(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExclusionPolicy):
            return NotImplemented
        if self.tags != other.tags or self.methods != other.methods:
            return False
        if (self.paths is None) != (other.paths is None):
            return False
        mine, theirs = self.path_entries, other.path_entries
        return len(mine) == len(theirs) and all(
            same_path_entry(a, b) for a, b in zip(mine, theirs)
        )

    def __hash__(self) -> int:
        entries = tuple(
            (entry.pattern, entry.flags) if isinstance(entry, re.Pattern) else entry
            for entry in self.path_entries
        )
        return hash((self.paths is None, entries, self.tags, self.methods))

    @classmethod
    def from_value(
        cls, value: "ExclusionPolicy | Mapping[str, Any] | None"
    ) -> "ExclusionPolicy | None":
        """Build an owned policy from caller input.

        Args:
            value: None, an ExclusionPolicy, or a mapping with optional
                ``paths``, ``tags`` and ``methods`` keys. ``paths`` may be a
                single string/pattern or an iterable of them.

        Returns:
            A new policy, or None when value is None.
        """
        if value is None:
            return None
        if isinstance(value, ExclusionPolicy):
            # Already frozen and tuple-backed.
            return value
        return cls(
            paths=value.get("paths"),
            tags=value.get("tags"),
            methods=value.get("methods"),
        )

    @property
    def path_entries(self) -> tuple[PathEntry, ...]:
        """Path entries as a tuple, a single scalar entry included."""
        if self.paths is None:
            return ()
        return _as_tuple(self.paths)

    @property
    def is_empty(self) -> bool:
        """True when no dimension filters anything."""
        return not (self.path_entries or self.tags or self.methods)

    def to_dict(self) -> dict[str, Any]:
        """Fresh JSON-friendly dict of the defined dimensions.

        Patterns are rendered by their source so the result can be logged.
        """
        result: dict[str, Any] = {}
        if self.paths is not None:
            result["paths"] = [
                entry.pattern if isinstance(entry, re.Pattern) else entry
                for entry in self.path_entries
            ]
        if self.tags is not None:
            result["tags"] = list(self.tags)
        if self.methods is not None:
            result["methods"] = list(self.methods)
        return result


def union(
    existing: Iterable[str] | None, additions: Iterable[str], *, fold_case: bool = False
) -> tuple[str, ...]:
    """Ordered set-union; keeps the first spelling of each entry."""
    result: list[str] = list(existing or ())
    seen = {item.upper() if fold_case else item for item in result}
    for item in additions:
        key = item.upper() if fold_case else item
        if key not in seen:
            seen.add(key)
            result.append(item)
    return tuple(result)


def difference(
    existing: Iterable[str], removals: Iterable[str], *, fold_case: bool = False
) -> tuple[str, ...]:
    """Ordered set-difference; survivors keep their insertion order."""
    drop = {item.upper() if fold_case else item for item in removals}
    return tuple(
        item for item in existing if (item.upper() if fold_case else item) not in drop
    )
