"""Domain value objects."""

from openapi_live.domain.value_objects.exclusion_policy import (
    ExclusionPolicy,
    PathEntry,
    same_path_entry,
)

__all__ = ["ExclusionPolicy", "PathEntry", "same_path_entry"]
