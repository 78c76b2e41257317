"""Updater normalization and descriptor deserialization."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from deferset.core.mutation.models import (
    Delete,
    InvalidUpdater,
    Merge,
    MergeSpec,
    Mutation,
    MutationType,
    Transform,
    Update,
)

UpdaterLike = MergeSpec | Mapping[str, Any] | Callable[[dict[str, Any]], Mapping[str, Any]]


def normalize_updater(spec: UpdaterLike) -> MergeSpec:
    """Convert the accepted updater formats to a MergeSpec variant.

    Handles:
    - Merge / Transform -> passthrough
    - Mapping -> Merge
    - Callable -> Transform

    Args:
        spec: Updater in any supported format.

    Returns:
        Normalized MergeSpec.

    Raises:
        InvalidUpdater: If spec is neither a mapping nor a callable.
    """
    if isinstance(spec, Merge | Transform):
        return spec
    if isinstance(spec, Mapping):
        return Merge(spec)
    if callable(spec):
        return Transform(spec)
    raise InvalidUpdater(
        f"Updater must be a field mapping or a record transform, got {type(spec).__name__}"
    )


def mutation_from_dict(data: Mapping[str, Any]) -> Mutation:
    """Rebuild a descriptor from its wire shape.

    Args:
        data: Dict as produced by Update.to_dict() or Delete.to_dict().

    Returns:
        The matching Update or Delete descriptor.

    Raises:
        ValueError: If the type tag is unknown.
        InvalidUpdater: If an UPDATE payload carries an unusable updater.
    """
    try:
        mutation_type = MutationType(data["type"])
    except ValueError as e:
        raise ValueError(f"Unknown mutation type: {data['type']!r}") from e

    payload = data["payload"]
    id_arr = tuple(payload["idArr"])
    if mutation_type is MutationType.UPDATE:
        return Update(id_arr=id_arr, updater=normalize_updater(payload["updater"]))
    return Delete(id_arr=id_arr)
