"""Criteria normalization and matching."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from deferset.core.criteria.models import FieldEquality, MatchCriteria, Predicate

CriteriaLike = MatchCriteria | Mapping[str, Any] | Callable[[dict[str, Any]], Any]


def normalize_criteria(spec: CriteriaLike) -> MatchCriteria:
    """Convert the accepted criteria formats to a MatchCriteria variant.

    Handles:
    - FieldEquality / Predicate -> passthrough
    - Mapping -> FieldEquality
    - Callable -> Predicate

    Args:
        spec: Criteria in any supported format.

    Returns:
        Normalized MatchCriteria.

    Raises:
        TypeError: If spec is neither a mapping nor a callable.
    """
    if isinstance(spec, FieldEquality | Predicate):
        return spec
    if isinstance(spec, Mapping):
        return FieldEquality(spec)
    if callable(spec):
        return Predicate(spec)
    raise TypeError(f"Invalid match criteria: {spec!r}")


def matches(criteria: MatchCriteria, record: Mapping[str, Any]) -> bool:
    """Check whether a full record satisfies the criteria.

    Exceptions raised by a Predicate's function propagate unchanged.
    """
    if isinstance(criteria, FieldEquality):
        return criteria.matches(record)
    if isinstance(criteria, Predicate):
        return criteria.matches(record)
    raise TypeError(f"Invalid match criteria: {criteria!r}")
