"""Match criteria for narrowing query sets.

Usage:
    # Field equality (logical AND across fields)
    qs.filter({"name": "b", "published": True})

    # Predicate over the full record
    qs.filter(lambda book: book["pages"] > 300)

    # Explicit variants
    qs.exclude(FieldEquality({"name": "b"}))
    qs.exclude(Predicate(lambda book: book["pages"] > 300))
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

_MISSING = object()


@dataclass(frozen=True)
class FieldEquality:
    """Matches records whose listed fields all equal the given values.

    A field missing from the record never matches. An empty mapping matches
    every record.
    """

    fields: Mapping[str, Any]

    def __init__(self, fields: Mapping[str, Any]):
        object.__setattr__(self, "fields", dict(fields))

    def matches(self, record: Mapping[str, Any]) -> bool:
        """Check every listed field against the record."""
        return all(record.get(name, _MISSING) == value for name, value in self.fields.items())


@dataclass(frozen=True)
class Predicate:
    """Matches records for which a caller-supplied function is truthy."""

    func: Callable[[dict[str, Any]], Any]

    def matches(self, record: Mapping[str, Any]) -> bool:
        return bool(self.func(dict(record)))


MatchCriteria = FieldEquality | Predicate
