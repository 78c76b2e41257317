"""Mutation descriptors: deferred update and delete intents.

Descriptors are appended to a manager's mutation log and folded into new
store state by a separate consumer. Nothing here touches a record map.

Usage:
    Update(id_arr=(1, 2), updater=Merge({"name": "z"}))
    Update(id_arr=(3,), updater=Transform(lambda book: {**book, "pages": 0}))
    Delete(id_arr=(5,))

Wire shape (to_dict):
    {"type": "UPDATE", "payload": {"idArr": [1, 2], "updater": {"name": "z"}}}
    {"type": "DELETE", "payload": {"idArr": [5]}}
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from deferset.core.types import Identifier


class InvalidUpdater(TypeError):
    """Raised when an updater is neither a field mapping nor a record transform."""

    pass


class MutationType(Enum):
    """Wire tag of a mutation descriptor."""

    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Merge:
    """Shallow-merge the given fields into each targeted record.

    Fields are copied at construction, so a caller mutating its dict later
    does not change an already logged intent.
    """

    fields: Mapping[str, Any]

    def __init__(self, fields: Mapping[str, Any]):
        object.__setattr__(self, "fields", dict(fields))

    def apply(self, record: Mapping[str, Any]) -> dict[str, Any]:
        """Return a new record with fields merged over the old one."""
        return {**record, **self.fields}


@dataclass(frozen=True)
class Transform:
    """Replace each targeted record with func(old_record)."""

    func: Callable[[dict[str, Any]], Mapping[str, Any]]

    def apply(self, record: Mapping[str, Any]) -> dict[str, Any]:
        """Return func applied to a copy of the record."""
        return dict(self.func(dict(record)))


MergeSpec = Merge | Transform


@dataclass(frozen=True)
class Update:
    """Intent to update every record named in id_arr."""

    id_arr: tuple[Identifier, ...]
    updater: MergeSpec

    @property
    def type(self) -> MutationType:
        return MutationType.UPDATE

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape. Transform updaters are emitted as the callable."""
        updater: Any = (
            dict(self.updater.fields) if isinstance(self.updater, Merge) else self.updater.func
        )
        return {
            "type": MutationType.UPDATE.value,
            "payload": {"idArr": list(self.id_arr), "updater": updater},
        }


@dataclass(frozen=True)
class Delete:
    """Intent to delete every record named in id_arr."""

    id_arr: tuple[Identifier, ...]

    @property
    def type(self) -> MutationType:
        return MutationType.DELETE

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape."""
        return {
            "type": MutationType.DELETE.value,
            "payload": {"idArr": list(self.id_arr)},
        }


Mutation = Update | Delete
