"""Entity: a mutable snapshot of one record that records deferred mutations.

Usage:
    book = manager.get({"id": 1})
    book["title"]                 # read
    book.set("title", "Dune")     # local change + Update intent
    book.update({"pages": 412})   # same, several fields
    book.delete()                 # Delete intent, local fields untouched
    book.to_plain()               # exactly the fields captured at construction
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from deferset.core.mutation import Delete, Merge, Update, UpdaterLike, normalize_updater
from deferset.core.types import Identifier, Record

if TYPE_CHECKING:
    from deferset.session.manager import Manager


class Entity:
    """Read/local-write lens over one record.

    Updates are applied to this instance immediately and appended to the
    manager's mutation log for later application, so the wrapper runs ahead
    of the manager's record map until the log is folded in.

    Gotcha: field names are captured at construction. to_plain() always
    emits exactly that field set, even after updates add other fields.

    Args:
        manager: Manager providing the id attribute and the mutation sink.
        props: Full record, identifier field included.
    """

    __slots__ = ("_manager", "_field_names", "_values")

    def __init__(self, manager: Manager, props: Mapping[str, Any]):
        self._manager = manager
        self._field_names: tuple[str, ...] = tuple(props)
        self._values: dict[str, Any] = dict(props)

    @property
    def manager(self) -> Manager:
        return self._manager

    @property
    def field_names(self) -> tuple[str, ...]:
        """Field names captured at construction, in order."""
        return self._field_names

    @property
    def id(self) -> Identifier:
        return self.get_id()

    def get_id(self) -> Identifier:
        """Value of the identifier field among the current values."""
        return self._values.get(self._manager.get_id_attribute())

    def get(self, field_name: str, default: Any = None) -> Any:
        """Current value of a field, or default if absent."""
        return self._values.get(field_name, default)

    def __getitem__(self, field_name: str) -> Any:
        """Current value of a field: book["title"].

        Raises:
            KeyError: If the field is absent.
        """
        return self._values[field_name]

    def __setitem__(self, field_name: str, value: Any) -> None:
        """Equivalent to set(field_name, value)."""
        self.set(field_name, value)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._values

    def to_plain(self) -> Record:
        """Plain record with exactly the captured field names.

        A captured field dropped by a transform is emitted as None.
        """
        return {name: self._values.get(name) for name in self._field_names}

    def set(self, field_name: str, value: Any) -> None:
        """Record a single field assignment."""
        self.update({field_name: value})

    def update(self, updater: UpdaterLike) -> None:
        """Apply updater locally and record it for this record.

        The logged id is read after the local change, so an update of the
        id field targets the new id, as does a later delete().

        Args:
            updater: Field mapping to merge, or a transform from the current
                record to the new one.

        Raises:
            InvalidUpdater: If updater is neither; nothing is changed or logged.
        """
        spec = normalize_updater(updater)
        if isinstance(spec, Merge):
            self._values.update(spec.fields)
        else:
            self._values = spec.apply(self._values)
        self._manager.mutations.append(Update(id_arr=(self.get_id(),), updater=spec))

    def delete(self) -> None:
        """Record this record for deletion."""
        self._manager.mutations.append(Delete(id_arr=(self.get_id(),)))

    def __repr__(self) -> str:
        return f"Entity({self._values!r})"
