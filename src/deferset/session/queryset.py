"""QuerySet: an ordered, chainable view over record identifiers.

Usage:
    qs = manager.all()

    # Narrowing and ordering return new query sets
    short = qs.filter({"genre": "poetry"}).exclude(lambda b: b["pages"] > 200)
    ordered = short.order_by("author", "title")

    # Reading
    ordered.count(), ordered.exists(), ordered.get_full_entities()
    ordered.first(), ordered.last(), ordered.at(2)
    for book in ordered:
        ...

    # Deferred mutations (appended to manager.mutations)
    ordered.update({"discounted": True})
    ordered.update(lambda b: {**b, "pages": b["pages"] + 1})
    ordered.delete()
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

import structlog

from deferset.core.criteria import CriteriaLike, matches, normalize_criteria
from deferset.core.mutation import Delete, Update, UpdaterLike, normalize_updater
from deferset.core.types import Identifier, Record
from deferset.session.entity import Entity

if TYPE_CHECKING:
    from deferset.session.manager import Manager

logger = structlog.get_logger(__name__)


def _type_rank(value: Any) -> str:
    """Group name for mixed-type fields: numbers together, otherwise by type."""
    if isinstance(value, int | float):
        return ""
    return type(value).__name__


def _sort_key(record: Record, field_names: tuple[str, ...]) -> tuple[Any, ...]:
    """Ascending key with missing or None values placed after present ones.

    Present values of different types are grouped by type name first, so
    schema-less fields (e.g. ints mixed with strings) still sort.
    """
    key: list[Any] = []
    for name in field_names:
        value = record.get(name)
        key.append((True, "", None) if value is None else (False, _type_rank(value), value))
    return tuple(key)


class QuerySet:
    """Immutable, ordered handle over a sequence of record identifiers.

    - narrows with filter() and exclude(), reorders with order_by()
    - records mutations with update() and delete() without touching the
      manager's record map

    Identifiers are kept in order and never deduplicated. A query set only
    ever narrows or reorders the identifiers it was built from.

    Gotcha: a query set reads whatever record map the manager holds at call
    time. Do not keep one across a point where the log gets applied.

    Args:
        manager: Manager providing records, the id attribute and the sink.
        ids: Identifiers this query set covers, in order.
    """

    __slots__ = ("_manager", "_ids")

    def __init__(self, manager: Manager, ids: Iterable[Identifier] = ()):
        self._manager = manager
        self._ids: tuple[Identifier, ...] = tuple(ids)

    def _new(self, ids: Iterable[Identifier]) -> QuerySet:
        return QuerySet(self._manager, ids)

    @property
    def manager(self) -> Manager:
        return self._manager

    @property
    def ids(self) -> tuple[Identifier, ...]:
        """Identifiers in this query set, in order."""
        return self._ids

    def get_full_entities(self) -> list[Record]:
        """Plain records for every identifier, id field included.

        An identifier the manager holds nothing for yields a record with only
        the id field.
        """
        id_attribute = self._manager.get_id_attribute()
        entity_map = self._manager.get_entity_map()
        return [{id_attribute: id_, **entity_map.get(id_, {})} for id_ in self._ids]

    def count(self) -> int:
        return len(self._ids)

    def exists(self) -> bool:
        return self.count() > 0

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return self.exists()

    def __iter__(self) -> Iterator[Entity]:
        """Iterate Entity wrappers built from the full records.

        Stale identifiers still materialize (as id-only entities).
        """
        for record in self.get_full_entities():
            yield Entity(self._manager, record)

    def entities(self) -> list[Entity]:
        """All Entity wrappers, in order."""
        return list(self)

    def at(self, index: int) -> Entity:
        """Entity at position index, resolved through the manager.

        Negative indices count from the end. An out-of-range index resolves
        the id None, which the manager reports as RecordNotFound.

        Raises:
            RecordNotFound: If no record exists for the identifier.
        """
        id_ = self._ids[index] if -len(self._ids) <= index < len(self._ids) else None
        return self._manager.get({self._manager.get_id_attribute(): id_})

    def first(self) -> Entity:
        return self.at(0)

    def last(self) -> Entity:
        return self.at(self.count() - 1)

    def all(self) -> QuerySet:
        """New query set over the same identifiers."""
        return self._new(self._ids)

    def _partition(self, criteria: CriteriaLike, keep: bool) -> QuerySet:
        spec = normalize_criteria(criteria)
        return self._new(
            id_
            for id_, record in zip(self._ids, self.get_full_entities(), strict=True)
            if matches(spec, record) is keep
        )

    def filter(self, criteria: CriteriaLike) -> QuerySet:
        """New query set with the records matching criteria, in order.

        Args:
            criteria: Field -> value mapping (all fields must be equal) or a
                predicate over the full record.
        """
        result = self._partition(criteria, keep=True)
        logger.debug("queryset.filter", before=self.count(), after=result.count())
        return result

    def exclude(self, criteria: CriteriaLike) -> QuerySet:
        """New query set with the records not matching criteria, in order.

        filter(c) and exclude(c) split this query set into two disjoint parts.
        """
        result = self._partition(criteria, keep=False)
        logger.debug("queryset.exclude", before=self.count(), after=result.count())
        return result

    def order_by(self, *field_names: str) -> QuerySet:
        """New query set sorted ascending by field_names, left to right.

        The sort is stable: records equal on every listed field keep their
        relative order. Missing or None values sort last for their key, and
        values of different types are grouped by type before comparing.

        Raises:
            TypeError: If same-typed values for a field cannot be ordered.
        """
        pairs = sorted(
            zip(self._ids, self.get_full_entities(), strict=True),
            key=lambda pair: _sort_key(pair[1], field_names),
        )
        logger.debug("queryset.order_by", fields=list(field_names), count=len(pairs))
        return self._new(id_ for id_, _ in pairs)

    def update(self, updater: UpdaterLike) -> None:
        """Record an update of every record in this query set.

        Args:
            updater: Field mapping to shallow-merge into each record, or a
                transform from the old record to the new one.

        Raises:
            InvalidUpdater: If updater is neither; nothing is appended.
        """
        spec = normalize_updater(updater)
        self._manager.mutations.append(Update(id_arr=self._ids, updater=spec))

    def delete(self) -> None:
        """Record a deletion of every record in this query set."""
        self._manager.mutations.append(Delete(id_arr=self._ids))

    def __repr__(self) -> str:
        return f"QuerySet({list(self._ids)!r})"
