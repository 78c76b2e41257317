"""Manager contract and the in-memory EntityManager.

QuerySet and Entity only depend on the Manager protocol: an id attribute,
a read-only record map, a mutation sink and a single-record lookup.

Usage:
    manager = EntityManager({1: {"name": "a"}, 2: {"name": "b"}})

    manager.all().filter({"name": "b"}).update({"name": "z"})
    book = manager.get({"id": 1})

    next_map = manager.next_state()   # fold the log into a new record map
    manager = EntityManager(next_map)  # fresh snapshot, old views are stale
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

import structlog

from deferset.config import ManagerSettings
from deferset.core.criteria import FieldEquality
from deferset.core.types import Identifier, Record
from deferset.reducer import apply_mutations
from deferset.session.entity import Entity
from deferset.session.log import MutationLog, MutationSink
from deferset.session.queryset import QuerySet

if TYPE_CHECKING:
    from deferset.core.criteria import CriteriaLike

logger = structlog.get_logger(__name__)


class RecordNotFound(KeyError):
    """Raised when a lookup resolves to no record."""

    pass


class Manager(Protocol):
    """What query sets and entities need from the owner of the record map."""

    mutations: MutationSink

    def get_id_attribute(self) -> str:
        """Field name used as identifier across all records."""
        ...

    def get_entity_map(self) -> Mapping[Identifier, Mapping[str, Any]]:
        """Read-only snapshot of id -> record data."""
        ...

    def get(self, lookup: Mapping[str, Any]) -> Entity:
        """Resolve a lookup to an Entity, raising RecordNotFound if none matches."""
        ...


class EntityManager:
    """In-memory owner of a record map and its mutation log.

    The record map is copied at construction and exposed read-only; it only
    changes by building a new manager over next_state().

    Args:
        entity_map: Mapping of identifier -> record (id field optional).
        id_attribute: Identifier field name (defaults to settings).
        mutations: Sink to append to (defaults to a fresh MutationLog).
        settings: Manager settings used when id_attribute is None.
    """

    def __init__(
        self,
        entity_map: Mapping[Identifier, Mapping[str, Any]] | None = None,
        *,
        id_attribute: str | None = None,
        mutations: MutationSink | None = None,
        settings: ManagerSettings | None = None,
    ):
        if id_attribute is None:
            id_attribute = (settings or ManagerSettings()).id_attribute
        self._id_attribute = id_attribute
        self._entity_map: dict[Identifier, Record] = {
            id_: dict(record) for id_, record in (entity_map or {}).items()
        }
        self.mutations: MutationSink = mutations if mutations is not None else MutationLog()

    def get_id_attribute(self) -> str:
        return self._id_attribute

    def get_entity_map(self) -> Mapping[Identifier, Mapping[str, Any]]:
        return MappingProxyType(self._entity_map)

    def get_full_entity(self, id_: Identifier) -> Record:
        """Record for id_ with the id field merged in (id-only if unknown)."""
        return {self._id_attribute: id_, **self._entity_map.get(id_, {})}

    def get(self, lookup: Mapping[str, Any]) -> Entity:
        """Resolve a field lookup to an Entity.

        A lookup naming only the id field is a direct map access. Any other
        lookup returns the first record, in map order, whose fields all match.

        Args:
            lookup: Field -> value mapping.

        Returns:
            Entity over the matched record.

        Raises:
            RecordNotFound: If no record matches.
        """
        if set(lookup) == {self._id_attribute}:
            id_ = lookup[self._id_attribute]
            if id_ in self._entity_map:
                return Entity(self, self.get_full_entity(id_))
        else:
            criteria = FieldEquality(lookup)
            for id_ in self._entity_map:
                record = self.get_full_entity(id_)
                if criteria.matches(record):
                    return Entity(self, record)

        logger.debug("manager.record_not_found", lookup=dict(lookup))
        raise RecordNotFound(f"No record matches {dict(lookup)!r}")

    def all(self) -> QuerySet:
        """QuerySet over every identifier, in map order."""
        return QuerySet(self, self._entity_map.keys())

    def filter(self, criteria: CriteriaLike) -> QuerySet:
        return self.all().filter(criteria)

    def exclude(self, criteria: CriteriaLike) -> QuerySet:
        return self.all().exclude(criteria)

    def order_by(self, *field_names: str) -> QuerySet:
        return self.all().order_by(*field_names)

    def next_state(self) -> dict[Identifier, Record]:
        """Record map with every logged mutation applied, in log order.

        Raises:
            TypeError: If the injected sink cannot be read back.
        """
        if not isinstance(self.mutations, MutationLog):
            raise TypeError(
                f"next_state() needs a readable MutationLog, got {type(self.mutations).__name__}"
            )
        return apply_mutations(self._entity_map, self.mutations, self._id_attribute)

    def __repr__(self) -> str:
        return (
            f"EntityManager({len(self._entity_map)} records, "
            f"id_attribute={self._id_attribute!r})"
        )
