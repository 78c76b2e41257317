"""Reference consumer of the mutation log.

Folds descriptors into a new record map, in log order. Update merges or
transforms each targeted record; Delete removes it. Identifiers missing
from the map are skipped, so descriptors over stale or empty id lists
are no-ops.

Usage:
    next_map = apply_mutations(manager.get_entity_map(), manager.mutations, "id")
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from deferset.core.mutation import Delete, Mutation, Transform, Update
from deferset.core.types import Identifier, Record


def apply_mutations(
    entity_map: Mapping[Identifier, Mapping[str, Any]],
    mutations: Iterable[Mutation],
    id_attribute: str | None = None,
) -> dict[Identifier, Record]:
    """Apply mutations to a copy of entity_map.

    Args:
        entity_map: Current id -> record map (not modified).
        mutations: Descriptors in the order they were appended.
        id_attribute: When given, transforms see the record with this id
            field merged in, the same shape QuerySet and Entity hand out.

    Returns:
        New id -> record map.

    Raises:
        TypeError: If an item is not an Update or Delete descriptor.
    """
    state = {id_: dict(record) for id_, record in entity_map.items()}
    for mutation in mutations:
        if isinstance(mutation, Update):
            for id_ in mutation.id_arr:
                if id_ not in state:
                    continue
                record = state[id_]
                if isinstance(mutation.updater, Transform) and id_attribute is not None:
                    record = {id_attribute: id_, **record}
                state[id_] = mutation.updater.apply(record)
        elif isinstance(mutation, Delete):
            for id_ in mutation.id_arr:
                state.pop(id_, None)
        else:
            raise TypeError(f"Invalid mutation: {type(mutation).__name__}")
    return state
