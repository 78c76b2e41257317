"""Mutation log: the append-only sink views and entities write to.

QuerySet and Entity only ever call append(). Reading the log back is the
business of whatever consumer later folds it into new store state.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import Any, Protocol, overload, runtime_checkable

import structlog

from deferset.core.mutation import Mutation

logger = structlog.get_logger(__name__)


@runtime_checkable
class MutationSink(Protocol):
    """Append target for mutation descriptors."""

    def append(self, mutation: Mutation) -> None:
        """Append one descriptor after every previously appended one."""
        ...


class MutationLog:
    """In-memory, append-only mutation log.

    Appends are serialized with a lock so preemptive threads sharing one
    manager keep a consistent order. Descriptors are never reordered,
    batched or deduplicated.
    """

    def __init__(self) -> None:
        self._mutations: list[Mutation] = []
        self._lock = threading.Lock()

    def append(self, mutation: Mutation) -> None:
        with self._lock:
            self._mutations.append(mutation)
            position = len(self._mutations) - 1
        logger.debug(
            "mutation.appended",
            type=mutation.type.value,
            ids=len(mutation.id_arr),
            position=position,
        )

    def __iter__(self) -> Iterator[Mutation]:
        with self._lock:
            snapshot = list(self._mutations)
        return iter(snapshot)

    def __len__(self) -> int:
        return len(self._mutations)

    @overload
    def __getitem__(self, index: int) -> Mutation: ...

    @overload
    def __getitem__(self, index: slice) -> list[Mutation]: ...

    def __getitem__(self, index: int | slice) -> Mutation | list[Mutation]:
        return self._mutations[index]

    def to_list(self) -> list[dict[str, Any]]:
        """Wire-shaped dicts for every descriptor, in append order."""
        return [mutation.to_dict() for mutation in self]

    def __repr__(self) -> str:
        return f"MutationLog({len(self._mutations)} mutations)"
