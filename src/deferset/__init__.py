"""deferset: deferred-mutation query sets over an in-memory record store.

Usage:
    from deferset import EntityManager

    manager = EntityManager({1: {"name": "a"}, 2: {"name": "b"}, 3: {"name": "c"}})

    qs = manager.all().exclude({"name": "b"}).order_by("name")
    qs.update({"archived": True})     # appended to manager.mutations
    manager.get({"id": 2}).delete()   # likewise

    next_map = manager.next_state()   # fold the log into a new record map
"""

__version__ = "0.1.0"

# Core primitives
from deferset.core import (
    Delete,
    FieldEquality,
    InvalidUpdater,
    Merge,
    MergeSpec,
    Mutation,
    MutationType,
    Predicate,
    Transform,
    Update,
    mutation_from_dict,
)

# Reference log consumer
from deferset.reducer import apply_mutations

# Session
from deferset.session import (
    Entity,
    EntityManager,
    Manager,
    MutationLog,
    MutationSink,
    QuerySet,
    RecordNotFound,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "FieldEquality",
    "Predicate",
    "MutationType",
    "Merge",
    "Transform",
    "MergeSpec",
    "Update",
    "Delete",
    "Mutation",
    "InvalidUpdater",
    "mutation_from_dict",
    # Session
    "QuerySet",
    "Entity",
    "Manager",
    "EntityManager",
    "RecordNotFound",
    "MutationSink",
    "MutationLog",
    # Reducer
    "apply_mutations",
]
