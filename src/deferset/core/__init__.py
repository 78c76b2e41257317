"""Core: stateless building blocks (criteria, mutation descriptors, types).

Architecture Note:
    core/ holds pure values and functions. session/ holds the stateful
    lenses (QuerySet, Entity) and the manager that owns the record map
    and the mutation log.
"""

from deferset.core.criteria import (
    CriteriaLike,
    FieldEquality,
    MatchCriteria,
    Predicate,
    matches,
    normalize_criteria,
)
from deferset.core.mutation import (
    Delete,
    InvalidUpdater,
    Merge,
    MergeSpec,
    Mutation,
    MutationType,
    Transform,
    Update,
    UpdaterLike,
    mutation_from_dict,
    normalize_updater,
)
from deferset.core.types import FieldName, Identifier, Record

__all__ = [
    # Types
    "Identifier",
    "FieldName",
    "Record",
    # Criteria
    "FieldEquality",
    "Predicate",
    "MatchCriteria",
    "CriteriaLike",
    "normalize_criteria",
    "matches",
    # Mutations
    "MutationType",
    "Merge",
    "Transform",
    "MergeSpec",
    "Update",
    "Delete",
    "Mutation",
    "InvalidUpdater",
    "UpdaterLike",
    "normalize_updater",
    "mutation_from_dict",
]
