"""Mutation descriptors and updater variants."""

from deferset.core.mutation.models import (
    Delete,
    InvalidUpdater,
    Merge,
    MergeSpec,
    Mutation,
    MutationType,
    Transform,
    Update,
)
from deferset.core.mutation.operations import UpdaterLike, mutation_from_dict, normalize_updater

__all__ = [
    # Models
    "MutationType",
    "Merge",
    "Transform",
    "MergeSpec",
    "Update",
    "Delete",
    "Mutation",
    "InvalidUpdater",
    "UpdaterLike",
    # Operations
    "normalize_updater",
    "mutation_from_dict",
]
