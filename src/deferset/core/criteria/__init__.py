"""Match criteria: field equality and predicate variants."""

from deferset.core.criteria.models import FieldEquality, MatchCriteria, Predicate
from deferset.core.criteria.operations import CriteriaLike, matches, normalize_criteria

__all__ = [
    # Models
    "FieldEquality",
    "Predicate",
    "MatchCriteria",
    "CriteriaLike",
    # Operations
    "normalize_criteria",
    "matches",
]
