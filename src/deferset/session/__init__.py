"""Session layer: query sets, entities, the manager and its mutation log.

Architecture Note:
    session/ holds runtime state (the manager's record map and log) and the
    lenses over it. Unlike core/ (stateless values), everything here refers
    to one manager snapshot and only ever appends to its log.
"""

from deferset.session.entity import Entity
from deferset.session.log import MutationLog, MutationSink
from deferset.session.manager import EntityManager, Manager, RecordNotFound
from deferset.session.queryset import QuerySet

__all__ = [
    "QuerySet",
    "Entity",
    "Manager",
    "EntityManager",
    "RecordNotFound",
    "MutationSink",
    "MutationLog",
]
