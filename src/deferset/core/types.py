"""Core type definitions for deferset."""

from collections.abc import Hashable
from typing import Any, TypeAlias

Identifier: TypeAlias = Hashable
"""Opaque, comparable value naming one record within the store."""

FieldName: TypeAlias = str

Record: TypeAlias = dict[FieldName, Any]
"""Plain field -> value mapping for a single record.

Records handed out by views and entities are fresh dicts. Mutating them
never touches the manager's record map.
"""
