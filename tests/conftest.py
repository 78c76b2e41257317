"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from deferset import EntityManager, MutationLog


class RecordingSink:
    """Minimal MutationSink that only supports append."""

    def __init__(self) -> None:
        self.appended: list = []

    def append(self, mutation) -> None:
        self.appended.append(mutation)


@pytest.fixture
def letters():
    """Manager over {1: a, 2: b, 3: c} with id field "id"."""
    return EntityManager({1: {"name": "a"}, 2: {"name": "b"}, 3: {"name": "c"}}, id_attribute="id")


@pytest.fixture
def books():
    """Manager over a small library with repeated authors and a missing field."""
    return EntityManager(
        {
            10: {"title": "Dune", "author": "Herbert", "pages": 412, "genre": "scifi"},
            11: {"title": "Emma", "author": "Austen", "pages": 474, "genre": "novel"},
            12: {"title": "Persuasion", "author": "Austen", "pages": 249, "genre": "novel"},
            13: {"title": "Ariel", "author": "Plath", "pages": 96},
            14: {"title": "Children of Dune", "author": "Herbert", "pages": 444, "genre": "scifi"},
        },
        id_attribute="id",
    )


@pytest.fixture
def log():
    """Fresh MutationLog."""
    return MutationLog()


@pytest.fixture
def sink():
    """Append-only sink that is not a MutationLog."""
    return RecordingSink()
