"""Tests for the Entity record wrapper."""

import pytest

from deferset import Delete, Entity, InvalidUpdater, Merge, Transform, Update


def test_get_id_uses_manager_id_attribute(letters):
    entity = Entity(letters, {"id": 2, "name": "b"})

    assert entity.get_id() == 2
    assert entity.id == 2


def test_custom_id_attribute(sink):
    from deferset import EntityManager

    manager = EntityManager({"a1": {"name": "a"}}, id_attribute="uuid", mutations=sink)
    entity = manager.get({"uuid": "a1"})

    entity.delete()

    assert entity.get_id() == "a1"
    assert sink.appended == [Delete(id_arr=("a1",))]


def test_field_access(letters):
    entity = Entity(letters, {"id": 1, "name": "a"})

    assert entity["name"] == "a"
    assert entity.get("name") == "a"
    assert entity.get("missing", "dflt") == "dflt"
    assert "name" in entity
    assert "missing" not in entity
    with pytest.raises(KeyError):
        entity["missing"]


def test_props_are_copied(letters):
    props = {"id": 1, "name": "a"}
    entity = Entity(letters, props)
    props["name"] = "changed"

    assert entity["name"] == "a"


def test_update_changes_local_values_and_appends_once(letters):
    entity = letters.get({"id": 1})

    entity.update({"name": "z", "score": 3})

    assert entity["name"] == "z"
    assert entity["score"] == 3
    assert list(letters.mutations) == [
        Update(id_arr=(1,), updater=Merge({"name": "z", "score": 3}))
    ]


def test_update_does_not_touch_manager_state(letters):
    entity = letters.get({"id": 1})

    entity.update({"name": "z"})

    assert letters.get_entity_map()[1] == {"name": "a"}
    assert letters.get({"id": 1})["name"] == "a"


def test_set_is_single_field_update(letters):
    entity = letters.get({"id": 2})

    entity.set("name", "y")

    assert entity["name"] == "y"
    assert list(letters.mutations) == [Update(id_arr=(2,), updater=Merge({"name": "y"}))]


def test_setitem_delegates_to_set(letters):
    entity = letters.get({"id": 3})

    entity["name"] = "w"

    assert entity["name"] == "w"
    assert len(letters.mutations) == 1


def test_update_with_transform_applies_locally(letters):
    def shout(record):
        return {**record, "name": record["name"].upper()}

    entity = letters.get({"id": 3})
    entity.update(shout)

    assert entity["name"] == "C"
    assert list(letters.mutations) == [Update(id_arr=(3,), updater=Transform(shout))]


def test_update_logs_the_id_after_the_change(letters):
    """Update and a later delete from the same wrapper target the same id."""
    entity = letters.get({"id": 1})

    entity.update({"id": 100})
    entity.delete()

    assert entity.get_id() == 100
    assert list(letters.mutations) == [
        Update(id_arr=(100,), updater=Merge({"id": 100})),
        Delete(id_arr=(100,)),
    ]


def test_invalid_updater_changes_nothing(letters):
    entity = letters.get({"id": 1})

    with pytest.raises(InvalidUpdater):
        entity.update("name=z")

    assert entity.to_plain() == {"id": 1, "name": "a"}
    assert len(letters.mutations) == 0


def test_failing_transform_changes_nothing(letters):
    entity = letters.get({"id": 1})

    with pytest.raises(ZeroDivisionError):
        entity.update(lambda record: {"n": 1 / 0})

    assert entity["name"] == "a"
    assert len(letters.mutations) == 0


def test_delete_appends_and_keeps_fields(letters):
    entity = letters.get({"id": 2})

    entity.delete()

    assert list(letters.mutations) == [Delete(id_arr=(2,))]
    assert entity.to_plain() == {"id": 2, "name": "b"}


def test_delete_of_unknown_id(letters):
    """A wrapper for id 5 records Delete{idArr: [5]} even if no record exists."""
    Entity(letters, {"id": 5}).delete()

    assert list(letters.mutations) == [Delete(id_arr=(5,))]


def test_to_plain_emits_captured_fields_only(letters):
    entity = letters.get({"id": 1})

    entity.update({"name": "z", "added": True})

    assert entity.field_names == ("id", "name")
    assert entity.to_plain() == {"id": 1, "name": "z"}
    assert entity["added"] is True


def test_to_plain_keeps_captured_fields_dropped_by_transform(letters):
    entity = letters.get({"id": 1})

    entity.update(lambda record: {"id": record["id"]})

    assert entity.to_plain() == {"id": 1, "name": None}


def test_wrappers_are_independent_lenses(letters):
    first = letters.get({"id": 1})
    second = letters.get({"id": 1})

    first.set("name", "z")

    assert second["name"] == "a"
    assert first != second
