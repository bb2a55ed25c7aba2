import pytest

from acheron.entity import EntityManager
from acheron.types import MissingEntityError


def test_first_entity_is_zero_and_ids_are_distinct():
    manager = EntityManager()
    entities = [manager.spawn() for _ in range(5)]
    assert entities[0] == 0
    assert len(set(entities)) == len(entities)
    assert all(entity in manager for entity in entities)


def test_new_entity_has_empty_signature():
    manager = EntityManager()
    entity = manager.spawn()
    assert manager.get_signature(entity) == frozenset()


def test_despawned_ids_are_reused_in_fifo_order():
    manager = EntityManager()
    first = manager.spawn()
    second = manager.spawn()
    manager.despawn(second)
    manager.despawn(first)
    assert manager.spawn() == second
    assert manager.spawn() == first


def test_despawn_removes_entity():
    manager = EntityManager()
    entity = manager.spawn()
    manager.despawn(entity)
    assert entity not in manager
    with pytest.raises(MissingEntityError):
        manager.get_signature(entity)


def test_despawn_missing_raises():
    with pytest.raises(MissingEntityError):
        EntityManager().despawn(3)


def test_double_despawn_raises():
    manager = EntityManager()
    entity = manager.spawn()
    manager.despawn(entity)
    with pytest.raises(MissingEntityError):
        manager.despawn(entity)


def test_signature_round_trip():
    manager = EntityManager()
    entity = manager.spawn()
    manager.set_signature(entity, {1, 4})
    assert manager.get_signature(entity) == frozenset({1, 4})


def test_respawned_entity_starts_with_empty_signature():
    manager = EntityManager()
    entity = manager.spawn()
    manager.set_signature(entity, {2})
    manager.despawn(entity)
    again = manager.spawn()
    assert again == entity
    assert manager.get_signature(again) == frozenset()


def test_returned_signature_is_not_affected_by_later_changes():
    manager = EntityManager()
    entity = manager.spawn()
    manager.set_signature(entity, {1})
    before = manager.get_signature(entity)
    manager.set_signature(entity, before | {2})
    assert before == frozenset({1})
    assert manager.get_signature(entity) == frozenset({1, 2})