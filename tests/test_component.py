from dataclasses import dataclass

import pytest

from acheron.component import ComponentManager
from acheron.types import (
    DuplicateComponentError,
    DuplicateRegistrationError,
    MissingComponentError,
    NotRegisteredError,
)


@dataclass
class Health:
    value: float = 0.0


@dataclass
class Player:
    pass


@pytest.fixture
def manager():
    manager = ComponentManager()
    manager.register_component(Health)
    manager.register_component(Player)
    return manager


def test_ids_are_assigned_in_registration_order(manager):
    assert manager.component_id(Health) == 0
    assert manager.component_id(Player) == 1


def test_duplicate_registration_raises(manager):
    with pytest.raises(DuplicateRegistrationError):
        manager.register_component(Health)


def test_unregistered_component_id_raises():
    with pytest.raises(NotRegisteredError):
        ComponentManager().component_id(Health)


def test_add_and_get_component(manager):
    health = Health(20.0)
    manager.add_component(5, Health, health)
    assert manager.get_component(5, Health) is health


def test_component_is_shared_reference(manager):
    manager.add_component(1, Health, Health(20.0))
    manager.get_component(1, Health).value -= 1
    assert manager.get_component(1, Health) == Health(19.0)


def test_add_duplicate_component_raises(manager):
    manager.add_component(1, Player, Player())
    with pytest.raises(DuplicateComponentError):
        manager.add_component(1, Player, Player())


def test_add_unregistered_component_raises():
    manager = ComponentManager()
    with pytest.raises(NotRegisteredError):
        manager.add_component(1, Health, Health())


def test_remove_component(manager):
    manager.add_component(1, Health, Health(3.0))
    manager.remove_component(1, Health)
    with pytest.raises(MissingComponentError):
        manager.get_component(1, Health)


def test_remove_missing_component_raises(manager):
    with pytest.raises(MissingComponentError):
        manager.remove_component(1, Health)


def test_entity_despawned_clears_all_types(manager):
    manager.add_component(1, Health, Health(3.0))
    manager.add_component(1, Player, Player())
    manager.add_component(2, Health, Health(4.0))
    manager.entity_despawned(1)
    with pytest.raises(MissingComponentError):
        manager.get_component(1, Health)
    with pytest.raises(MissingComponentError):
        manager.get_component(1, Player)
    assert manager.get_component(2, Health) == Health(4.0)