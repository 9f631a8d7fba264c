from dataclasses import dataclass

import pytest

from valkyrion.components import ECSError
from valkyrion.coordinator import Coordinator
from valkyrion.entity import MAX_ENTITIES, Signature


@dataclass
class Transform:
    x: float
    y: float
    z: float


@dataclass
class RigidBody:
    vx: float
    vy: float


@pytest.fixture
def coord():
    c = Coordinator()
    c.init()
    c.register_component(Transform)
    c.register_component(RigidBody)
    return c


def test_component_types_follow_registration_order(coord):
    assert coord.get_component_type(Transform) == 0
    assert coord.get_component_type(RigidBody) == 1


def test_register_twice_raises(coord):
    with pytest.raises(ECSError):
        coord.register_component(Transform)


def test_unregistered_type_raises(coord):
    class Other:
        pass

    with pytest.raises(ECSError):
        coord.get_component_type(Other)
    with pytest.raises(ECSError):
        coord.add_component(coord.create_entity(), Other())
    assert not coord.has_component(0, Other)


def test_entities_are_distinct(coord):
    ids = [coord.create_entity() for _ in range(10)]
    assert len(set(ids)) == len(ids)
    assert coord.living_count == len(ids)


def test_add_and_get_components(coord):
    e1 = coord.create_entity()
    coord.add_component(e1, Transform(1.0, 2.0, 3.0))
    coord.add_component(e1, RigidBody(10.0, 20.0))
    e2 = coord.create_entity()
    coord.add_component(e2, Transform(4.0, 5.0, 6.0))

    assert coord.get_component(e1, Transform) == Transform(1.0, 2.0, 3.0)
    assert coord.get_component(e1, RigidBody) == RigidBody(10.0, 20.0)
    assert coord.get_component(e2, Transform) == Transform(4.0, 5.0, 6.0)
    assert coord.has_component(e1, RigidBody)
    assert not coord.has_component(e2, RigidBody)


def test_add_existing_component_updates_it(coord):
    e = coord.create_entity()
    coord.add_component(e, Transform(1.0, 1.0, 1.0))
    coord.add_component(e, Transform(2.0, 2.0, 2.0))
    assert coord.get_component(e, Transform) == Transform(2.0, 2.0, 2.0)


def test_get_component_returns_shared_object(coord):
    e = coord.create_entity()
    coord.add_component(e, Transform(1.0, 2.0, 3.0))
    coord.get_component(e, Transform).x = 9.0
    assert coord.get_component(e, Transform).x == 9.0


def test_remove_component(coord):
    e = coord.create_entity()
    coord.add_component(e, Transform(1.0, 2.0, 3.0))
    coord.remove_component(e, Transform)
    assert not coord.has_component(e, Transform)
    with pytest.raises(ECSError):
        coord.get_component(e, Transform)


def test_remove_missing_component_raises(coord):
    e = coord.create_entity()
    with pytest.raises(ECSError):
        coord.remove_component(e, Transform)


def test_destroy_removes_components(coord):
    keep = coord.create_entity()
    gone = coord.create_entity()
    coord.add_component(keep, Transform(1.0, 2.0, 3.0))
    coord.add_component(gone, Transform(4.0, 5.0, 6.0))
    coord.destroy_entity(gone)
    assert not coord.has_component(gone, Transform)
    with pytest.raises(ECSError):
        coord.get_component(gone, Transform)
    assert coord.get_component(keep, Transform) == Transform(1.0, 2.0, 3.0)


def test_destroyed_id_is_recycled(coord):
    coord.create_entity()
    temp = coord.create_entity()
    coord.destroy_entity(temp)
    assert coord.create_entity() == temp


def test_recycling_is_first_in_first_out(coord):
    coord.create_entity()
    a = coord.create_entity()
    b = coord.create_entity()
    coord.destroy_entity(a)
    coord.destroy_entity(b)
    assert [coord.create_entity(), coord.create_entity()] == [a, b]


def test_destroying_all_restarts_numbering(coord):
    first = coord.create_entity()
    entities = [first] + [coord.create_entity() for _ in range(999)]
    for e in entities:
        coord.add_component(e, Transform(float(e), float(e), float(e)))
    for e in entities:
        coord.destroy_entity(e)
    assert coord.living_count == 0
    assert coord.create_entity() == first


def test_destroy_out_of_range_raises(coord):
    with pytest.raises(ECSError):
        coord.destroy_entity(MAX_ENTITIES)


def test_entity_limit(coord):
    for _ in range(MAX_ENTITIES):
        coord.create_entity()
    with pytest.raises(ECSError):
        coord.create_entity()
    assert coord.living_count == MAX_ENTITIES


def test_init_resets_state(coord):
    e = coord.create_entity()
    coord.add_component(e, Transform(1.0, 2.0, 3.0))
    coord.init()
    assert coord.living_count == 0
    assert not coord.has_component(e, Transform)
    with pytest.raises(ECSError):
        coord.get_component_type(Transform)


def test_set_system_signature(coord):
    sig = Signature()
    sig.set(coord.get_component_type(RigidBody))
    coord.set_system_signature(sig)
    assert coord.system_signature.test(coord.get_component_type(RigidBody))
    assert not coord.system_signature.test(coord.get_component_type(Transform))