from valkyrion.system import System


def test_new_system_has_no_entities():
    assert System().entities == set()


def test_systems_do_not_share_entities():
    a, b = System(), System()
    a.entities.add(3)
    assert 3 in a.entities
    assert 3 not in b.entities