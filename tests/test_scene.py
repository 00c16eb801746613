from dataclasses import dataclass

import pytest

from gammaray.scene import Component, ComponentSceneLink, Entity, SceneServer


@pytest.fixture
def server():
    return SceneServer()


@dataclass(eq=False)
class Health(Component):
    points: int = 100
    initialised: bool = False

    def on_init(self):
        self.initialised = True


@dataclass
class Tag:
    label: str = "tag"


class Tagged(Entity):
    def init_components(self):
        self.add_component(Tag)


def test_create_entity_sets_scene_link(server):
    entity = server.create_entity(Entity, "Mesh1", 3)
    link = entity.get_component(ComponentSceneLink)
    assert link.entity_name == "Mesh1"
    assert link.scene_id == 3
    assert entity.name == "Mesh1"


def test_scene_link_defaults(server):
    link = server.create_entity(Entity, "x").get_component(ComponentSceneLink)
    assert (link.position, link.parent, link.enabled, link.scene_id) == (0, 0, True, 0)


def test_entities_have_distinct_ids(server):
    first = server.create_entity(Entity, "a")
    second = server.create_entity(Entity, "b")
    assert first != second
    assert first.rid != second.rid


def test_create_entity_runs_init_components(server):
    entity = server.create_entity(Tagged, "t")
    assert isinstance(entity, Tagged)
    assert entity.get_component(Tag).label == "tag"


def test_add_component_sets_owner_and_calls_on_init(server):
    entity = server.create_entity(Entity, "e")
    health = entity.add_component(Health)
    assert health.initialised is True
    assert health.owner == entity
    assert health.owner.get_component(Health) is health


def test_has_and_remove_component(server):
    entity = server.create_entity(Entity, "e")
    assert entity.has_component(Health) is False
    entity.add_component(Health)
    assert entity.has_component(Health) is True
    entity.remove_component(Health)
    assert entity.has_component(Health) is False


def test_add_component_twice_raises(server):
    entity = server.create_entity(Entity, "e")
    entity.add_component(Health)
    with pytest.raises(ValueError):
        entity.add_component(Health)


def test_get_missing_component_raises(server):
    entity = server.create_entity(Entity, "e")
    with pytest.raises(KeyError):
        entity.get_component(Health)


def test_remove_missing_component_raises(server):
    entity = server.create_entity(Entity, "e")
    with pytest.raises(KeyError):
        entity.remove_component(Health)


def test_destroy_removes_entity_only(server):
    doomed = server.create_entity(Entity, "doomed")
    kept = server.create_entity(Entity, "kept")
    doomed.destroy()
    with pytest.raises(KeyError):
        doomed.get_component(ComponentSceneLink)
    assert kept.name == "kept"


def test_entity_equality_and_hash(server):
    entity = server.create_entity(Entity, "e")
    same = Entity(entity.rid, server)
    assert same == entity
    assert hash(same) == hash(entity)
    assert len({entity, same}) == 1


def test_view_returns_only_matching_entities(server):
    both = server.create_entity(Entity, "both")
    both.add_component(Health)
    both.add_component(Tag)
    server.create_entity(Entity, "health").add_component(Health)
    server.create_entity(Entity, "tag").add_component(Tag)

    rows = list(server.view(Health, Tag))
    assert [row[0] for row in rows] == [both]
    assert rows[0][1] is both.get_component(Health)
    assert rows[0][2] is both.get_component(Tag)


def test_view_needs_component_types(server):
    with pytest.raises(TypeError):
        server.view()


def test_on_update_runs_callbacks_in_order(server):
    calls = []
    server.register_for_on_update(lambda: calls.append("first"))
    server.register_for_on_update(lambda: calls.append("second"))
    server.on_update()
    assert calls == ["first", "second"]


def test_latest_server_is_singleton(server):
    assert SceneServer.get_singleton() is server
    newer = SceneServer()
    assert SceneServer.get_singleton() is newer


def test_plain_entity_uses_singleton(server):
    entity = server.create_entity(Entity, "named")
    assert Entity(entity.rid).name == "named"