import threading
import types

import pytest

from distract.entity import Entity, EntityError, EntityInfo, EntityRegistry
from distract.vector import Vector2


def make_game():
    return types.SimpleNamespace(view="world", gui_view="gui")


def test_registry_get_returns_registered_info():
    registry = EntityRegistry()
    info = EntityInfo(type=3)
    registry.register(info)
    assert registry.get(3) is info
    assert registry.get(4) is None


def test_registry_latest_registration_wins():
    registry = EntityRegistry()
    first = EntityInfo(type=1)
    second = EntityInfo(type=1, update=lambda g, e: None)
    registry.register(first)
    registry.register(second)
    assert registry.get(1) is second
    assert len(registry) == 2


def test_registry_rejects_none():
    registry = EntityRegistry()
    with pytest.raises(EntityError):
        registry.register(None)


def test_register_all_rejects_empty():
    registry = EntityRegistry()
    with pytest.raises(EntityError):
        registry.register_all([])


def test_register_all_registers_each():
    registry = EntityRegistry()
    infos = [EntityInfo(type=t) for t in (1, 2, 3)]
    registry.register_all(infos)
    assert [registry.get(t) for t in (1, 2, 3)] == infos


def test_entity_defaults_and_type():
    entity = Entity(EntityInfo(type=7))
    assert entity.type == 7
    assert entity.pos == Vector2(0, 0)
    assert entity.z == 0
    assert entity.draw_on_gui is False


def test_update_calls_callback():
    calls = []
    entity = Entity(EntityInfo(type=1, update=lambda g, e: calls.append((g, e))))
    game = make_game()
    entity.update(game)
    assert calls == [(game, entity)]


def test_update_without_callback_is_noop():
    entity = Entity(EntityInfo(type=1))
    entity.update(make_game())
    assert entity.pos == Vector2(0, 0)


def test_draw_on_gui_swaps_and_restores_view():
    seen = []
    entity = Entity(
        EntityInfo(type=1, draw=lambda g, e: seen.append(g.view)),
        draw_on_gui=True,
    )
    game = make_game()
    entity.draw(game)
    assert seen == ["gui"]
    assert game.view == "world"


def test_draw_without_gui_keeps_view():
    seen = []
    entity = Entity(EntityInfo(type=1, draw=lambda g, e: seen.append(g.view)))
    entity.draw(make_game())
    assert seen == ["world"]


def test_handle_event_returns_handler_result():
    consumer = Entity(EntityInfo(type=1, handle_event=lambda g, e, ev: ev == "x"))
    assert consumer.handle_event(make_game(), "x") is True
    assert consumer.handle_event(make_game(), "y") is False
    assert Entity(EntityInfo(type=2)).handle_event(make_game(), "x") is False


def test_start_update_runs_on_other_thread():
    threads = []
    entity = Entity(
        EntityInfo(type=1, update=lambda g, e: threads.append(threading.get_ident())),
        use_multithreading=True,
    )
    entity.start_update(make_game())
    entity.wait_update()
    assert len(threads) == 1
    assert threads[0] != threading.get_ident()


def test_wait_update_reraises_error():
    def failing(game, entity):
        raise RuntimeError("boom")

    entity = Entity(EntityInfo(type=1, update=failing), use_multithreading=True)
    entity.start_update(make_game())
    with pytest.raises(RuntimeError):
        entity.wait_update()


def test_destroy_calls_callback():
    destroyed = []
    entity = Entity(EntityInfo(type=1, destroy=lambda g, e: destroyed.append(e)))
    entity.destroy(make_game())
    assert destroyed == [entity]


def test_move_towards_reaches_target_with_unit_direction():
    entity = Entity(EntityInfo(type=1))
    target = Vector2(3, 4)
    movement = entity.move_towards(target, 5)
    assert movement.magnitude() == pytest.approx(1.0)
    assert entity.pos.x == pytest.approx(target.x)
    assert entity.pos.y == pytest.approx(target.y)


def test_move_towards_close_target_does_not_move():
    entity = Entity(EntityInfo(type=1), pos=Vector2(1, 1))
    movement = entity.move_towards(Vector2(1.01, 1), 10)
    assert movement == Vector2(0, 0)
    assert entity.pos == Vector2(1, 1)