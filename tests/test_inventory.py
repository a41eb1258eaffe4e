"""Tests for inventory mechanics."""

from whitehouse.engine.commands import Dispatcher
from whitehouse.engine.loader import build_world
from whitehouse.engine.mechanics.context import GameContext
from whitehouse.engine.mechanics.inventory import MAX_INVENTORY_WEIGHT
from whitehouse.engine.state import new_game_state


def test_add_sets_flag_and_awards_once(ctx: GameContext, small_world):
    sack = small_world.object("sack")
    assert ctx.inventory.add_object_to_inventory(sack).success
    assert ctx.inventory.has_item(sack)
    assert ctx.flags.has_flag("sackHas")
    assert ctx.state.score == 3

    assert not ctx.inventory.add_object_to_inventory(sack).success
    ctx.inventory.remove_object_from_inventory(sack)
    assert ctx.inventory.add_object_to_inventory(sack).success
    assert ctx.state.score == 3


def test_untakeable_rejected(ctx: GameContext, small_world):
    statue = small_world.object("statue")
    outcome = ctx.inventory.add_object_to_inventory(statue)
    assert not outcome.success
    assert not ctx.inventory.has_item(statue)


def test_weight_limit_rejects_without_partial_add(ctx: GameContext, small_world):
    anvil = small_world.object("anvil")
    sack = small_world.object("sack")
    assert ctx.inventory.add_object_to_inventory(anvil).success

    outcome = ctx.inventory.add_object_to_inventory(sack)

    assert not outcome.success
    assert "heavy" in outcome.message
    assert not ctx.inventory.has_item(sack)
    assert ctx.inventory.get_current_weight() == 19
    assert ctx.inventory.get_current_weight() <= MAX_INVENTORY_WEIGHT
    assert ctx.state.score == 0


def test_max_weight_is_twenty(ctx: GameContext):
    assert ctx.inventory.get_max_inventory_weight() == 20


def test_remove_records_location(ctx: GameContext, small_world):
    key = small_world.object("key")
    assert not ctx.inventory.remove_object_from_inventory(key).success

    ctx.inventory.add_object_to_inventory(key)
    ctx.scenes.move_to("cellar")
    assert ctx.inventory.remove_object_from_inventory(key).success

    assert not ctx.inventory.has_item(key)
    assert ctx.scenes.scene_of("key") == "cellar"
    assert key in ctx.scenes.objects_in_scene("cellar")
    assert key not in ctx.scenes.objects_in_scene("kitchen")


def test_list_and_describe(ctx: GameContext, small_world):
    assert "empty-handed" in ctx.inventory.describe()
    ctx.inventory.add_object_to_inventory(small_world.object("key"))
    ctx.inventory.add_object_to_inventory(small_world.object("torch"))

    assert [obj.id for obj in ctx.inventory.list_inventory()] == ["key", "torch"]
    text = ctx.inventory.describe()
    assert "key" in text
    assert "2/20" in text


def test_weight_counts_contents_of_carried_containers(small_world_data):
    small_world_data["scenes"]["kitchen"]["objects"]["sack"]["isContainer"] = True
    small_world_data["scenes"]["kitchen"]["objects"]["sack"]["open"] = True
    dispatcher = Dispatcher(build_world(small_world_data))
    state = new_game_state(dispatcher.world)
    for command in ("take sack", "take key", "put key in sack"):
        state, result = dispatcher.dispatch(state, command)
        assert result.success, command

    ctx = GameContext(dispatcher.world, state)
    assert not ctx.inventory.has_item(dispatcher.world.object("key"))
    assert ctx.inventory.get_current_weight() == 3

    state, result = dispatcher.dispatch(state, "take anvil")
    assert not result.success
    assert "too heavy" in result.message
    assert not state.flags.get("anvilHas")


def test_taking_from_carried_container_keeps_weight(small_world_data):
    small_world_data["scenes"]["kitchen"]["objects"]["sack"]["isContainer"] = True
    small_world_data["scenes"]["kitchen"]["objects"]["sack"]["open"] = True
    world = build_world(small_world_data)
    ctx = GameContext(world, new_game_state(world))
    sack, key = world.object("sack"), world.object("key")
    ctx.inventory.add_object_to_inventory(sack)
    ctx.containers.add_to_container(sack, key)

    assert ctx.inventory.add_object_to_inventory(key).success
    assert ctx.inventory.has_item(key)
    assert ctx.containers.contents("sack") == []
    assert ctx.inventory.get_current_weight() == 3
