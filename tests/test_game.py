"""Tests for the Game facade."""

import pytest

from whitehouse.engine.game import Game


def test_new_game_opening_text(game: Game):
    text = game.new_game()
    assert text.startswith("A test begins.")
    assert "A small kitchen." in text
    assert game.lines == [text]


def test_transcript_records_commands_and_responses(game: Game):
    game.process_command("take key")
    assert game.lines == ["> take key", "Taken."]


def test_failed_command_keeps_state(game: Game):
    before = game.get_current_state()
    result = game.process_command("take statue")
    assert not result.success
    assert game.get_current_state() == before


def test_snapshot_restore(game: Game, small_world):
    game.process_command("take key")
    game.process_command("north")
    snapshot = game.get_current_state()

    other = Game(small_world)
    other.initialize_state(snapshot)

    assert other.state == game.state
    assert other.state.current_scene == "cellar"
    assert other.inventory_names() == ["key"]


def test_restore_unknown_scene_raises(game: Game):
    snapshot = game.get_current_state()
    snapshot["current_scene"] = "void"
    with pytest.raises(ValueError):
        game.initialize_state(snapshot)


def test_sidebar(game: Game):
    game.describe()
    game.process_command("take key")
    sidebar = game.sidebar()

    assert sidebar.location == "Kitchen"
    assert sidebar.moves == 1
    assert sidebar.score == 0
    assert sidebar.max_score == 20
    assert sidebar.exits == ["north"]
    assert "key" in sidebar.known_objects
    assert "statue" in sidebar.known_objects
    assert "gem" not in sidebar.known_objects
    assert "take" in sidebar.known_commands
    assert "north" not in sidebar.known_commands


def test_suggestions(game: Game):
    assert "take key" in game.get_suggestions("take k")
    assert game.get_suggestions("zzz") == []


def test_visible_objects(game: Game):
    game.process_command("take key")
    names = game.visible_object_names()
    assert "key" not in names
    assert "statue" in names
