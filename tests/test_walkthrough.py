"""Test that the bundled world can be played through to completion.

Route:
  West of House: open the mailbox, read the leaflet, open the window, east
  Kitchen: west to the Living Room
  Living Room: take the lamp, move the rug, open the trap door, down
  Cellar (dark): the lamp lights it; take the painting, back up
  Living Room: store the painting, then kitchen, up to the Attic (dark)
  Attic: take the egg, back down and store it
"""

import pytest

from whitehouse.engine.game import Game
from whitehouse.engine.world import World


def _run(game: Game, commands: list[str]) -> list[str]:
    """Run commands, asserting each one succeeds."""
    responses = []
    for command in commands:
        result = game.process_command(command)
        assert result.success, f"{command!r} failed: {result.message}"
        responses.append(result.message)
    return responses


@pytest.fixture
def game(world: World) -> Game:
    game = Game(world)
    game.new_game()
    return game


def test_full_walkthrough(game: Game):
    _run(
        game,
        [
            "open mailbox",
            "take leaflet",
            "read leaflet",
            "open window",
            "east",
        ],
    )
    assert game.state.current_scene == "kitchen"
    assert game.state.score == 10

    _run(
        game,
        [
            "west",
            "take lamp",
            "move rug",
            "open trap door",
            "turn on lamp",
            "down",
        ],
    )
    assert game.state.current_scene == "cellar"
    assert game.state.score == 35

    _run(
        game,
        [
            "take painting",
            "up",
            "open trophy case",
            "put painting in trophy case",
        ],
    )
    assert game.state.score == 45
    assert not game.is_won

    responses = _run(
        game,
        [
            "east",
            "up",
            "take egg",
            "down",
            "west",
            "put egg in case",
        ],
    )
    assert game.is_won
    assert game.state.score == game.state.max_score == 55
    assert "won" in responses[-1]


def test_window_must_be_open(game: Game):
    result = game.process_command("east")
    assert not result.success
    assert result.message == "The window is closed."

    game.process_command("open window")
    result = game.process_command("open window")
    assert not result.success
    assert result.message == "The window is already open."


def test_enter_window(game: Game):
    _run(game, ["open window", "enter window"])
    assert game.state.current_scene == "kitchen"


def test_mailbox_is_anchored(game: Game):
    result = game.process_command("take mailbox")
    assert not result.success
    assert result.message == "It is securely anchored."


def test_leaflet_hidden_until_mailbox_opened(game: Game):
    result = game.process_command("take leaflet")
    assert not result.success
    _run(game, ["open mailbox", "take leaflet"])


def test_rug_moves_only_once(game: Game):
    _run(game, ["open window", "east", "west", "move rug"])
    result = game.process_command("move rug")
    assert not result.success
    assert "impossible to move it again" in result.message


def test_trap_door_hidden_until_rug_moved(game: Game):
    _run(game, ["open window", "east", "west"])
    assert not game.process_command("open trap door").success
    assert not game.process_command("down").success


def test_attic_is_dark_without_lamp(game: Game):
    _run(game, ["open window", "east", "up"])
    assert game.state.current_scene == "attic"
    assert "pitch dark" in game.lines[-1]
    result = game.process_command("take egg")
    assert not result.success
    assert "dark" in result.message


def test_climb_ramp_is_pointless(game: Game):
    _run(
        game,
        [
            "open window",
            "east",
            "west",
            "take lamp",
            "move rug",
            "open trap door",
            "turn on lamp",
            "down",
        ],
    )
    result = game.process_command("climb ramp")
    assert not result.success
    assert "serve no purpose" in result.message


def test_revisit_uses_visited_description(game: Game):
    responses = _run(game, ["open window", "east", "west", "east"])
    assert responses[1].startswith("You climb through the window")
    assert "You are back in the kitchen." in responses[-1]


def test_sack_holds_garlic(game: Game):
    _run(game, ["open window", "east", "take sack", "open sack"])
    result = game.process_command("inventory")
    assert "brown sack" in result.message
    assert "clove of garlic" in result.message
    assert "garlic" in game.process_command("smell garlic").message
