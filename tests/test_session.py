"""Tests for the persistence layer."""

from sqlmodel import Session, select

from whitehouse.engine.world import World
from whitehouse.models import Player, SavedGame
from whitehouse.session import GameSession, get_or_create_player


def test_get_or_create_player(db_session: Session):
    player = get_or_create_player(db_session, "fp-1")
    again = get_or_create_player(db_session, "fp-1")
    assert player.id == again.id
    assert len(db_session.exec(select(Player)).all()) == 1


def test_new_player_gets_new_game(db_session: Session, test_player: Player, world: World):
    game = GameSession.load_or_create(db_session, test_player, world)
    assert game.saved_game is None
    assert game.state.current_scene == "westOfHouse"
    assert "West of House" in game.game.lines[0]


def test_save_and_load(db_session: Session, test_player: Player, world: World):
    game = GameSession.load_or_create(db_session, test_player, world)
    game.process_command("open mailbox")
    game.process_command("take leaflet")
    game.save()

    saved = db_session.exec(select(SavedGame)).one()
    assert saved.turns == 2
    assert saved.scene == "westOfHouse"

    loaded = GameSession.load_or_create(db_session, test_player, world)
    assert loaded.saved_game is not None
    assert loaded.state == game.state
    assert loaded.game.inventory_names() == ["leaflet"]


def test_save_updates_existing_row(db_session: Session, test_player: Player, world: World):
    game = GameSession.load_or_create(db_session, test_player, world)
    game.save()
    game.process_command("open window")
    game.process_command("east")
    game.save()

    rows = db_session.exec(select(SavedGame)).all()
    assert len(rows) == 1
    assert rows[0].scene == "kitchen"
    assert rows[0].score == 10


def test_corrupt_save_is_replaced(db_session: Session, test_player: Player, world: World):
    db_session.add(SavedGame(player_id=test_player.id, state_blob=b"garbage"))
    db_session.commit()

    game = GameSession.load_or_create(db_session, test_player, world)

    assert game.saved_game is None
    assert game.state.turns == 0
    assert db_session.exec(select(SavedGame)).first() is None


def test_reset(db_session: Session, test_player: Player, world: World):
    game = GameSession.load_or_create(db_session, test_player, world)
    game.process_command("open mailbox")
    game.save()

    text = game.reset()

    assert "West of House" in text
    assert game.state.turns == 0
    assert game.saved_game is None
    assert db_session.exec(select(SavedGame)).first() is None
