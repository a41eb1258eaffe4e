"""Shared test fixtures for White House."""

import copy
from pathlib import Path
from typing import Any

import pytest
from sqlmodel import Session, SQLModel, create_engine

from whitehouse.app import _get_data_path, create_app
from whitehouse.config import Config
from whitehouse.engine.game import Game
from whitehouse.engine.loader import build_world, load_world
from whitehouse.engine.mechanics.context import GameContext
from whitehouse.engine.state import GameState, new_game_state
from whitehouse.engine.world import World
from whitehouse.models import Player

# A two-room world small enough to reason about in a single test.
SMALL_WORLD: dict[str, Any] = {
    "title": "Test House",
    "intro": "A test begins.",
    "startScene": "kitchen",
    "maxScore": 20,
    "trophyContainer": "box",
    "scenes": {
        "kitchen": {
            "name": "Kitchen",
            "light": True,
            "descriptions": {
                "default": "A small kitchen.",
                "visited": "The kitchen again.",
            },
            "objects": {
                "sack": {
                    "name": "brown sack",
                    "visibleOnEntry": True,
                    "canTake": True,
                    "weight": 2,
                    "scoring": {"take": 3},
                    "descriptions": {"default": "A brown sack."},
                },
                "box": {
                    "name": "box",
                    "visibleOnEntry": True,
                    "isContainer": True,
                    "open": True,
                    "capacity": 1,
                    "descriptions": {"default": "A wooden box."},
                },
                "key": {
                    "name": "key",
                    "visibleOnEntry": True,
                    "canTake": True,
                    "weight": 1,
                    "descriptions": {"default": "A small key."},
                },
                "coin": {
                    "name": "gold coin",
                    "visibleOnEntry": True,
                    "canTake": True,
                    "weight": 1,
                    "isTreasure": True,
                    "containerTargets": {"box": 5},
                    "descriptions": {"default": "A gold coin."},
                },
                "anvil": {
                    "name": "anvil",
                    "visibleOnEntry": True,
                    "canTake": True,
                    "weight": 19,
                    "descriptions": {"default": "A heavy anvil."},
                },
                "statue": {
                    "name": "statue",
                    "visibleOnEntry": True,
                    "scoring": {"examine": 2},
                    "descriptions": {
                        "default": "A statue.",
                        "examine": "The statue has ruby eyes.",
                    },
                },
                "torch": {
                    "name": "torch",
                    "visibleOnEntry": True,
                    "canTake": True,
                    "weight": 1,
                    "providesLight": True,
                    "lightLife": 3,
                    "descriptions": {"default": "A torch."},
                },
                "chest": {
                    "name": "chest",
                    "visibleOnEntry": True,
                    "isContainer": True,
                    "locked": True,
                    "contents": ["gem"],
                    "descriptions": {"default": "An iron chest."},
                    "interactions": {
                        "unlock": {
                            "message": "The chest unlocks with a click.",
                            "requiredFlags": ["keyHas", "chestLocked"],
                            "failureMessage": "You have nothing to unlock it with.",
                            "removesFlags": ["chestLocked"],
                            "score": 2,
                        }
                    },
                },
                "gem": {
                    "name": "gem",
                    "canTake": True,
                    "weight": 1,
                    "descriptions": {"default": "A glittering gem."},
                },
            },
            "exits": [
                {"direction": "north", "targetScene": "cellar", "score": 5},
            ],
        },
        "cellar": {
            "name": "Cellar",
            "light": False,
            "descriptions": {"default": "A damp cellar with a table."},
            "objects": {
                "table": {
                    "name": "table",
                    "visibleOnEntry": True,
                    "descriptions": {"default": "A wooden table."},
                },
            },
            "exits": [
                {"direction": "south", "targetScene": "kitchen"},
            ],
        },
    },
}


@pytest.fixture
def world() -> World:
    return load_world(_get_data_path())


@pytest.fixture
def small_world_data() -> dict[str, Any]:
    return copy.deepcopy(SMALL_WORLD)


@pytest.fixture
def small_world(small_world_data: dict[str, Any]) -> World:
    return build_world(small_world_data)


@pytest.fixture
def state(small_world: World) -> GameState:
    return new_game_state(small_world)


@pytest.fixture
def ctx(small_world: World, state: GameState) -> GameContext:
    return GameContext(small_world, state)


@pytest.fixture
def game(small_world: World) -> Game:
    return Game(small_world)


@pytest.fixture
def db_engine(tmp_path: Path):
    db_url = f"sqlite:///{tmp_path}/test.db"
    engine = create_engine(db_url)
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def test_player(db_session: Session) -> Player:
    player = Player(fingerprint="test-fingerprint-abc123")
    db_session.add(player)
    db_session.commit()
    db_session.refresh(player)
    return player


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    return Config(database_url=f"sqlite:///{tmp_path}/test.db")


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    return client.with_certificate("test-fingerprint-abc123")
