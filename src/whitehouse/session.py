"""Session layer bridging the game engine and database."""

import datetime as dt
import json
import zlib
from typing import Any

from sqlmodel import Session, select

from .engine.game import Game, Sidebar
from .engine.handlers import CommandResult
from .engine.world import World
from .logging import get_logger
from .models import Player, SavedGame

logger = get_logger(__name__)


def encode_snapshot(snapshot: dict[str, Any]) -> bytes:
    return zlib.compress(json.dumps(snapshot, sort_keys=True).encode("utf-8"))


def decode_snapshot(blob: bytes) -> dict[str, Any]:
    return json.loads(zlib.decompress(blob).decode("utf-8"))


def get_or_create_player(session: Session, fingerprint: str) -> Player:
    """Get existing player or create new one from certificate fingerprint."""
    statement = select(Player).where(Player.fingerprint == fingerprint)
    player = session.exec(statement).first()

    if player:
        player.last_seen = dt.datetime.now(dt.UTC)
        logger.debug("player_accessed", fingerprint=fingerprint)
    else:
        player = Player(fingerprint=fingerprint)
        session.add(player)
        logger.info("player_created", fingerprint=fingerprint)

    session.commit()
    session.refresh(player)
    return player


class GameSession:
    """Wraps a Player + SavedGame + in-memory Game."""

    def __init__(
        self,
        db_session: Session,
        player: Player,
        saved_game: SavedGame | None,
        game: Game,
    ):
        self.db_session = db_session
        self.player = player
        self.saved_game = saved_game
        self.game = game

    @classmethod
    def load_or_create(
        cls,
        db_session: Session,
        player: Player,
        world: World,
    ) -> "GameSession":
        """Load the player's save, or start a fresh game if there is none.

        A save that no longer fits the world (unknown scene, old snapshot
        version) is discarded and replaced by a new game.
        """
        statement = select(SavedGame).where(SavedGame.player_id == player.id)
        saved_game = db_session.exec(statement).first()
        game = Game(world)

        if saved_game is not None:
            try:
                game.initialize_state(decode_snapshot(saved_game.state_blob))
            except (ValueError, KeyError, zlib.error) as exc:
                logger.warning(
                    "saved_game_discarded",
                    fingerprint=player.fingerprint,
                    error=str(exc),
                )
                db_session.delete(saved_game)
                db_session.commit()
                saved_game = None
            else:
                logger.debug(
                    "game_loaded",
                    fingerprint=player.fingerprint,
                    turns=saved_game.turns,
                )

        if saved_game is None:
            game.new_game()
            logger.info("new_game_started", fingerprint=player.fingerprint)

        return cls(db_session, player, saved_game, game)

    @property
    def state(self):
        return self.game.state

    def process_command(self, raw_input: str) -> CommandResult:
        """Delegate to the engine."""
        return self.game.process_command(raw_input)

    def save(self) -> None:
        """Serialize state back to the database."""
        now = dt.datetime.now(dt.UTC)
        state = self.game.state
        blob = encode_snapshot(self.game.get_current_state())

        if self.saved_game is None:
            self.saved_game = SavedGame(
                player_id=self.player.id,
                state_blob=blob,
                scene=state.current_scene,
                turns=state.turns,
                score=state.score,
                won=state.game_won,
                started_at=now,
                last_played=now,
            )
            self.db_session.add(self.saved_game)
        else:
            self.saved_game.state_blob = blob
            self.saved_game.scene = state.current_scene
            self.saved_game.turns = state.turns
            self.saved_game.score = state.score
            self.saved_game.won = state.game_won
            self.saved_game.last_played = now

        self.db_session.commit()
        logger.debug(
            "game_saved",
            fingerprint=self.player.fingerprint,
            turns=state.turns,
            score=state.score,
        )

    def describe(self) -> str:
        return self.game.describe()

    def sidebar(self) -> Sidebar:
        return self.game.sidebar()

    def suggestions(self, partial: str = "") -> list[str]:
        return self.game.get_suggestions(partial)

    def reset(self) -> str:
        """Reset to a fresh game and return its opening text."""
        text = self.game.new_game()
        if self.saved_game:
            self.db_session.delete(self.saved_game)
            self.db_session.commit()
            self.saved_game = None
        logger.info("game_reset", fingerprint=self.player.fingerprint)
        return text
