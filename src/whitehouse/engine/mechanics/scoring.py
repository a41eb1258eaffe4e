"""Score and turn bookkeeping."""

from ...logging import get_logger
from ..state import GameState
from ..text import message
from ..world import World
from .flags import FlagStore, scored_flag

logger = get_logger(__name__)


class Scoring:
    def __init__(self, world: World, state: GameState, flags: FlagStore):
        self.world = world
        self.state = state
        self.flags = flags

    def add_score(self, points: int) -> None:
        """Adjust the running total. Negative points are penalties."""
        self.state.score += points

    def award_once(self, event: str, points: int) -> bool:
        """Pay ``points`` for ``event`` the first time it happens.

        Returns True when points were awarded. Events worth nothing are
        never marked, so a later world revision can still pay for them.
        """
        if not points:
            return False
        marker = scored_flag(event)
        if self.flags.has_flag(marker):
            return False
        self.flags.set_flag(marker)
        self.add_score(points)
        logger.debug("points_awarded", scoring_event=event, points=points)
        return True

    def summary(self) -> str:
        return message(
            "score.current",
            score=self.state.score,
            max=self.state.max_score,
            turns=self.state.turns,
        )

    def check_victory(self) -> bool:
        """Set game_won once every treasure rests in the trophy container."""
        if self.state.game_won:
            return True
        trophy = self.world.trophy_container
        treasures = self.world.treasures()
        if not trophy or not treasures:
            return False
        contents = self.state.object_data.get(trophy, {}).get("contents", [])
        if all(obj.id in contents for obj in treasures):
            self.state.game_won = True
            logger.info("game_won", score=self.state.score, turns=self.state.turns)
        return self.state.game_won


class Progress:
    def __init__(self, state: GameState):
        self.state = state

    def increment_turns(self) -> int:
        self.state.turns += 1
        return self.state.turns
