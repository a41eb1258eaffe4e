"""One play session: state, transcript and read accessors for a front-end."""

from dataclasses import dataclass, field
from typing import Any

from ..logging import get_logger
from .commands import Dispatcher
from .handlers import CommandResult
from .mechanics.context import GameContext
from .state import GameState, new_game_state
from .world import World

logger = get_logger(__name__)


@dataclass(frozen=True)
class Sidebar:
    """Summary recomputed after every command."""

    location: str
    score: int
    max_score: int
    moves: int
    known_commands: list[str] = field(default_factory=list)
    known_objects: list[str] = field(default_factory=list)
    exits: list[str] = field(default_factory=list)


class Game:
    """Owns a GameState and feeds player input through the dispatcher."""

    def __init__(self, world: World, state: GameState | None = None):
        self.world = world
        self.dispatcher = Dispatcher(world)
        self.state = state or new_game_state(world)
        self.lines: list[str] = []

    def _context(self) -> GameContext:
        return GameContext(self.world, self.state)

    def new_game(self) -> str:
        """Start over and return the opening text."""
        self.state = new_game_state(self.world)
        self.lines = []
        text = self.opening_text()
        self.lines.append(text)
        logger.debug("game_started", scene=self.state.current_scene)
        return text

    def opening_text(self) -> str:
        description = self.describe()
        if self.world.intro:
            return f"{self.world.intro}\n\n{description}"
        return description

    def describe(self) -> str:
        """Current scene description, marking what is seen as known."""
        return self._context().examination.describe_scene()

    def process_command(self, raw_input: str) -> CommandResult:
        self.lines.append(f"> {raw_input.strip()}")
        self.state, result = self.dispatcher.dispatch(self.state, raw_input)
        self.lines.append(result.message)
        return result

    def get_current_state(self) -> dict[str, Any]:
        """JSON-serialisable snapshot for the persistence collaborator."""
        return self.state.to_snapshot()

    def initialize_state(self, snapshot: dict[str, Any]) -> None:
        """Replace the current state wholesale with a saved snapshot."""
        state = GameState.from_snapshot(snapshot)
        self.world.scene(state.current_scene)
        self.state = state
        self.lines = []

    def get_suggestions(self, partial: str = "") -> list[str]:
        return self.dispatcher.get_suggestions(self.state, partial)

    def inventory_names(self) -> list[str]:
        return [obj.name for obj in self._context().inventory.list_inventory()]

    def visible_object_names(self) -> list[str]:
        return [obj.name for obj in self._context().light.visible_objects()]

    def exits(self) -> list[str]:
        return [
            scene_exit.direction
            for scene_exit in self._context().scenes.available_exits()
        ]

    def sidebar(self) -> Sidebar:
        scene = self.world.scene(self.state.current_scene)
        known = [
            obj.name
            for object_id, obj in self.world.objects.items()
            if object_id in self.state.known_objects
        ]
        return Sidebar(
            location=scene.name,
            score=self.state.score,
            max_score=self.state.max_score,
            moves=self.state.turns,
            known_commands=self.dispatcher.known_commands(),
            known_objects=known,
            exits=self.exits(),
        )

    @property
    def is_won(self) -> bool:
        return self.state.game_won
