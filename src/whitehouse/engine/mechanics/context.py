"""Bundle of resolvers over one working game state."""

from ..state import GameState
from ..world import World
from .containers import Containers
from .examination import Examination
from .flags import FlagStore
from .inventory import Inventory
from .light import Visibility
from .scenes import SceneResolver
from .scoring import Progress, Scoring


class GameContext:
    """Everything a handler may read or write during one command.

    Built fresh for every command over the dispatcher's working copy of the
    state, so no resolver outlives the transaction it belongs to.
    """

    def __init__(self, world: World, state: GameState):
        self.world = world
        self.state = state
        self.flags = FlagStore(state)
        self.scenes = SceneResolver(world, state, self.flags)
        self.light = Visibility(world, state, self.flags, self.scenes)
        self.containers = Containers(world, state, self.flags, self.scenes)
        self.scoring = Scoring(world, state, self.flags)
        self.progress = Progress(state)
        self.inventory = Inventory(
            state, self.flags, self.scenes, self.containers, self.scoring
        )
        self.examination = Examination(
            state, self.flags, self.scenes, self.light, self.containers, self.scoring
        )
