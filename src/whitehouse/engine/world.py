"""Immutable data structures for the game world.

These are loaded once from the world file at startup and shared by every
game session. Nothing in the engine writes to them; all dynamic facts live
in GameState.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Interaction:
    """A verb-specific effect on an object, gated by a flag condition."""

    message: str = ""
    failure_message: str | None = None
    required_flags: tuple[str, ...] = ()
    grants_flags: tuple[str, ...] = ()
    removes_flags: tuple[str, ...] = ()
    reveals_objects: tuple[str, ...] = ()
    score: int = 0
    # Ordered: first matching condition key wins.
    states: dict[str, str] = field(default_factory=dict)
    target_scene: str | None = None


@dataclass(frozen=True)
class Descriptions:
    """Description variants for a scene or an object."""

    default: str = ""
    examine: str | None = None
    empty: str | None = None
    contents: str | None = None
    dark: str | None = None
    visited: str | None = None
    states: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SceneObject:
    """An interactable thing that lives in a scene."""

    id: str
    name: str
    scene_id: str = ""
    descriptions: Descriptions = field(default_factory=Descriptions)
    visible_on_entry: bool = False
    can_take: bool = False
    weight: int = 0
    is_container: bool = False
    capacity: int | None = None
    contents: tuple[str, ...] = ()
    open: bool = False
    locked: bool = False
    provides_light: bool = False
    light_life: int | None = None
    moveable: bool = False
    on_move: str | None = None
    is_treasure: bool = False
    scoring: dict[str, int] = field(default_factory=dict)
    container_targets: dict[str, int] = field(default_factory=dict)
    interactions: dict[str, Interaction] = field(default_factory=dict)

    def matches(self, phrase: str) -> bool:
        """True when a player's noun phrase plausibly names this object."""
        phrase = phrase.strip().lower()
        if not phrase:
            return False
        name = self.name.lower()
        return phrase in (name, self.id.lower()) or phrase in name.split()

    def interaction(self, verb: str) -> Interaction | None:
        return self.interactions.get(verb)


@dataclass(frozen=True)
class SceneExit:
    """A one-way connection from a scene to another."""

    direction: str
    target_scene: str
    description: str = ""
    required_flags: tuple[str, ...] = ()
    failure_message: str | None = None
    score: int = 0


@dataclass(frozen=True)
class Scene:
    """A location in the game world."""

    id: str
    name: str
    region: str = ""
    light: bool = False
    descriptions: Descriptions = field(default_factory=Descriptions)
    objects: dict[str, SceneObject] = field(default_factory=dict)
    exits: tuple[SceneExit, ...] = ()

    def exit_towards(self, direction: str) -> SceneExit | None:
        for scene_exit in self.exits:
            if scene_exit.direction == direction:
                return scene_exit
        return None


@dataclass
class World:
    """The complete game world, loaded from the world file."""

    scenes: dict[str, Scene] = field(default_factory=dict)
    start_scene: str = ""
    title: str = ""
    intro: str = ""
    max_score: int = 0
    trophy_container: str | None = None
    # object id -> SceneObject, across all scenes
    objects: dict[str, SceneObject] = field(default_factory=dict)

    def scene(self, scene_id: str) -> Scene:
        try:
            return self.scenes[scene_id]
        except KeyError:
            raise ValueError(f"Unknown scene: {scene_id}") from None

    def object(self, object_id: str) -> SceneObject | None:
        return self.objects.get(object_id)

    def treasures(self) -> list[SceneObject]:
        return [obj for obj in self.objects.values() if obj.is_treasure]
