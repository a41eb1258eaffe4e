"""Where things are, and where the player can go."""

from ..state import GameState
from ..world import Scene, SceneExit, SceneObject, World
from .flags import FlagStore, carried_flag, visited_flag


class SceneResolver:
    """Answers 'where is object X' from flags and object_data.

    An object is carried when its Has flag is set; otherwise it sits in the
    container whose contents list names it; otherwise in the scene recorded
    as its location when dropped; otherwise in its home scene.
    """

    def __init__(self, world: World, state: GameState, flags: FlagStore):
        self.world = world
        self.state = state
        self.flags = flags

    def current_scene(self) -> Scene:
        return self.world.scene(self.state.current_scene)

    def is_carried(self, object_id: str) -> bool:
        return self.flags.has_flag(carried_flag(object_id))

    def holder_of(self, object_id: str) -> SceneObject | None:
        """Return the container currently holding the object, if any."""
        for obj_id, data in self.state.object_data.items():
            if object_id in data.get("contents", ()):
                return self.world.object(obj_id)
        return None

    def is_with_player(self, object_id: str) -> bool:
        """Carried, or inside something the player carries."""
        seen: set[str] = set()
        while object_id not in seen:
            if self.is_carried(object_id):
                return True
            seen.add(object_id)
            holder = self.holder_of(object_id)
            if holder is None:
                return False
            object_id = holder.id
        return False

    def scene_of(self, object_id: str) -> str | None:
        """Id of the scene the object physically rests in."""
        if self.is_with_player(object_id):
            return self.state.current_scene
        holder = self.holder_of(object_id)
        if holder is not None:
            return self.scene_of(holder.id)
        location = self.state.object_data.get(object_id, {}).get("location")
        if location:
            return location
        obj = self.world.object(object_id)
        return obj.scene_id if obj else None

    def objects_in_scene(self, scene_id: str) -> list[SceneObject]:
        """Objects lying in a scene, excluding anything the player holds."""
        return [
            obj
            for obj in self.world.objects.values()
            if not self.is_with_player(obj.id) and self.scene_of(obj.id) == scene_id
        ]

    def carried_objects(self) -> list[SceneObject]:
        return [obj for obj in self.world.objects.values() if self.is_carried(obj.id)]

    def present_objects(self) -> list[SceneObject]:
        """Everything the player could refer to: held first, then the scene."""
        held = [
            obj for obj in self.world.objects.values() if self.is_with_player(obj.id)
        ]
        held.sort(key=lambda obj: not self.is_carried(obj.id))
        return held + self.objects_in_scene(self.state.current_scene)

    def find_objects(self, phrase: str) -> list[SceneObject]:
        """Present objects matching a noun phrase, best matches first."""
        phrase = phrase.strip().lower()
        matches = [obj for obj in self.present_objects() if obj.matches(phrase)]
        exact = [obj for obj in matches if phrase in (obj.name.lower(), obj.id.lower())]
        return exact + [obj for obj in matches if obj not in exact]

    def available_exits(self, scene: Scene | None = None) -> list[SceneExit]:
        """Exits whose prerequisites currently hold."""
        scene = scene or self.current_scene()
        return [
            scene_exit
            for scene_exit in scene.exits
            if self.flags.check_flags(scene_exit.required_flags)
        ]

    def has_visited(self, scene_id: str) -> bool:
        return self.flags.has_flag(visited_flag(scene_id))

    def move_to(self, scene_id: str) -> Scene:
        scene = self.world.scene(scene_id)
        self.state.current_scene = scene.id
        self.flags.set_flag(visited_flag(scene.id))
        return scene

    def mark_known(self, objects: list[SceneObject]) -> None:
        self.state.known_objects.update(obj.id for obj in objects)
