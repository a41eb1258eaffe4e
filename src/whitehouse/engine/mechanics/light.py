"""Visibility: light, darkness and what the player can see."""

from ...logging import get_logger
from ..state import GameState
from ..text import message
from ..world import Scene, SceneObject, World
from . import Outcome, fail, ok
from .flags import FlagStore, light_dead_flag, light_on_flag, open_flag, revealed_flag
from .scenes import SceneResolver

logger = get_logger(__name__)


class Visibility:
    def __init__(
        self,
        world: World,
        state: GameState,
        flags: FlagStore,
        scenes: SceneResolver,
    ):
        self.world = world
        self.state = state
        self.flags = flags
        self.scenes = scenes

    def is_lit(self, obj: SceneObject) -> bool:
        return (
            obj.provides_light
            and self.flags.has_flag(light_on_flag(obj.id))
            and not self.flags.has_flag(light_dead_flag(obj.id))
        )

    def is_light_present(self, scene: Scene | None = None) -> bool:
        """True if the scene is lit or a burning light source is here or held."""
        scene = scene or self.scenes.current_scene()
        if scene.light:
            return True
        for obj in self.world.objects.values():
            if not self.is_lit(obj):
                continue
            if self.scenes.is_with_player(obj.id):
                return True
            if self.scenes.scene_of(obj.id) == scene.id:
                return True
        return False

    def is_object_visible(self, obj: SceneObject) -> bool:
        """Carried objects are visible; others must be revealed and unenclosed."""
        if self.scenes.is_carried(obj.id):
            return True
        if not (obj.visible_on_entry or self.flags.has_flag(revealed_flag(obj.id))):
            return False
        holder = self.scenes.holder_of(obj.id)
        if holder is None:
            return True
        return self.flags.has_flag(open_flag(holder.id)) and self.is_object_visible(
            holder
        )

    def visible_objects(self) -> list[SceneObject]:
        """Visible objects lying in the current scene, not counting held ones."""
        if not self.is_light_present():
            return []
        return [
            obj
            for obj in self.scenes.objects_in_scene(self.state.current_scene)
            if self.is_object_visible(obj)
        ]

    def switch_light(self, obj: SceneObject, on: bool) -> Outcome:
        if not obj.provides_light:
            return fail(message("error.notLightSource", item=obj.name))
        if self.flags.has_flag(light_dead_flag(obj.id)):
            return fail(message("error.lightDead", item=obj.name))

        lit = self.flags.has_flag(light_on_flag(obj.id))
        if on and lit:
            return fail(message("error.alreadyOn", item=obj.name))
        if not on and not lit:
            return fail(message("error.alreadyOff", item=obj.name))

        if on:
            self.flags.set_flag(light_on_flag(obj.id))
            return ok(message("success.lightOn", item=obj.name))
        self.flags.remove_flag(light_on_flag(obj.id))
        return ok(message("success.lightOff", item=obj.name))

    def burn(self) -> list[str]:
        """Advance every burning light source by one turn.

        Returns a notice for each source near the player that ran out.
        """
        notices = []
        for obj in self.world.objects.values():
            if obj.light_life is None or not self.is_lit(obj):
                continue
            data = self.state.object_data.setdefault(obj.id, {})
            data["burned"] = data.get("burned", 0) + 1
            if data["burned"] < obj.light_life:
                continue

            self.flags.set_flag(light_dead_flag(obj.id))
            self.flags.remove_flag(light_on_flag(obj.id))
            logger.info("light_burned_out", object_id=obj.id, turns=data["burned"])

            nearby = self.scenes.is_with_player(obj.id) or (
                self.scenes.scene_of(obj.id) == self.state.current_scene
            )
            if not nearby:
                continue
            key = "light.burnedOut" if self.is_light_present() else "light.burnedOutDark"
            notices.append(message(key, item=obj.name))
        return notices
