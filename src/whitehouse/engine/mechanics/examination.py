"""Describing objects and scenes to the player."""

from ..state import GameState
from ..text import message
from ..world import Scene, SceneObject
from . import Outcome, fail, join_names, ok
from .containers import Containers
from .flags import FlagStore, examined_flag
from .light import Visibility
from .scenes import SceneResolver
from .scoring import Scoring


class Examination:
    def __init__(
        self,
        state: GameState,
        flags: FlagStore,
        scenes: SceneResolver,
        light: Visibility,
        containers: Containers,
        scoring: Scoring,
    ):
        self.state = state
        self.flags = flags
        self.scenes = scenes
        self.light = light
        self.containers = containers
        self.scoring = scoring

    def _sealed(self, obj: SceneObject) -> SceneObject | None:
        holder = self.containers.find_container_with_item(obj.id)
        if holder is not None and not self.containers.is_open(holder):
            return holder
        return None

    def can_examine(self, obj: SceneObject) -> Outcome:
        if not self.light.is_light_present():
            return fail(message("error.tooDark"))
        if not self.light.is_object_visible(obj):
            return fail(message("error.objectNotVisible", item=obj.name))
        holder = self._sealed(obj)
        if holder is not None:
            return fail(
                message("error.inClosedContainer", item=obj.name, container=holder.name)
            )
        descriptions = obj.descriptions
        if not (
            descriptions.default
            or descriptions.examine
            or descriptions.states
            or obj.interaction("examine")
        ):
            return fail(message("error.noDescription", item=obj.name))
        return ok()

    def get_object_description(self, obj: SceneObject, detailed: bool = True) -> str:
        descriptions = obj.descriptions
        if not detailed:
            return descriptions.default
        if descriptions.examine:
            return descriptions.examine
        return self.flags.select_state(descriptions.states) or descriptions.default

    def examine(self, obj: SceneObject) -> Outcome:
        """Detailed description, container contents and first-look points."""
        outcome = self.can_examine(obj)
        if not outcome.success:
            return outcome

        interaction = obj.interaction("examine")
        text = ""
        if interaction and self.flags.check_flags(interaction.required_flags):
            text = self.flags.select_state(interaction.states) or interaction.message
        if not text:
            text = self.get_object_description(obj, detailed=True)
        if not text:
            text = message("error.noDescription", item=obj.name)
        if obj.is_container and self.containers.is_open(obj):
            text = f"{text}\n{self.containers.describe_contents(obj)}"

        self.flags.set_flag(examined_flag(obj.id))
        self.state.known_objects.add(obj.id)
        self.scoring.award_once(f"{obj.id}_examine", obj.scoring.get("examine", 0))
        return ok(text)

    def can_read(self, obj: SceneObject) -> Outcome:
        if not self.light.is_light_present():
            return fail(message("error.tooDarkAction", action="read"))
        if not self.light.is_object_visible(obj):
            return fail(message("error.objectNotVisible", item=obj.name))
        if obj.interaction("read") is None:
            return fail(message("error.cantRead", item=obj.name))
        return ok()

    def get_examinable_objects(self) -> list[SceneObject]:
        """Visible objects in the scene plus everything carried."""
        if not self.light.is_light_present():
            return []
        return [
            obj for obj in self.scenes.present_objects() if self.light.is_object_visible(obj)
        ]

    def describe_scene(self, scene: Scene | None = None, brief: bool = False) -> str:
        """Scene text as the player sees it right now.

        ``brief`` prefers the shorter visited variant, used on re-entry.
        """
        scene = scene or self.scenes.current_scene()
        if not self.light.is_light_present(scene):
            return scene.descriptions.dark or message("scene.dark")

        descriptions = scene.descriptions
        text = self.flags.select_state(descriptions.states)
        if not text and brief and descriptions.visited:
            text = descriptions.visited
        text = text or descriptions.default

        visible = [
            obj
            for obj in self.scenes.objects_in_scene(scene.id)
            if self.light.is_object_visible(obj)
        ]
        self.scenes.mark_known(visible)
        if visible:
            names = join_names([obj.name for obj in visible])
            text = f"{text}\n\n{message('scene.objects', items=names)}"
        return f"{scene.name}\n{text}"
