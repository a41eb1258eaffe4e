"""Containment: open, close, fill and empty containers."""

from ..state import GameState
from ..text import message
from ..world import SceneObject, World
from . import Outcome, fail, join_names, ok
from .flags import FlagStore, locked_flag, open_flag, revealed_flag
from .scenes import SceneResolver


class Containers:
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

    def contents(self, container_id: str) -> list[str]:
        return list(self.state.object_data.get(container_id, {}).get("contents", []))

    def is_open(self, container: SceneObject) -> bool:
        return self.flags.has_flag(open_flag(container.id))

    def is_locked(self, container: SceneObject) -> bool:
        return self.flags.has_flag(locked_flag(container.id))

    def is_full(self, container: SceneObject) -> bool:
        if container.capacity is None:
            return False
        return len(self.contents(container.id)) >= container.capacity

    def describe_contents(self, container: SceneObject) -> str:
        names = [
            self.world.objects[object_id].name
            for object_id in self.contents(container.id)
            if object_id in self.world.objects
        ]
        if not names:
            return container.descriptions.empty or message(
                "container.empty", container=container.name
            )
        if container.descriptions.contents:
            return container.descriptions.contents.format(items=join_names(names))
        return message(
            "container.contents", container=container.name, items=join_names(names)
        )

    def reveal_contents(self, container: SceneObject) -> None:
        for object_id in self.contents(container.id):
            self.flags.set_flag(revealed_flag(object_id))
            self.state.known_objects.add(object_id)

    def open_container(self, container: SceneObject) -> Outcome:
        if not container.is_container:
            return fail(message("error.notContainer", container=container.name))
        if self.is_locked(container):
            return fail(message("error.containerLocked", container=container.name))
        if self.is_open(container):
            return fail(message("error.alreadyOpen", container=container.name))

        self.flags.set_flag(open_flag(container.id))
        self.reveal_contents(container)
        text = message("success.open", container=container.name)
        if self.contents(container.id):
            text = f"{text} {self.describe_contents(container)}"
        return ok(text)

    def close_container(self, container: SceneObject) -> Outcome:
        if not container.is_container:
            return fail(message("error.notContainer", container=container.name))
        if not self.is_open(container):
            return fail(message("error.alreadyClosed", container=container.name))

        self.flags.remove_flag(open_flag(container.id))
        return ok(message("success.close", container=container.name))

    def is_inside(self, object_id: str, outer_id: str) -> bool:
        """True when object_id is outer_id or nested somewhere within it."""
        seen: set[str] = set()
        while object_id not in seen:
            if object_id == outer_id:
                return True
            seen.add(object_id)
            holder = self.scenes.holder_of(object_id)
            if holder is None:
                return False
            object_id = holder.id
        return False

    def can_add(self, container: SceneObject, item: SceneObject) -> Outcome:
        """Check every precondition of add_to_container without mutating."""
        if not container.is_container:
            return fail(message("error.notContainer", container=container.name))
        if self.is_inside(container.id, item.id):
            return fail(message("error.putInSelf", item=item.name))
        if self.is_locked(container):
            return fail(message("error.containerLocked", container=container.name))
        if not self.is_open(container):
            return fail(message("error.containerClosed", container=container.name))
        if self.is_full(container):
            return fail(message("error.containerFull", container=container.name))
        return ok()

    def add_to_container(self, container: SceneObject, item: SceneObject) -> Outcome:
        outcome = self.can_add(container, item)
        if not outcome.success:
            return outcome
        data = self.state.object_data.setdefault(container.id, {})
        data.setdefault("contents", []).append(item.id)
        return ok(message("success.putInContainer", item=item.name, container=container.name))

    def remove_from_container(
        self, container: SceneObject, item: SceneObject
    ) -> Outcome:
        contents = self.contents(container.id)
        if item.id not in contents:
            return fail(
                message("error.notInContainer", item=item.name, container=container.name)
            )
        self.state.object_data[container.id]["contents"] = [
            object_id for object_id in contents if object_id != item.id
        ]
        return ok(message("success.takeFrom", item=item.name, container=container.name))

    def find_container_with_item(self, item_id: str) -> SceneObject | None:
        """Scan the containers the player can reach for one holding the item."""
        for obj in self.scenes.present_objects():
            if obj.is_container and item_id in self.contents(obj.id):
                return obj
        return None
