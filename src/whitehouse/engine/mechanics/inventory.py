"""What the player carries."""

from ..state import GameState
from ..text import message
from ..world import SceneObject
from . import Outcome, fail, ok
from .containers import Containers
from .flags import FlagStore, carried_flag, revealed_flag
from .scenes import SceneResolver
from .scoring import Scoring

MAX_INVENTORY_WEIGHT = 20


class Inventory:
    def __init__(
        self,
        state: GameState,
        flags: FlagStore,
        scenes: SceneResolver,
        containers: Containers,
        scoring: Scoring,
    ):
        self.state = state
        self.flags = flags
        self.scenes = scenes
        self.containers = containers
        self.scoring = scoring

    def has_item(self, obj: SceneObject) -> bool:
        return self.flags.has_flag(carried_flag(obj.id))

    def list_inventory(self) -> list[SceneObject]:
        return self.scenes.carried_objects()

    def get_current_weight(self) -> int:
        """Everything with the player counts, nested contents included."""
        return sum(
            obj.weight
            for obj in self.scenes.world.objects.values()
            if self.scenes.is_with_player(obj.id)
        )

    def get_max_inventory_weight(self) -> int:
        return MAX_INVENTORY_WEIGHT

    def can_add(self, obj: SceneObject) -> Outcome:
        if self.has_item(obj):
            return fail(message("error.alreadyCarrying", item=obj.name))
        if not obj.can_take:
            return fail(message("error.cantTake", item=obj.name))
        added = 0 if self.scenes.is_with_player(obj.id) else obj.weight
        if self.get_current_weight() + added > self.get_max_inventory_weight():
            return fail(message("error.tooHeavy", item=obj.name))
        return ok()

    def add_object_to_inventory(self, obj: SceneObject) -> Outcome:
        outcome = self.can_add(obj)
        if not outcome.success:
            return outcome

        text = message("success.take")
        holder = self.scenes.holder_of(obj.id)
        if holder is not None:
            text = self.containers.remove_from_container(holder, obj).message

        self.flags.set_flag(carried_flag(obj.id))
        self.flags.set_flag(revealed_flag(obj.id))
        self.state.known_objects.add(obj.id)
        self.state.object_data.get(obj.id, {}).pop("location", None)
        self.scoring.award_once(f"{obj.id}_take", obj.scoring.get("take", 0))
        return ok(text)

    def remove_object_from_inventory(self, obj: SceneObject) -> Outcome:
        if not self.has_item(obj):
            return fail(message("error.notHoldingItem", item=obj.name))
        self.flags.remove_flag(carried_flag(obj.id))
        self.state.object_data.setdefault(obj.id, {})["location"] = (
            self.state.current_scene
        )
        return ok(message("success.drop"))

    def describe(self) -> str:
        items = self.list_inventory()
        if not items:
            return message("inventory.empty")
        lines = []
        for obj in items:
            line = f"  {obj.name}"
            if obj.is_container and self.containers.is_open(obj):
                inside = self.containers.contents(obj.id)
                if inside:
                    line += f" ({self.containers.describe_contents(obj)})"
            lines.append(line)
        text = message("inventory.carrying", items="\n".join(lines))
        weight = message(
            "inventory.weight",
            current=self.get_current_weight(),
            max=self.get_max_inventory_weight(),
        )
        return f"{text}\n{weight}"
