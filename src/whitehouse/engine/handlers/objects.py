"""Take, drop, put and move objects."""

from ..mechanics.flags import moved_flag
from ..parser import Command
from ..text import message
from .base import CommandResult, Handler, failed, from_outcome, succeeded

PUT_VERBS = ("put", "place", "insert", "stuff")


class TakeHandler(Handler):
    verbs = ("take",)

    def handle(self, command: Command) -> CommandResult:
        phrase = command.object or command.target
        found = self.lookup(phrase, "take")
        if isinstance(found, CommandResult):
            return found
        obj = found
        inventory = self.ctx.inventory

        if inventory.has_item(obj):
            return failed(message("error.alreadyCarrying", item=obj.name))

        interaction = obj.interaction("take")
        if not obj.can_take:
            if interaction is not None:
                return failed(interaction.failure_message or interaction.message)
            return failed(message("error.cantTake", item=obj.name))

        holder = self.ctx.containers.find_container_with_item(obj.id)
        if holder is not None and not self.ctx.containers.is_open(holder):
            return failed(
                message("error.inClosedContainer", item=obj.name, container=holder.name)
            )

        if interaction is not None and not self.ctx.flags.check_flags(
            interaction.required_flags
        ):
            return self.interaction_failure(obj, "take", interaction)

        outcome = inventory.add_object_to_inventory(obj)
        if not outcome.success:
            return failed(outcome.message)

        text = outcome.message
        if interaction is not None:
            text = self.apply_interaction(obj, "take", interaction) or text
        return succeeded(text)

    def suggestions(self) -> list[str]:
        return [
            f"take {obj.name}"
            for obj in self.ctx.examination.get_examinable_objects()
            if obj.can_take and not self.ctx.scenes.is_carried(obj.id)
        ]


class PutHandler(Handler):
    """Put an item into a container."""

    verbs = PUT_VERBS

    def can_handle(self, command: Command) -> bool:
        if command.verb not in self.verbs:
            return False
        # "put lamp down" is a drop
        return command.target is not None or "down" not in command.words

    def handle(self, command: Command) -> CommandResult:
        if not command.object:
            return failed(message("error.noObject", action=command.verb))
        if not command.target:
            return failed(message("error.putWhere", item=command.object))
        if not self.ctx.light.is_light_present():
            return failed(message("error.tooDarkAction", action=command.verb))

        item = self.resolve(command.object)
        if item is None or not self.ctx.inventory.has_item(item):
            return failed(message("error.notHoldingItem", item=command.object))

        found = self.lookup(command.target, command.verb)
        if isinstance(found, CommandResult):
            return found
        container = found

        outcome = self.ctx.containers.can_add(container, item)
        if not outcome.success:
            return failed(outcome.message)

        self.ctx.inventory.remove_object_from_inventory(item)
        self.ctx.state.object_data[item.id].pop("location", None)
        text = self.ctx.containers.add_to_container(container, item).message
        self.ctx.scoring.award_once(
            f"{item.id}_put_{container.id}",
            item.container_targets.get(container.id, 0),
        )

        if container.id == self.ctx.world.trophy_container and (
            self.ctx.scoring.check_victory()
        ):
            text = f"{text}\n\n{message('score.won')}"
        return succeeded(text)

    def suggestions(self) -> list[str]:
        items = self.visible_names(carried=True)
        containers = [
            obj.name
            for obj in self.ctx.examination.get_examinable_objects()
            if obj.is_container and self.ctx.containers.is_open(obj)
        ]
        return [
            f"put {item} in {container}"
            for item in items
            for container in containers
            if item != container
        ]


class DropHandler(Handler):
    verbs = ("drop",) + PUT_VERBS

    def handle(self, command: Command) -> CommandResult:
        words = [word for word in command.words if word != "down"]
        phrase = " ".join(words)
        if not phrase:
            return failed(message("error.noObject", action="drop"))

        obj = self.resolve(phrase)
        if obj is None or not self.ctx.inventory.has_item(obj):
            return failed(message("error.notHoldingItem", item=phrase))

        outcome = self.ctx.inventory.remove_object_from_inventory(obj)
        if outcome.success:
            self.ctx.scoring.award_once(f"{obj.id}_drop", obj.scoring.get("drop", 0))
        return from_outcome(outcome)

    def suggestions(self) -> list[str]:
        return [f"drop {obj.name}" for obj in self.ctx.inventory.list_inventory()]


class MoveObjectHandler(Handler):
    verbs = ("move",)

    def handle(self, command: Command) -> CommandResult:
        found = self.lookup(command.object or command.target, "move")
        if isinstance(found, CommandResult):
            return found
        obj = found

        interaction = obj.interaction("move")
        if interaction is not None:
            if not self.ctx.flags.check_flags(interaction.required_flags):
                return self.interaction_failure(obj, "move", interaction)
            text = self.apply_interaction(obj, "move", interaction)
            self.ctx.flags.set_flag(moved_flag(obj.id))
            return succeeded(text or message("success.move", item=obj.name))

        if not obj.moveable:
            return failed(message("error.cantMove", item=obj.name))
        self.ctx.flags.set_flag(moved_flag(obj.id))
        return succeeded(obj.on_move or message("success.move", item=obj.name))

    def suggestions(self) -> list[str]:
        return [
            f"move {obj.name}"
            for obj in self.ctx.examination.get_examinable_objects()
            if obj.moveable or obj.interaction("move")
        ]
