"""Fallback for any verb an object defines an interaction for."""

from ..parser import Command
from .base import CommandResult, Handler, succeeded
from .navigation import travel


class InteractionHandler(Handler):
    """Eat, drink, unlock, wave... whatever the world declares."""

    def can_handle(self, command: Command) -> bool:
        obj = self.resolve(command.object or command.target)
        return obj is not None and obj.interaction(command.verb) is not None

    def handle(self, command: Command) -> CommandResult:
        verb = command.verb
        found = self.lookup(command.object or command.target, verb)
        if isinstance(found, CommandResult):
            return found
        obj = found

        interaction = obj.interaction(verb)
        if not self.ctx.flags.check_flags(interaction.required_flags):
            return self.interaction_failure(obj, verb, interaction)

        text = self.apply_interaction(obj, verb, interaction)
        if interaction.target_scene:
            text = travel(self.ctx, interaction.target_scene, text)
        return succeeded(text)

    def suggestions(self) -> list[str]:
        result = []
        for obj in self.ctx.examination.get_examinable_objects():
            for verb, interaction in obj.interactions.items():
                if self.ctx.flags.check_flags(interaction.required_flags):
                    result.append(f"{verb} {obj.name}")
        return result
