"""Open and close containers, doors and windows."""

from ..parser import Command
from ..text import message
from .base import CommandResult, Handler, failed, succeeded


class OpenCloseHandler(Handler):
    verbs = ("open", "close")

    def handle(self, command: Command) -> CommandResult:
        verb = command.verb
        found = self.lookup(command.object or command.target, verb)
        if isinstance(found, CommandResult):
            return found
        obj = found

        interaction = obj.interaction(verb)
        if interaction is not None and not self.ctx.flags.check_flags(
            interaction.required_flags
        ):
            return self.interaction_failure(obj, verb, interaction)

        if not obj.is_container:
            if interaction is None:
                return failed(message("error.cantPerformAction", action=verb, item=obj.name))
            return succeeded(self.apply_interaction(obj, verb, interaction))

        containers = self.ctx.containers
        if verb == "open":
            outcome = containers.open_container(obj)
        else:
            outcome = containers.close_container(obj)
        if not outcome.success:
            return failed(outcome.message)
        if interaction is None:
            return succeeded(outcome.message)

        text = self.apply_interaction(obj, verb, interaction)
        if not text:
            return succeeded(outcome.message)
        if verb == "open" and containers.contents(obj.id):
            text = f"{text} {containers.describe_contents(obj)}"
        return succeeded(text)

    def suggestions(self) -> list[str]:
        result = []
        containers = self.ctx.containers
        for obj in self.ctx.examination.get_examinable_objects():
            if obj.is_container:
                verb = "close" if containers.is_open(obj) else "open"
                result.append(f"{verb} {obj.name}")
            elif obj.interaction("open") or obj.interaction("close"):
                result.extend(
                    f"{verb} {obj.name}" for verb in self.verbs if obj.interaction(verb)
                )
        return result
