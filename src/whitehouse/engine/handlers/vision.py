"""Look, examine and read. None of these take any time."""

from ..parser import Command
from ..text import message
from .base import CommandResult, Handler, failed, from_outcome, succeeded


class LookHandler(Handler):
    verbs = ("look",)

    def handle(self, command: Command) -> CommandResult:
        if command.object or command.target:
            return ExamineHandler(self.ctx).handle(command)
        text = self.ctx.examination.describe_scene()
        if not self.ctx.light.is_light_present():
            return failed(text)
        return succeeded(text, increment_turn=False)

    def suggestions(self) -> list[str]:
        return ["look"]


class ExamineHandler(Handler):
    verbs = ("examine",)

    def handle(self, command: Command) -> CommandResult:
        phrase = command.object or command.target
        found = self.lookup(phrase, "examine")
        if isinstance(found, CommandResult):
            return found
        return from_outcome(self.ctx.examination.examine(found), increment_turn=False)

    def suggestions(self) -> list[str]:
        return [f"examine {name}" for name in self.visible_names()]


class ReadHandler(Handler):
    verbs = ("read",)

    def handle(self, command: Command) -> CommandResult:
        found = self.lookup(command.object or command.target, "read")
        if isinstance(found, CommandResult):
            return found

        outcome = self.ctx.examination.can_read(found)
        if not outcome.success:
            return failed(outcome.message)

        interaction = found.interaction("read")
        if not self.ctx.flags.check_flags(interaction.required_flags):
            return self.interaction_failure(found, "read", interaction)
        text = self.apply_interaction(found, "read", interaction)
        return succeeded(text or message("error.cantRead", item=found.name), False)

    def suggestions(self) -> list[str]:
        return [
            f"read {obj.name}"
            for obj in self.ctx.examination.get_examinable_objects()
            if obj.interaction("read")
        ]
