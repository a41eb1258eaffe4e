"""Turning light sources on and off."""

from ..parser import Command
from ..text import message
from .base import CommandResult, Handler, failed, from_outcome, succeeded

SWITCH_WORDS = ("on", "off")


class TurnHandler(Handler):
    verbs = ("turn", "light", "extinguish", "douse")

    def _wanted_state(self, command: Command) -> bool | None:
        if command.verb == "light":
            return True
        if command.verb in ("extinguish", "douse"):
            return False
        tokens = command.raw.lower().split()
        if "on" in tokens:
            return True
        if "off" in tokens:
            return False
        return None

    def handle(self, command: Command) -> CommandResult:
        on = self._wanted_state(command)
        phrase = " ".join(w for w in command.words if w not in SWITCH_WORDS)
        if on is None or not phrase:
            return failed(message("error.turnWhat"))

        obj = self.resolve(phrase)
        if obj is None:
            return failed(message("error.objectNotFound", item=phrase))

        light = self.ctx.light
        was_dark = not light.is_light_present()
        if not self.ctx.scenes.is_carried(obj.id):
            if was_dark:
                return failed(message("error.tooDarkAction", action="turn on"))
            if not light.is_object_visible(obj):
                return failed(message("error.objectNotVisible", item=phrase))

        outcome = light.switch_light(obj, on)
        if not outcome.success:
            return from_outcome(outcome)

        text = outcome.message
        if on and was_dark and light.is_light_present():
            text = f"{text}\n\n{self.ctx.examination.describe_scene()}"
        elif not on and not light.is_light_present():
            text = f"{text}\n\n{message('scene.dark')}"
        return succeeded(text)

    def suggestions(self) -> list[str]:
        result = []
        for obj in self.ctx.scenes.present_objects():
            if not obj.provides_light or not self.ctx.light.is_object_visible(obj):
                continue
            state = "off" if self.ctx.light.is_lit(obj) else "on"
            result.append(f"turn {state} {obj.name}")
        return result
