"""Shared pieces of the command handlers."""

from dataclasses import dataclass

from ..mechanics import Outcome
from ..mechanics.context import GameContext
from ..mechanics.flags import revealed_flag
from ..parser import Command
from ..text import message
from ..world import Interaction, SceneObject


@dataclass(frozen=True)
class CommandResult:
    success: bool
    message: str
    increment_turn: bool = False


def succeeded(text: str, increment_turn: bool = True) -> CommandResult:
    return CommandResult(True, text, increment_turn)


def failed(text: str) -> CommandResult:
    return CommandResult(False, text, False)


def from_outcome(outcome: Outcome, increment_turn: bool = True) -> CommandResult:
    if outcome.success:
        return succeeded(outcome.message, increment_turn)
    return failed(outcome.message)


class Handler:
    """One family of commands.

    Subclasses list the verbs they answer to and implement handle().
    Handlers never advance the turn counter themselves; they report
    increment_turn and the dispatcher does the rest.
    """

    verbs: tuple[str, ...] = ()

    def __init__(self, ctx: GameContext):
        self.ctx = ctx

    def can_handle(self, command: Command) -> bool:
        return command.verb in self.verbs

    def handle(self, command: Command) -> CommandResult:
        raise NotImplementedError

    def suggestions(self) -> list[str]:
        return []

    # Helpers

    def resolve(self, phrase: str | None) -> SceneObject | None:
        """Best present object for a noun phrase, preferring visible ones."""
        if not phrase:
            return None
        candidates = self.ctx.scenes.find_objects(phrase)
        for obj in candidates:
            if self.ctx.light.is_object_visible(obj):
                return obj
        return candidates[0] if candidates else None

    def lookup(
        self, phrase: str | None, action: str, need_light: bool = True
    ) -> SceneObject | CommandResult:
        """Resolve a phrase to a visible object, or explain why not."""
        if not phrase:
            return failed(message("error.noObject", action=action))
        if need_light and not self.ctx.light.is_light_present():
            return failed(message("error.tooDarkAction", action=action))
        obj = self.resolve(phrase)
        if obj is None:
            return failed(message("error.objectNotFound", item=phrase))
        if not self.ctx.light.is_object_visible(obj):
            return failed(message("error.objectNotVisible", item=phrase))
        return obj

    def visible_names(self, carried: bool | None = None) -> list[str]:
        """Names of visible present objects for suggestions.

        ``carried`` restricts to held (True) or lying (False) objects.
        """
        names = []
        for obj in self.ctx.examination.get_examinable_objects():
            held = self.ctx.scenes.is_carried(obj.id)
            if carried is None or carried == held:
                names.append(obj.name)
        return names

    def apply_interaction(
        self, obj: SceneObject, verb: str, interaction: Interaction
    ) -> str:
        """Apply an interaction's effects and return its message.

        The caller has already checked required_flags.
        """
        flags = self.ctx.flags
        text = flags.select_state(interaction.states) or interaction.message
        flags.set_all(interaction.grants_flags)
        flags.remove_all(interaction.removes_flags)
        for object_id in interaction.reveals_objects:
            flags.set_flag(revealed_flag(object_id))
            self.ctx.state.known_objects.add(object_id)
        self.ctx.scoring.award_once(f"{obj.id}_{verb}", interaction.score)
        return text

    def interaction_failure(
        self, obj: SceneObject, verb: str, interaction: Interaction
    ) -> CommandResult:
        return failed(
            interaction.failure_message
            or message("error.cantPerformAction", action=verb, item=obj.name)
        )
