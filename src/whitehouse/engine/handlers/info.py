"""Inventory, score and help."""

from ..parser import Command
from ..text import message
from .base import CommandResult, Handler, succeeded

HELP_VERBS = (
    "look",
    "examine [thing]",
    "read [thing]",
    "take [thing]",
    "drop [thing]",
    "put [thing] in [container]",
    "open [thing]",
    "close [thing]",
    "move [thing]",
    "go [direction]",
    "enter [thing]",
    "climb [thing]",
    "turn on [thing]",
    "inventory",
    "score",
)


class InventoryHandler(Handler):
    verbs = ("inventory",)

    def handle(self, command: Command) -> CommandResult:
        return succeeded(self.ctx.inventory.describe(), increment_turn=False)

    def suggestions(self) -> list[str]:
        return ["inventory"]


class ScoreHandler(Handler):
    verbs = ("score",)

    def handle(self, command: Command) -> CommandResult:
        text = self.ctx.scoring.summary()
        if self.ctx.state.game_won:
            text = f"{text}\n{message('score.won')}"
        return succeeded(text, increment_turn=False)

    def suggestions(self) -> list[str]:
        return ["score"]


class HelpHandler(Handler):
    verbs = ("help",)

    def handle(self, command: Command) -> CommandResult:
        return succeeded(
            message("help.verbs", verbs=", ".join(HELP_VERBS)), increment_turn=False
        )

    def suggestions(self) -> list[str]:
        return ["help"]
