"""Movement between scenes: directions, enter and climb."""

from ...logging import get_logger
from ..mechanics.context import GameContext
from ..parser import DIRECTION_NAMES, Command, normalize_direction
from ..text import message
from .base import CommandResult, Handler, failed, succeeded

logger = get_logger(__name__)


def travel(ctx: GameContext, target_scene: str, intro: str = "", score: int = 0) -> str:
    """Move the player and return what they see on arrival.

    Movement works in darkness; the arrival text is then the dark text.
    """
    brief = ctx.scenes.has_visited(target_scene)
    scene = ctx.scenes.move_to(target_scene)
    ctx.scoring.award_once(f"{scene.id}_enter", score)
    logger.debug("scene_entered", scene=scene.id, revisit=brief)
    description = ctx.examination.describe_scene(scene, brief=brief)
    return f"{intro}\n\n{description}" if intro else description


def go(ctx: GameContext, direction: str) -> CommandResult:
    scene_exit = ctx.scenes.current_scene().exit_towards(direction)
    if scene_exit is None:
        return failed(message("error.noExit"))
    if not ctx.flags.check_flags(scene_exit.required_flags):
        return failed(scene_exit.failure_message or message("error.exitBlocked"))
    return succeeded(
        travel(ctx, scene_exit.target_scene, scene_exit.description, scene_exit.score)
    )


class MovementHandler(Handler):
    verbs = ("go",) + tuple(sorted(DIRECTION_NAMES))

    def can_handle(self, command: Command) -> bool:
        if command.verb in DIRECTION_NAMES or command.verb == "go":
            return True
        # "move north" is movement; "move rug" is not
        return command.verb == "move" and bool(
            command.object and normalize_direction(command.object)
        )

    def handle(self, command: Command) -> CommandResult:
        direction = normalize_direction(command.verb)
        if direction is None:
            direction = normalize_direction(command.object or command.target or "")
        if direction is None:
            return failed(message("error.whichWay"))
        return go(self.ctx, direction)

    def suggestions(self) -> list[str]:
        return [scene_exit.direction for scene_exit in self.ctx.scenes.available_exits()]


class _PassageHandler(Handler):
    """Enter or climb: a direction, or an object that leads somewhere."""

    default_direction: str | None = None

    def handle(self, command: Command) -> CommandResult:
        verb = command.verb
        phrase = command.object or command.target
        direction = normalize_direction(phrase or "")
        if direction is None and phrase is None:
            direction = self.default_direction
        if direction is not None:
            return go(self.ctx, direction)

        found = self.lookup(phrase, verb)
        if isinstance(found, CommandResult):
            return found
        obj = found

        interaction = obj.interaction(verb)
        if interaction is None:
            return self.nothing_to_do(obj.name)
        if not self.ctx.flags.check_flags(interaction.required_flags):
            return self.interaction_failure(obj, verb, interaction)

        text = self.apply_interaction(obj, verb, interaction)
        if interaction.target_scene:
            text = travel(self.ctx, interaction.target_scene, text)
        return succeeded(text)

    def nothing_to_do(self, name: str) -> CommandResult:
        raise NotImplementedError

    def suggestions(self) -> list[str]:
        return [
            f"{self.verbs[0]} {obj.name}"
            for obj in self.ctx.examination.get_examinable_objects()
            if obj.interaction(self.verbs[0])
        ]


class EnterHandler(_PassageHandler):
    verbs = ("enter",)
    default_direction = "in"

    def nothing_to_do(self, name: str) -> CommandResult:
        return failed(message("error.cantPerformAction", action="enter", item=name))


class ClimbHandler(_PassageHandler):
    verbs = ("climb",)
    default_direction = "up"

    def nothing_to_do(self, name: str) -> CommandResult:
        return failed(message("error.climbPointless", item=name))
