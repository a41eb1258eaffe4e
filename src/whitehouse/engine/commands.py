"""Command dispatch.

Dispatcher.dispatch(state, raw_input) -> (new_state, CommandResult) is the
main entry point. It parses the input, runs the first handler that accepts
the command against a working copy of the state, and returns the working
copy only when the handler succeeded. Failed or crashed commands hand back
the state they were given, untouched.
"""

from collections.abc import Sequence

from ..logging import get_logger
from .handlers import DEFAULT_HANDLERS, CommandResult, Handler
from .handlers.navigation import MovementHandler
from .mechanics.context import GameContext
from .parser import DIRECTION_NAMES, Command, ParseError, parse_command
from .state import GameState
from .text import message
from .world import World

logger = get_logger(__name__)


class Dispatcher:
    def __init__(
        self,
        world: World,
        handler_types: Sequence[type[Handler]] = DEFAULT_HANDLERS,
    ):
        self.world = world
        self.handler_types = tuple(handler_types)

    def _handlers(self, ctx: GameContext) -> list[Handler]:
        return [handler_type(ctx) for handler_type in self.handler_types]

    def _select(self, command: Command, handlers: list[Handler]) -> Handler | None:
        if command.verb in DIRECTION_NAMES:
            for handler in handlers:
                if isinstance(handler, MovementHandler):
                    return handler
        for handler in handlers:
            if handler.can_handle(command):
                return handler
        return None

    def dispatch(
        self, state: GameState, raw_input: str
    ) -> tuple[GameState, CommandResult]:
        """Run one command as a transaction over ``state``."""
        try:
            command = parse_command(raw_input)
        except ParseError:
            return state, CommandResult(False, message("error.notUnderstood"))

        working = state.copy()
        ctx = GameContext(self.world, working)
        handlers = self._handlers(ctx)

        try:
            handler = self._select(command, handlers)
            if handler is None:
                logger.debug("command_unknown", verb=command.verb)
                return state, CommandResult(False, message("error.unknownVerb"))
            result = handler.handle(command)
        except Exception:
            logger.exception(
                "handler_failed",
                command=raw_input,
                scene=state.current_scene,
            )
            return state, CommandResult(False, message("error.general"))

        logger.debug(
            "command_dispatched",
            verb=command.verb,
            handler=type(handler).__name__,
            success=result.success,
        )
        if not result.success:
            return state, result

        if result.increment_turn:
            ctx.progress.increment_turns()
            notices = ctx.light.burn()
            if notices:
                result = CommandResult(
                    result.success,
                    "\n\n".join([result.message, *notices]),
                    result.increment_turn,
                )
        return working, result

    def get_suggestions(self, state: GameState, partial: str = "") -> list[str]:
        """Commands that make sense right now, filtered by prefix."""
        prefix = " ".join(partial.lower().split())
        ctx = GameContext(self.world, state.copy())
        seen: set[str] = set()
        suggestions = []
        for handler in self._handlers(ctx):
            for suggestion in handler.suggestions():
                if suggestion in seen or not suggestion.startswith(prefix):
                    continue
                seen.add(suggestion)
                suggestions.append(suggestion)
        return suggestions

    def known_commands(self) -> list[str]:
        """Every verb the handler chain answers to, in chain order."""
        verbs: list[str] = []
        for handler_type in self.handler_types:
            for verb in handler_type.verbs:
                if verb not in verbs and verb not in DIRECTION_NAMES:
                    verbs.append(verb)
        return verbs


def handle_command(world: World, state: GameState, raw_input: str) -> CommandResult:
    """Process a command against ``state`` in place and return the result."""
    new_state, result = Dispatcher(world).dispatch(state, raw_input)
    if new_state is not state:
        state.__dict__.update(new_state.__dict__)
    return result
