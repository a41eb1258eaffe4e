"""Command handlers, in dispatch order."""

from .base import CommandResult, Handler
from .containers import OpenCloseHandler
from .info import HelpHandler, InventoryHandler, ScoreHandler
from .interaction import InteractionHandler
from .light import TurnHandler
from .navigation import ClimbHandler, EnterHandler, MovementHandler
from .objects import DropHandler, MoveObjectHandler, PutHandler, TakeHandler
from .vision import ExamineHandler, LookHandler, ReadHandler

# Order matters: the first handler that accepts a command runs it.
# Put precedes drop, movement precedes moving objects, and the generic
# interaction handler comes last.
DEFAULT_HANDLERS: tuple[type[Handler], ...] = (
    LookHandler,
    ExamineHandler,
    ReadHandler,
    TakeHandler,
    PutHandler,
    DropHandler,
    OpenCloseHandler,
    MovementHandler,
    MoveObjectHandler,
    EnterHandler,
    ClimbHandler,
    TurnHandler,
    InventoryHandler,
    ScoreHandler,
    HelpHandler,
    InteractionHandler,
)

__all__ = ["CommandResult", "DEFAULT_HANDLERS", "Handler"]
