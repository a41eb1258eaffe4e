"""Flag store and condition grammar.

Every dynamic fact about the world is a named flag. Conditions are lists
of strings, ANDed together; each element is one of:

    flag          the flag must be set
    !flag         the flag must be unset
    a|!b|c        at least one of the pipe-separated sub-conditions holds

Example: ``["hasKey", "!doorOpen|hasCrowbar"]`` holds iff ``hasKey`` is set
and either ``doorOpen`` is unset or ``hasCrowbar`` is set.
"""

from collections.abc import Iterable, Mapping

from ..state import GameState


def carried_flag(object_id: str) -> str:
    return f"{object_id}Has"


def open_flag(object_id: str) -> str:
    return f"{object_id}Open"


def locked_flag(object_id: str) -> str:
    return f"{object_id}Locked"


def revealed_flag(object_id: str) -> str:
    return f"{object_id}Revealed"


def light_on_flag(object_id: str) -> str:
    return f"{object_id}On"


def light_dead_flag(object_id: str) -> str:
    return f"{object_id}Dead"


def moved_flag(object_id: str) -> str:
    return f"{object_id}Moved"


def examined_flag(object_id: str) -> str:
    return f"{object_id}Examined"


def visited_flag(scene_id: str) -> str:
    return f"{scene_id}Visited"


def scored_flag(event: str) -> str:
    return f"{event}_scored"


class FlagStore:
    """Reads and writes flags on one GameState."""

    def __init__(self, state: GameState):
        self.state = state

    def set_flag(self, name: str) -> None:
        self.state.flags[name] = True

    def remove_flag(self, name: str) -> None:
        self.state.flags.pop(name, None)

    def has_flag(self, name: str) -> bool:
        return bool(self.state.flags.get(name))

    def set_all(self, names: Iterable[str]) -> None:
        for name in names:
            self.set_flag(name)

    def remove_all(self, names: Iterable[str]) -> None:
        for name in names:
            self.remove_flag(name)

    def check_condition(self, condition: str) -> bool:
        """Evaluate a single element of a condition list."""
        condition = condition.strip()
        if "|" in condition:
            return any(self.check_condition(part) for part in condition.split("|"))
        if condition.startswith("!"):
            return not self.has_flag(condition[1:].strip())
        return self.has_flag(condition)

    def check_flags(self, conditions: Iterable[str]) -> bool:
        """True when every condition holds. An empty list is true."""
        return all(self.check_condition(condition) for condition in conditions)

    def select_state(self, states: Mapping[str, str]) -> str | None:
        """Return the first state entry whose comma-joined key holds.

        Declaration order matters: the first match wins.
        """
        for key, text in states.items():
            if self.check_flags(part for part in key.split(",") if part.strip()):
                return text
        return None
