"""Resolvers that read and write the flag store, one concern each."""

from typing import NamedTuple


class Outcome(NamedTuple):
    """Result of a single mechanic operation."""

    success: bool
    message: str = ""


def ok(message: str = "") -> Outcome:
    return Outcome(True, message)


def fail(message: str) -> Outcome:
    return Outcome(False, message)


def join_names(names: list[str]) -> str:
    """Join display names as prose: 'a', 'a and b', 'a, b and c'."""
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " and " + names[-1]
