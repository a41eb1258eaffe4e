"""Turn a line of player input into a Command."""

from dataclasses import dataclass

PREPOSITIONS = ("in", "on", "at", "to", "with", "under", "behind", "through", "from")
ARTICLES = frozenset({"the", "a", "an"})

VERB_SYNONYMS = {
    "l": "look",
    "x": "examine",
    "inspect": "examine",
    "check": "examine",
    "i": "inventory",
    "inv": "inventory",
    "get": "take",
    "grab": "take",
    "pick": "take",
    "shut": "close",
    "activate": "use",
    "operate": "use",
    "discard": "drop",
    "switch": "turn",
    "walk": "go",
    "run": "go",
    "head": "go",
    "push": "move",
    "pull": "move",
    "shift": "move",
    "?": "help",
}

DIRECTIONS = {
    "n": "north",
    "s": "south",
    "e": "east",
    "w": "west",
    "u": "up",
    "d": "down",
    "ne": "northeast",
    "nw": "northwest",
    "se": "southeast",
    "sw": "southwest",
}
DIRECTION_NAMES = frozenset(DIRECTIONS.values())


class ParseError(ValueError):
    """Raised for input that cannot be turned into a command."""


@dataclass(frozen=True)
class Command:
    verb: str
    object: str | None = None
    preposition: str | None = None
    target: str | None = None
    raw: str = ""

    @property
    def words(self) -> list[str]:
        """Object and target words together, in input order."""
        return f"{self.object or ''} {self.target or ''}".split()


def normalize_direction(word: str) -> str | None:
    """Return the canonical direction for a word, or None."""
    word = DIRECTIONS.get(word, word)
    return word if word in DIRECTION_NAMES else None


def _phrase(tokens: list[str]) -> str | None:
    words = [token for token in tokens if token not in ARTICLES]
    return " ".join(words) or None


def parse_command(raw: str) -> Command:
    """Parse ``raw`` into a Command.

    The first preposition after the verb splits the object phrase from the
    target phrase: "put leaflet in mailbox" -> put / leaflet / in / mailbox.
    """
    tokens = raw.lower().split()
    if not tokens:
        raise ParseError("empty command")

    verb = VERB_SYNONYMS.get(tokens[0], tokens[0])
    verb = normalize_direction(verb) or verb
    rest = tokens[1:]

    if verb == "take" and rest and rest[0] == "up":
        rest = rest[1:]
    elif verb == "look" and rest and rest[0] in PREPOSITIONS:
        verb = "examine"
        rest = rest[1:]

    for index, token in enumerate(rest):
        if token in PREPOSITIONS:
            return Command(
                verb=verb,
                object=_phrase(rest[:index]),
                preposition=token,
                target=_phrase(rest[index + 1 :]),
                raw=raw.strip(),
            )
    return Command(verb=verb, object=_phrase(rest), raw=raw.strip())
