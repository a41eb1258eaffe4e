"""Mutable per-session game state.

All values are strings, ints, bools, lists, sets and dicts; no World
references. This keeps the state cheap to copy (one working copy per command)
and trivial to snapshot for persistence.
"""

import copy
from dataclasses import dataclass, field
from typing import Any

from .world import World

SNAPSHOT_VERSION = 1


@dataclass
class GameState:
    """All mutable per-session state."""

    current_scene: str = ""
    # flag name -> True; absence means false
    flags: dict[str, bool] = field(default_factory=dict)
    # object id -> {"contents": [...], "location": scene_id, "burned": n}
    object_data: dict[str, dict[str, Any]] = field(default_factory=dict)
    score: int = 0
    max_score: int = 0
    turns: int = 0
    known_objects: set[str] = field(default_factory=set)
    game_won: bool = False

    def copy(self) -> "GameState":
        return copy.deepcopy(self)

    def to_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serialisable snapshot of this state."""
        return {
            "version": SNAPSHOT_VERSION,
            "current_scene": self.current_scene,
            "flags": sorted(flag for flag, on in self.flags.items() if on),
            "object_data": copy.deepcopy(self.object_data),
            "score": self.score,
            "max_score": self.max_score,
            "turns": self.turns,
            "known_objects": sorted(self.known_objects),
            "game_won": self.game_won,
        }

    @classmethod
    def from_snapshot(cls, snapshot: dict[str, Any]) -> "GameState":
        """Rebuild a state from a snapshot produced by to_snapshot()."""
        version = snapshot.get("version", SNAPSHOT_VERSION)
        if version != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version: {version}")
        return cls(
            current_scene=snapshot["current_scene"],
            flags={flag: True for flag in snapshot.get("flags", [])},
            object_data=copy.deepcopy(snapshot.get("object_data", {})),
            score=int(snapshot.get("score", 0)),
            max_score=int(snapshot.get("max_score", 0)),
            turns=int(snapshot.get("turns", 0)),
            known_objects=set(snapshot.get("known_objects", [])),
            game_won=bool(snapshot.get("game_won", False)),
        )


def new_game_state(world: World) -> GameState:
    """Create a fresh game state with containers in their starting state."""
    state = GameState(current_scene=world.start_scene, max_score=world.max_score)

    for obj in world.objects.values():
        if obj.is_container:
            state.object_data[obj.id] = {"contents": list(obj.contents)}
            if obj.open:
                state.flags[f"{obj.id}Open"] = True
            if obj.locked:
                state.flags[f"{obj.id}Locked"] = True

    state.flags[f"{world.start_scene}Visited"] = True
    return state
