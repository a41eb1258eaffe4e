"""Database models for White House."""

import datetime as dt

from sqlmodel import Field, SQLModel


def _now() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


class Player(SQLModel, table=True):
    id: int | None = Field(default=None, primary_key=True)
    fingerprint: str = Field(unique=True, index=True)
    created_at: dt.datetime = Field(default_factory=_now)
    last_seen: dt.datetime = Field(default_factory=_now)


class SavedGame(SQLModel, table=True):
    """One snapshot per player.

    turns, score and won duplicate what is inside the blob so saves can be
    listed without decoding them.
    """

    id: int | None = Field(default=None, primary_key=True)
    player_id: int = Field(foreign_key="player.id", unique=True, index=True)
    state_blob: bytes  # zlib-compressed JSON snapshot
    scene: str = ""
    turns: int = 0
    score: int = 0
    won: bool = False
    started_at: dt.datetime = Field(default_factory=_now)
    last_played: dt.datetime = Field(default_factory=_now)
