"""Configuration for White House."""

import os
from dataclasses import dataclass
from pathlib import Path


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    if default:
        return value.lower() not in ("false", "0", "no")
    return value.lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    database_url: str = "sqlite:///./whitehouse.db"
    host: str = "localhost"
    port: int = 1965
    certfile: Path | None = None
    keyfile: Path | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
    hash_fingerprints: bool = True
    # None means the world bundled with the package
    world_file: Path | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from WHITEHOUSE_* environment variables."""
        certfile = os.getenv("WHITEHOUSE_CERTFILE")
        keyfile = os.getenv("WHITEHOUSE_KEYFILE")
        log_file = os.getenv("WHITEHOUSE_LOG_FILE")
        world_file = os.getenv("WHITEHOUSE_WORLD_FILE")

        return cls(
            database_url=os.getenv("WHITEHOUSE_DATABASE_URL", cls.database_url),
            host=os.getenv("WHITEHOUSE_HOST", cls.host),
            port=int(os.getenv("WHITEHOUSE_PORT", str(cls.port))),
            certfile=Path(certfile) if certfile else None,
            keyfile=Path(keyfile) if keyfile else None,
            log_level=os.getenv("WHITEHOUSE_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=_flag("WHITEHOUSE_JSON_LOGS", False),
            hash_fingerprints=_flag("WHITEHOUSE_HASH_FINGERPRINTS", True),
            world_file=Path(world_file) if world_file else None,
        )
