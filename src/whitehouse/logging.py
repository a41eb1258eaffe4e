"""Logging configuration for White House."""

import hashlib
import sys
from pathlib import Path
from typing import Any

import structlog

# Player input is free text; keep log lines bounded.
MAX_COMMAND_LENGTH = 80

_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


def hash_fingerprint_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Replace certificate fingerprints with a short hash."""
    fp = event_dict.pop("fingerprint", None)
    if fp and fp != "unknown":
        event_dict["fingerprint_hash"] = hashlib.sha256(fp.encode()).hexdigest()[:12]
    elif fp:
        event_dict["fingerprint"] = fp
    return event_dict


def truncate_command_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Clip raw player commands to MAX_COMMAND_LENGTH characters."""
    command = event_dict.get("command")
    if isinstance(command, str) and len(command) > MAX_COMMAND_LENGTH:
        event_dict["command"] = command[:MAX_COMMAND_LENGTH] + "..."
    return event_dict


def _level_to_int(level: str) -> int:
    return _LEVELS.get(level.upper(), 20)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    json_logs: bool = False,
    hash_fingerprints: bool = True,
) -> None:
    """Configure structlog for the server and the engine."""
    output_stream = open(log_file, "a") if log_file else sys.stdout

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(
            fmt="iso" if json_logs else "%Y-%m-%d %H:%M:%S"
        ),
        truncate_command_processor,
    ]
    if hash_fingerprints:
        processors.append(hash_fingerprint_processor)

    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=output_stream.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_to_int(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output_stream),
        cache_logger_on_first_use=True,
    )


def bind_player(fingerprint: str) -> None:
    """Attach the player's fingerprint to every log line of this request."""
    structlog.contextvars.bind_contextvars(fingerprint=fingerprint)


def clear_player() -> None:
    structlog.contextvars.unbind_contextvars("fingerprint")


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module."""
    return structlog.get_logger(name)
