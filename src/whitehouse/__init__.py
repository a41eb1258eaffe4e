"""The White House: a flag-driven text adventure over Gemini."""

__version__ = "0.1.0"

from .app import create_app  # noqa: E402
from .config import Config  # noqa: E402
from .logging import configure_logging, get_logger  # noqa: E402

__all__ = ["main", "create_app", "Config", "__version__"]


def main() -> None:
    """Entry point for the White House server."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
        hash_fingerprints=config.hash_fingerprints,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        host=config.host,
        port=config.port,
        log_level=config.log_level,
        world_file=str(config.world_file) if config.world_file else "bundled",
    )

    app = create_app(config)
    app.run(
        host=config.host,
        port=config.port,
        certfile=str(config.certfile) if config.certfile else None,
        keyfile=str(config.keyfile) if config.keyfile else None,
    )
