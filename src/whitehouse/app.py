"""Xitzin application factory for White House."""

from importlib import resources
from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine
from xitzin import Xitzin

from . import __version__
from .config import Config
from .engine.loader import load_world
from .logging import get_logger

logger = get_logger(__name__)


def _get_data_path() -> Path:
    """Locate the bundled world.json (works when installed in a venv)."""
    return resources.files("whitehouse.data").joinpath("world.json")


def create_app(config: Config | None = None) -> Xitzin:
    """Create and configure the Xitzin application."""
    config = config or Config.from_env()

    templates_dir = Path(__file__).parent / "templates"

    app = Xitzin(
        title="The White House",
        version=__version__,
        templates_dir=templates_dir,
    )

    engine = create_engine(config.database_url)
    app.state.engine = engine
    app.state.config = config

    @app.on_startup
    async def startup():
        """Initialize database and load game world."""
        SQLModel.metadata.create_all(engine)
        logger.debug("database_setup_complete")

        data_path = config.world_file or _get_data_path()
        world = load_world(data_path)
        app.state.world = world
        logger.info(
            "world_loaded",
            title=world.title,
            scenes=len(world.scenes),
            objects=len(world.objects),
            treasures=len(world.treasures()),
        )
        logger.info("startup_complete")

    from .routes import home, play

    home.register_routes(app)
    play.register_routes(app)

    return app


def get_session(app: Xitzin) -> Session:
    """Get a database session from the app."""
    return Session(app.state.engine)
