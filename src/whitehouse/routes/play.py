"""Gameplay routes."""

from contextlib import contextmanager

from sqlmodel import Session
from xitzin import Redirect, Request, Xitzin
from xitzin.auth import get_identity, require_certificate

from ..logging import bind_player, clear_player
from ..session import GameSession, get_or_create_player

GAME_OVER = "You have already won. Start a new game to play again."


@contextmanager
def _game_session(request: Request):
    """Load the player's game session with auto-close."""
    identity = get_identity(request)
    db_session = Session(request.app.state.engine)
    bind_player(identity.fingerprint)
    try:
        player = get_or_create_player(db_session, identity.fingerprint)
        world = request.app.state.world
        yield GameSession.load_or_create(db_session, player, world)
    finally:
        db_session.close()
        clear_player()


def _render_play(app: Xitzin, game: GameSession, message: str = ""):
    """Render the main play view."""
    sidebar = game.sidebar()
    return app.template(
        "play.gmi",
        description=game.describe(),
        message=message,
        location=sidebar.location,
        exits=sidebar.exits,
        objects=game.game.visible_object_names(),
        inventory=game.game.inventory_names(),
        known_objects=sidebar.known_objects,
        score=sidebar.score,
        max_score=sidebar.max_score,
        moves=sidebar.moves,
        is_won=game.game.is_won,
    )


def _run(app: Xitzin, game: GameSession, command: str):
    if game.game.is_won:
        return _render_play(app, game, message=GAME_OVER)
    result = game.process_command(command)
    game.save()
    return _render_play(app, game, message=result.message)


def _register_action_routes(app: Xitzin) -> None:
    """Register command and movement routes."""

    @app.gemini("/play", name="play")
    @require_certificate
    def play(request: Request):
        """Main game view."""
        with _game_session(request) as game:
            game.save()
            return _render_play(app, game)

    @app.gemini("/go/{direction}", name="go")
    @require_certificate
    def go(request: Request, direction: str):
        """Movement via clickable link."""
        with _game_session(request) as game:
            return _run(app, game, f"go {direction}")

    @app.input("/cmd", prompt="What do you want to do?", name="cmd")
    @require_certificate
    def cmd(request: Request, query: str):
        """Freeform command entry."""
        with _game_session(request) as game:
            return _run(app, game, query)

    @app.gemini("/look", name="look")
    @require_certificate
    def look(request: Request):
        """Look around."""
        with _game_session(request) as game:
            return _run(app, game, "look")


def _register_info_routes(app: Xitzin) -> None:
    """Register inventory, score, hints, and game management routes."""

    @app.gemini("/inventory", name="inventory")
    @require_certificate
    def inventory(request: Request):
        """Show carried items."""
        with _game_session(request) as game:
            result = game.process_command("inventory")
            return _render_play(app, game, message=result.message)

    @app.gemini("/score", name="score")
    @require_certificate
    def score(request: Request):
        """Show score."""
        with _game_session(request) as game:
            result = game.process_command("score")
            return _render_play(app, game, message=result.message)

    @app.gemini("/hints", name="hints")
    @require_certificate
    def hints(request: Request):
        """List commands that make sense right now."""
        with _game_session(request) as game:
            return app.template(
                "hints.gmi",
                suggestions=game.suggestions(),
                known_commands=game.sidebar().known_commands,
            )

    @app.input(
        "/new",
        prompt="Are you sure you want to start over? Type YES to confirm:",
        name="new_game",
    )
    @require_certificate
    def new_game(request: Request, query: str):
        """Reset game with confirmation."""
        with _game_session(request) as game:
            if query.strip().upper() == "YES":
                opening = game.reset()
                game.save()
                return _render_play(app, game, message=opening)
            return Redirect("/play")


def register_routes(app: Xitzin) -> None:
    """Register gameplay routes."""
    _register_action_routes(app)
    _register_info_routes(app)
