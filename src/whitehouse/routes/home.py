"""Home, help, and about routes."""

from xitzin import Request, Xitzin

from ..engine.handlers.info import HELP_VERBS
from ..engine.parser import DIRECTIONS


def register_routes(app: Xitzin) -> None:
    """Register home routes."""

    @app.gemini("/", name="home")
    def home(request: Request):
        world = getattr(request.app.state, "world", None)
        return app.template(
            "home.gmi",
            title=world.title if world else "The White House",
            intro=world.intro if world else "",
        )

    @app.gemini("/help", name="help")
    def help_page(request: Request):
        return app.template(
            "help.gmi",
            verbs=HELP_VERBS,
            directions=sorted(DIRECTIONS.items(), key=lambda item: item[1]),
        )

    @app.gemini("/about", name="about")
    def about(request: Request):
        return app.template("about.gmi")
