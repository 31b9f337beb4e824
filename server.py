import logging
import typing

from flask import Flask, jsonify, request

from board import InvalidGameState
from config import Settings, load_settings

Handlers = typing.Dict[str, typing.Callable]


def create_app(handlers: Handlers) -> Flask:
    app = Flask("Battlesnake")

    @app.get("/")
    def on_info():
        return handlers["info"]()

    @app.post("/start")
    def on_start():
        game_state = request.get_json()
        handlers["start"](game_state)
        return "ok"

    @app.post("/move")
    def on_move():
        game_state = request.get_json()
        return handlers["move"](game_state)

    @app.post("/end")
    def on_end():
        game_state = request.get_json()
        handlers["end"](game_state)
        return "ok"

    @app.errorhandler(InvalidGameState)
    def on_invalid_game_state(error):
        app.logger.warning("rejected request to %s: %s", request.path, error)
        return jsonify({"error": str(error)}), 400

    @app.after_request
    def identify_server(response):
        response.headers.set("server", "battlesnake/github/starter-snake-python")
        return response

    return app


def run_server(handlers: Handlers, settings: typing.Optional[Settings] = None):
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    app = create_app(handlers)
    print(f"\nRunning Battlesnake at http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port)
