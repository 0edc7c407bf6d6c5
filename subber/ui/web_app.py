"""
Web application module for the Subber sideline tracker.

This module contains the Flask web server that renders the game and roster
after every action, plus a JSON state endpoint. The Tracker is handed to
create_app() and shared by every request thread.
"""
import logging
import os
from typing import List, Optional

from flask import Flask, g, jsonify, render_template, request, send_from_directory
from flask_cors import CORS

from ..models import GameState
from ..services import MalformedInputError, OpResult, Tracker, parse_player_updates
from ..utils import (
    APP_DESCRIPTION, APP_TITLE, DEFAULT_HOST, DEFAULT_PORT, POLL_INTERVAL_SECONDS,
    fmt_clock, fmt_mmss, format_duration, monotonic_ts
)
from ..utils.constants import (
    CORS_ALLOWED_HEADERS, CORS_ALLOWED_METHODS, CORS_MAX_AGE_SECONDS, SECURITY_HEADERS
)

logger = logging.getLogger(__name__)
request_logger = logging.getLogger(__name__ + ".request")

UI_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATE_DIR = os.path.join(UI_DIR, "templates")
STATIC_DIR = os.path.join(UI_DIR, "static")

POLLING_STATES = (GameState.IN_PROGRESS, GameState.PAUSED)


def create_app(tracker: Tracker, static_folder: Optional[str] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        tracker: Tracker shared by all requests
        static_folder: Directory to serve static files from

    Returns:
        Configured Flask application instance
    """
    static_folder = static_folder or STATIC_DIR
    app = Flask(
        __name__,
        static_folder=static_folder,
        static_url_path="/static",
        template_folder=TEMPLATE_DIR,
    )
    app.extensions["subber.tracker"] = tracker

    CORS(
        app,
        supports_credentials=True,
        methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
        max_age=CORS_MAX_AGE_SECONDS,
    )

    app.add_template_filter(fmt_mmss, "mmss")
    app.add_template_filter(fmt_clock, "clock")
    app.add_template_filter(format_duration, "duration")

    # ==================== Request hooks ==================== #

    @app.before_request
    def start_timer():
        g.request_start = monotonic_ts()

    @app.after_request
    def add_security_headers(response):
        for key, value in SECURITY_HEADERS.items():
            response.headers[key] = value
        return response

    @app.after_request
    def log_request(response):
        started = g.get("request_start")
        duration_us = int((monotonic_ts() - started) * 1_000_000) if started is not None else 0
        request_logger.info(
            f"http request method={request.method} path={request.path} "
            f"status={response.status_code} duration_us={duration_us}"
        )
        return response

    # ==================== Rendering helpers ==================== #

    def _page_context(message: Optional[str] = None) -> dict:
        game, players = tracker.snapshot()
        state = game.state()
        return {
            "title": APP_TITLE,
            "description": APP_DESCRIPTION,
            "game": game,
            "state": state,
            "game_elapsed": game.elapsed_seconds(monotonic_ts()),
            "current_period": game.current_period(),
            "players": players,
            "poll": state in POLLING_STATES,
            "poll_interval": POLL_INTERVAL_SECONDS,
            "message": message,
        }

    def _render_home(status: int = 200, message: Optional[str] = None):
        return render_template("layout.html", **_page_context(message)), status

    def _render_result(result: OpResult, action: str):
        if result is OpResult.INVALID_TRANSITION:
            return _render_home(409, f"Cannot {action} a game that has not started.")
        return _render_home()

    def _unknown_message(names: List[str]) -> Optional[str]:
        if not names:
            return None
        return f"Unknown player: {', '.join(names)}"

    def _respond_error(status: int, error: Exception):
        logger.warning(f"rejected request {request.method} {request.path}: {error}")
        return _render_home(status, str(error))

    # ==================== Pages ==================== #

    @app.route("/", methods=["GET"])
    def home():
        """Serve the main page."""
        return _render_home()

    @app.route("/game", methods=["GET"])
    def get_game():
        """Render the game panel on its own, for refreshing it in place."""
        return render_template("_game.html", **_page_context())

    @app.route("/players", methods=["GET"])
    def list_players():
        """Render the player table on its own, for refreshing it in place."""
        return render_template("_players.html", **_page_context())

    # ==================== Game actions ==================== #

    @app.route("/game/start", methods=["POST"])
    def start_game():
        """Start a new game with all players set to zero."""
        return _render_result(tracker.start_game(), "start")

    @app.route("/game/pause", methods=["POST"])
    def pause_game():
        """Pause the game, subbing off all players."""
        return _render_result(tracker.pause_game(), "pause")

    @app.route("/game/resume", methods=["POST"])
    def resume_game():
        """Resume the game."""
        return _render_result(tracker.resume_game(), "resume")

    @app.route("/game/end", methods=["POST"])
    def end_game():
        """End the game without resetting player statistics."""
        return _render_result(tracker.end_game(), "end")

    @app.route("/game/reset", methods=["POST"])
    def reset_game():
        """Reset the game and all player statistics."""
        return _render_result(tracker.reset_game(), "reset")

    # ==================== Player actions ==================== #

    @app.route("/players/<name>/reset", methods=["POST"])
    def reset_player(name: str):
        """Reset play count and duration to zero for each submitted player."""
        names = request.form.getlist("playerName")
        if not names:
            return _respond_error(400, MalformedInputError("player names not provided"))

        unknown = [n for n in names if tracker.player_reset(n) is OpResult.UNKNOWN_PLAYER]
        return _render_home(message=_unknown_message(unknown))

    @app.route("/players/<name>/set", methods=["POST"])
    def set_player(name: str):
        """Set submitted players to the given play count and duration."""
        try:
            updates = parse_player_updates(
                request.form.getlist("playerName"),
                request.form.getlist("playCount"),
                request.form.getlist("playDuration"),
            )
        except MalformedInputError as e:
            return _respond_error(400, e)

        unknown = [
            u.name for u in updates
            if tracker.player_set(u.name, u.play_count, u.play_duration) is OpResult.UNKNOWN_PLAYER
        ]
        return _render_home(message=_unknown_message(unknown))

    @app.route("/players/<name>/sub-on", methods=["POST"])
    def sub_on_player(name: str):
        """Sub a player on, increasing play count and resuming their timer."""
        result = tracker.player_sub_on(name)
        unknown = [name] if result is OpResult.UNKNOWN_PLAYER else []
        return _render_home(message=_unknown_message(unknown))

    @app.route("/players/<name>/sub-off", methods=["POST"])
    def sub_off_player(name: str):
        """Sub a player off, pausing their timer."""
        result = tracker.player_sub_off(name)
        unknown = [name] if result is OpResult.UNKNOWN_PLAYER else []
        return _render_home(message=_unknown_message(unknown))

    # ==================== API Endpoints ==================== #

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Get current game state and player statistics."""
        game, players = tracker.snapshot()
        return jsonify({
            "success": True,
            "game": game.to_dict(monotonic_ts()),
            "players": [p.to_dict() for p in players],
        })

    # ==================== Static assets ==================== #

    @app.route("/robots.txt", methods=["GET"])
    def robots():
        return send_from_directory(static_folder, "robots.txt")

    @app.route("/favicon.ico", methods=["GET"])
    def favicon():
        return send_from_directory(static_folder, "favicon.ico")

    return app


def run_web_app(
    tracker: Tracker,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    debug: bool = False,
) -> None:
    """
    Run the web application.

    Args:
        tracker: Tracker shared by all requests
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
        debug: Run Flask in debug mode
    """
    app = create_app(tracker)
    logger.info(f"listening on: http://{host}:{port}")
    # threaded so concurrent requests share the tracker
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)
