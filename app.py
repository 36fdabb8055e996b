# app.py
"""
Flask entrypoint for the NHL results service.

Routes:
  HTML:
    - /           team picker (static public/index.html)
    - /home       did the team win today?
    - /yesterday  did the team win yesterday?
    - /score      box score for a team on a date

  JSON:
    - /health

Query parameters (common):
  - team=XXX (3-letter NHL team code, e.g. TOR, MIN, NYR)
  - date=YYYY-MM-DD (score page only; defaults to today)

Notes:
  - Unknown team codes silently fall back to the configured default team.
  - Every page renders with HTTP 200, even when the scores API is down.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Callable, Optional

from flask import Flask, render_template, request, send_from_directory

from nhl_results.config import AppConfig
from nhl_results.dates import ReferenceDates
from nhl_results.handlers.results_handler import ResultsHandler
from nhl_results.scores_client import ScoresClient
from nhl_results.services.games_service import GamesService
from nhl_results.teams import normalize_team_code


BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PUBLIC_DIR = os.path.join(BASE_DIR, "public")


def create_app(
    cfg: Optional[AppConfig] = None,
    client: Optional[ScoresClient] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> Flask:
    """
    App factory.

    Builds shared dependencies (client, reference dates, handler) once per
    process. Tests pass a fake client and a fixed clock.
    """
    cfg = cfg or AppConfig()
    client = client or ScoresClient(cfg.scores_api_base, timeout=cfg.http_timeout_seconds)

    reference_dates = ReferenceDates.from_config(cfg, clock=clock)
    reference_dates.summary()

    handler = ResultsHandler(
        games_service=GamesService(client=client, tz_name=cfg.tz),
        reference_dates=reference_dates,
    )

    app = Flask(__name__, static_folder=PUBLIC_DIR, static_url_path="")

    def get_team_code() -> str:
        """Read ?team=XXX and validate against the registry."""
        return normalize_team_code(request.args.get("team"), cfg.default_team)

    # -------------------------
    # HTML routes
    # -------------------------

    @app.get("/")
    def index():
        """Team selection page."""
        return send_from_directory(PUBLIC_DIR, "index.html")

    @app.get("/home")
    def home():
        """Today's result for ?team=XXX."""
        ctx = handler.build_today(get_team_code())
        return render_template("home.html", **ctx)

    @app.get("/yesterday")
    def yesterday():
        """Yesterday's result for ?team=XXX."""
        ctx = handler.build_yesterday(get_team_code())
        return render_template("home.html", **ctx)

    @app.get("/score")
    def score():
        """
        Box score page.

        Query:
          - team=XXX (optional)
          - date=YYYY-MM-DD (optional; defaults to today)
        """
        ctx = handler.build_score(get_team_code(), request.args.get("date"))
        return render_template("score.html", **ctx)

    # -------------------------
    # Health
    # -------------------------

    @app.get("/health")
    def health():
        """Simple health endpoint for Docker/monitoring checks."""
        return {"ok": True}

    return app


def configure_logging(cfg: AppConfig) -> None:
    """Root logging setup shared by the WSGI and dev entrypoints."""
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s %(message)s",
        datefmt="%H:%M:%S",
    )


# WSGI entrypoint for gunicorn (app:app)
config = AppConfig()
configure_logging(config)
app = create_app(config)

if __name__ == "__main__":
    # Dev server (not for production).
    app.run(host="0.0.0.0", port=config.port, debug=True)
