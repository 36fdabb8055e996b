"""
Services package exports.
"""
from .boxscore_service import build_box_score
from .games_service import GamesService
from .status_service import classify, classify_yesterday

__all__ = ["GamesService", "build_box_score", "classify", "classify_yesterday"]
