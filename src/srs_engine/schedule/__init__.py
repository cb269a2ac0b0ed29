"""Schedule data model and loaders."""

from __future__ import annotations

from srs_engine.schedule.league import League, league_from_games, league_to_frame
from srs_engine.schedule.loader import load_league, read_games_csv
from srs_engine.schedule.schema import Game, TeamRecord

__all__ = [
    "Game",
    "League",
    "TeamRecord",
    "league_from_games",
    "league_to_frame",
    "load_league",
    "read_games_csv",
]
