"""Simple Rating System (SRS) engine for league schedules.

Quick start::

    from srs_engine import TeamRecord, solve_iterative

    league = {
        "A": TeamRecord(games_played=1, point_spread=10, opponents=["B"]),
        "B": TeamRecord(games_played=1, point_spread=-10, opponents=["A"]),
    }
    solve_iterative(league).unwrap()
    league["A"].rating  # 5.0
"""

from __future__ import annotations

from srs_engine.errors import (
    InvalidRecordError,
    NonConvergenceError,
    ScheduleFormatError,
    SingularSystemError,
    SrsError,
)
from srs_engine.schedule import Game, League, TeamRecord, league_from_games, league_to_frame, load_league
from srs_engine.solvers import (
    SolveResult,
    SolverConfig,
    compute_ratings,
    normalize_ratings,
    solve_direct,
    solve_iterative,
    solve_pseudo_inverse,
)

__all__ = [
    "Game",
    "InvalidRecordError",
    "League",
    "NonConvergenceError",
    "ScheduleFormatError",
    "SingularSystemError",
    "SolveResult",
    "SolverConfig",
    "SrsError",
    "TeamRecord",
    "compute_ratings",
    "league_from_games",
    "league_to_frame",
    "load_league",
    "normalize_ratings",
    "solve_direct",
    "solve_iterative",
    "solve_pseudo_inverse",
]
