"""CSV loader for completed game results.

Expects one row per game with the columns ``home_team``, ``away_team``,
``home_score`` and ``away_score``.  Extra columns are ignored.  The home and
away labels only orient the margin; SRS has no home-field term.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd  # type: ignore[import-untyped]
from pandera.errors import SchemaError
from pydantic import ValidationError

from srs_engine.errors import ScheduleFormatError
from srs_engine.schedule.league import League, league_from_games
from srs_engine.schedule.schema import Game
from srs_engine.utils.assertions import assert_columns, assert_no_nulls, assert_value_range

logger = logging.getLogger(__name__)

GAME_COLUMNS: list[str] = ["home_team", "away_team", "home_score", "away_score"]


def read_games_csv(path: Path) -> list[Game]:
    """Parse a games CSV into :class:`Game` models.

    Raises:
        ScheduleFormatError: File missing or unreadable, required columns
            absent, null values, negative scores, or a row that fails
            :class:`Game` validation.
    """
    if not path.exists():
        msg = f"games file not found: {path}"
        raise ScheduleFormatError(msg)
    try:
        df: pd.DataFrame = pd.read_csv(path, dtype={"home_team": str, "away_team": str})
    except Exception as exc:
        msg = f"failed to parse {path.name}: {exc}"
        raise ScheduleFormatError(msg) from exc

    try:
        assert_columns(df, GAME_COLUMNS)
        assert_no_nulls(df, GAME_COLUMNS)
        assert_value_range(df, "home_score", min_val=0)
        assert_value_range(df, "away_score", min_val=0)
    except SchemaError as exc:
        msg = f"{path.name}: {exc}"
        raise ScheduleFormatError(msg) from exc

    games: list[Game] = []
    # Object dtype hands pydantic plain Python numbers, so 21.9 fails int
    # validation while 21.0 is accepted.
    rows = df[GAME_COLUMNS].astype(object).itertuples(index=False)
    for row_num, row in enumerate(rows, start=2):
        try:
            games.append(
                Game(
                    home_team=str(row.home_team).strip(),
                    away_team=str(row.away_team).strip(),
                    home_score=row.home_score,
                    away_score=row.away_score,
                )
            )
        except (ValidationError, ValueError) as exc:
            msg = f"{path.name} line {row_num}: {exc}"
            raise ScheduleFormatError(msg) from exc

    logger.info("loaded %d games from %s", len(games), path)
    return games


def load_league(path: Path) -> League:
    """Read a games CSV and accumulate it into a league."""
    league = league_from_games(read_games_csv(path))
    logger.info("league has %d teams", len(league))
    return league
