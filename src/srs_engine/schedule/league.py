"""League container helpers.

A league is a plain ``dict`` mapping team identifier to
:class:`~srs_engine.schedule.schema.TeamRecord`.  The helpers here build one
from game results and flatten a rated league into a DataFrame for reporting.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

import pandas as pd  # type: ignore[import-untyped]

from srs_engine.schedule.schema import Game, TeamRecord

League: TypeAlias = dict[str, TeamRecord]

RATING_COLUMNS: list[str] = ["team_id", "games_played", "margin_of_victory", "sos", "rating"]


def league_from_games(games: Iterable[Game]) -> League:
    """Accumulate per-team records from a sequence of games.

    Each game adds one game played to both teams, the signed margin to each
    team's ``point_spread`` and the other team to each ``opponents`` list.
    Teams appear in the league in order of first appearance.

    Args:
        games: Completed games, in any order.

    Returns:
        A closed league covering every team that appears in *games*.
    """
    league: League = {}
    for game in games:
        for team, opponent, margin in (
            (game.home_team, game.away_team, game.margin),
            (game.away_team, game.home_team, -game.margin),
        ):
            record = league.get(team)
            if record is None:
                record = TeamRecord(games_played=0, point_spread=0.0)
                league[team] = record
            record.games_played += 1
            record.point_spread += margin
            record.opponents.append(opponent)
    return league


def league_to_frame(league: League) -> pd.DataFrame:
    """Flatten a league into a DataFrame sorted by rating (best first).

    Unrated teams keep ``NaN`` in the derived columns and sort last.

    Returns:
        DataFrame with columns ``["team_id", "games_played",
        "margin_of_victory", "sos", "rating"]``.
    """
    if not league:
        return pd.DataFrame(columns=RATING_COLUMNS)

    df = pd.DataFrame(
        {
            "team_id": list(league),
            "games_played": [r.games_played for r in league.values()],
            "margin_of_victory": [r.margin_of_victory for r in league.values()],
            "sos": [r.sos for r in league.values()],
            "rating": [r.rating for r in league.values()],
        }
    )
    df[["margin_of_victory", "sos", "rating"]] = df[["margin_of_victory", "sos", "rating"]].astype(float)
    return df.sort_values("rating", ascending=False, na_position="last", kind="stable").reset_index(drop=True)
