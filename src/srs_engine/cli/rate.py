"""Rating pipeline behind the ``rate`` CLI command."""

from __future__ import annotations

import logging
import math
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from srs_engine.errors import ScheduleFormatError
from srs_engine.schedule.league import league_to_frame
from srs_engine.schedule.loader import load_league
from srs_engine.solvers.config import SolverConfig
from srs_engine.solvers.dispatch import compute_ratings

logger = logging.getLogger(__name__)

_console = Console()


def _fmt(value: float) -> str:
    return "NaN" if math.isnan(value) else f"{value:+.2f}"


def run_rating(games_path: Path, config: SolverConfig) -> bool:
    """Load *games_path*, rate the league and print a ranked table.

    Returns:
        ``True`` when ratings were computed, ``False`` after reporting an
        error to the console.
    """
    try:
        league = load_league(games_path)
    except ScheduleFormatError as exc:
        _console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return False

    result = compute_ratings(league, config)
    if not result.ok:
        _console.print(f"[red]Error: {result.method} solve failed: {escape(str(result.error))}[/red]")
        return False

    df = league_to_frame(result.league)
    title = f"SRS Ratings ({result.method}"
    if result.iterations is not None:
        title += f", {result.iterations} iterations"
    title += ")"

    table = Table(title=title)
    table.add_column("Rank", style="cyan", justify="right")
    table.add_column("Team", style="bold")
    table.add_column("GP", justify="right")
    table.add_column("MOV", style="yellow", justify="right")
    table.add_column("SOS", style="yellow", justify="right")
    table.add_column("SRS", style="green", justify="right")
    for rank, row in enumerate(df.itertuples(index=False), start=1):
        table.add_row(
            str(rank),
            escape(str(row.team_id)),
            str(row.games_played),
            _fmt(row.margin_of_victory),
            _fmt(row.sos),
            _fmt(row.rating),
        )
    _console.print(table)
    logger.info("rated %d teams with %s solver", len(df), result.method)
    return True
