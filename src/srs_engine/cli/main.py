"""Typer CLI application for srs_engine."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from srs_engine.solvers.config import SolverConfig
from srs_engine.utils.logger import LEVEL_NAMES, configure_logging

app = typer.Typer(help="Simple Rating System (SRS) calculator")
console = Console()

_METHODS = ("iterative", "direct", "pseudo_inverse")


@app.callback()
def _callback() -> None:
    """srs_engine CLI: rate teams from completed game results."""


def _load_config(config_path: Path | None, overrides: dict[str, object]) -> SolverConfig:
    """Build a :class:`SolverConfig` from an optional JSON file plus CLI overrides.

    CLI options win over values from the file.
    """
    data: dict[str, object] = {}
    if config_path is not None:
        if not config_path.exists():
            console.print(f"[red]Error: Config file not found: {escape(str(config_path))}[/red]")
            raise typer.Exit(code=1)
        try:
            data.update(json.loads(config_path.read_text()))
        except (ValueError, TypeError) as exc:
            console.print(f"[red]Error: Config file is not a JSON object: {escape(str(exc))}[/red]")
            raise typer.Exit(code=1) from exc
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return SolverConfig.model_validate(data)
    except ValidationError as exc:
        console.print(f"[red]Error: Invalid solver config:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command()
def rate(  # noqa: PLR0913
    games: Path = typer.Argument(..., help="CSV with home_team, away_team, home_score, away_score"),
    method: str | None = typer.Option(None, "--method", help="iterative, direct or pseudo_inverse"),
    fallback: bool | None = typer.Option(
        None, "--fallback/--no-fallback", help="Retry singular matrix solves iteratively"
    ),
    raw: bool = typer.Option(False, "--raw", help="Skip zero-mean normalization"),
    config: Path | None = typer.Option(None, "--config", help="Path to JSON solver config"),
    log_level: str | None = typer.Option(None, "--log-level", help=f"One of {', '.join(LEVEL_NAMES)}"),
) -> None:
    """Compute SRS ratings for every team in a games file and print them ranked."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if method is not None and method not in _METHODS:
        console.print(f"[red]Error: Unknown method {escape(repr(method))}[/red]")
        console.print(f"Available methods: {', '.join(_METHODS)}")
        raise typer.Exit(code=1)

    solver_config = _load_config(
        config,
        {"method": method, "fallback": fallback, "normalize": False if raw else None},
    )

    from srs_engine.cli.rate import run_rating

    if not run_rating(games, solver_config):
        raise typer.Exit(code=1)
