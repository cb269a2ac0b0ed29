"""Shared pytest fixtures for the srs_engine test suite.

Fixtures defined here are available to all tests without explicit imports.
League fixtures return fresh objects on every call because the solvers
mutate records in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from srs_engine.schedule.league import League
from srs_engine.schedule.schema import TeamRecord


@pytest.fixture(autouse=True)
def _reset_srs_engine_logger() -> Iterator[None]:
    """Undo any `configure_logging` call so caplog sees srs_engine records."""
    yield
    root = logging.getLogger("srs_engine")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Provide an isolated temporary directory for test data."""
    data_dir = tmp_path / "test_data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def two_team_league() -> League:
    """A and B met once; A won by 10."""
    return {
        "A": TeamRecord(games_played=1, point_spread=10.0, opponents=["B"]),
        "B": TeamRecord(games_played=1, point_spread=-10.0, opponents=["A"]),
    }


@pytest.fixture
def triangle_league() -> League:
    """Three-team cycle: A beat B by 10, B beat C by 6, C beat A by 4.

    Every team played the other two once, so the exact normalized ratings are
    ``mov * 2 / 3``: A = 2, B = -16/3, C = 10/3.
    """
    return {
        "A": TeamRecord(games_played=2, point_spread=6.0, opponents=["B", "C"]),
        "B": TeamRecord(games_played=2, point_spread=-16.0, opponents=["A", "C"]),
        "C": TeamRecord(games_played=2, point_spread=10.0, opponents=["B", "A"]),
    }


@pytest.fixture
def uneven_league() -> League:
    """Five teams, unequal game counts and a rematch (A and B met twice)."""
    return {
        "A": TeamRecord(games_played=3, point_spread=17.0, opponents=["B", "B", "C"]),
        "B": TeamRecord(games_played=4, point_spread=-9.0, opponents=["A", "A", "D", "E"]),
        "C": TeamRecord(games_played=2, point_spread=-3.0, opponents=["A", "D"]),
        "D": TeamRecord(games_played=3, point_spread=-14.0, opponents=["B", "C", "E"]),
        "E": TeamRecord(games_played=2, point_spread=9.0, opponents=["B", "D"]),
    }
