"""Unit tests for the fixed-point SRS solver."""

from __future__ import annotations

import logging

import pytest

from srs_engine.errors import InvalidRecordError, NonConvergenceError
from srs_engine.schedule.league import League
from srs_engine.schedule.schema import TeamRecord
from srs_engine.solvers.iterative import solve_iterative


def _inconsistent_league() -> League:
    """Both teams claim a 10-point win over each other; ratings drift forever."""
    return {
        "A": TeamRecord(games_played=1, point_spread=10.0, opponents=["B"]),
        "B": TeamRecord(games_played=1, point_spread=10.0, opponents=["A"]),
    }


def _opponent_mean(league: League, team_id: str) -> float:
    opponents = league[team_id].opponents
    return sum(league[o].rating for o in opponents) / len(opponents)  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Convergence
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSolveIterative:
    def test_two_team_league(self, two_team_league: League) -> None:
        result = solve_iterative(two_team_league)
        assert result.ok
        assert result.method == "iterative"
        assert result.iterations == 2
        assert two_team_league["A"].rating == pytest.approx(5.0, abs=0.01)
        assert two_team_league["B"].rating == pytest.approx(-5.0, abs=0.01)
        assert two_team_league["A"].sos == pytest.approx(-5.0, abs=0.01)

    def test_two_team_league_raw(self, two_team_league: League) -> None:
        """Without normalization the relaxation settles where it started from."""
        solve_iterative(two_team_league, normalize=False)
        assert two_team_league["A"].rating == pytest.approx(0.0)
        assert two_team_league["B"].rating == pytest.approx(-10.0)

    def test_triangle_worked_example(self, triangle_league: League) -> None:
        result = solve_iterative(triangle_league)
        assert result.ok
        ratings = {team: record.rating for team, record in triangle_league.items()}
        assert ratings["A"] == pytest.approx(2.0, abs=0.01)
        assert ratings["B"] == pytest.approx(-16.0 / 3.0, abs=0.01)
        assert ratings["C"] == pytest.approx(10.0 / 3.0, abs=0.01)
        assert abs(sum(ratings.values())) < 1e-9  # type: ignore[arg-type]

    def test_fixed_point_identity_within_tolerance(self, uneven_league: League) -> None:
        solve_iterative(uneven_league, tolerance=0.001)
        for team_id, record in uneven_league.items():
            assert record.sos == pytest.approx(_opponent_mean(uneven_league, team_id), abs=0.001 + 1e-9)

    def test_sos_identity_is_exact(self, uneven_league: League) -> None:
        solve_iterative(uneven_league)
        for record in uneven_league.values():
            assert record.sos == record.rating - record.margin_of_victory  # type: ignore[operator]

    def test_tighter_tolerance_takes_more_iterations(self, uneven_league: League) -> None:
        loose = solve_iterative(uneven_league, tolerance=1e-2)
        tight = solve_iterative(uneven_league, tolerance=1e-10)
        assert loose.iterations is not None and tight.iterations is not None
        assert tight.iterations > loose.iterations

    def test_empty_league(self) -> None:
        league: League = {}
        result = solve_iterative(league)
        assert result.ok
        assert result.league == {}

    def test_logs_iteration_count(self, triangle_league: League, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="srs_engine")
        solve_iterative(triangle_league)
        assert any("converged after" in rec.message for rec in caplog.records)


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestSolveIterativeFailures:
    def test_iteration_cap_reports_non_convergence(self) -> None:
        league = _inconsistent_league()
        result = solve_iterative(league, max_iterations=50)
        assert not result.ok
        assert isinstance(result.error, NonConvergenceError)
        assert result.error.iterations == 50
        assert result.iterations == 50

    def test_non_convergence_leaves_ratings_untouched(self) -> None:
        league = _inconsistent_league()
        league["A"].rating = 99.0
        solve_iterative(league, max_iterations=20)
        assert league["A"].rating == 99.0
        assert league["B"].rating is None
        assert league["B"].sos is None
        # margins are a permitted side effect
        assert league["A"].margin_of_victory == pytest.approx(10.0)

    def test_unwrap_raises_carried_error(self) -> None:
        result = solve_iterative(_inconsistent_league(), max_iterations=5)
        with pytest.raises(NonConvergenceError, match="no convergence after 5 iterations"):
            result.unwrap()

    def test_invalid_record_returned_not_raised(self) -> None:
        league = {
            "A": TeamRecord(games_played=0, point_spread=0.0, opponents=[]),
        }
        result = solve_iterative(league)
        assert isinstance(result.error, InvalidRecordError)
        assert league["A"].margin_of_victory is None
        assert league["A"].rating is None

    def test_non_positive_cap_rejected(self, two_team_league: League) -> None:
        with pytest.raises(ValueError, match="max_iterations"):
            solve_iterative(two_team_league, max_iterations=0)
