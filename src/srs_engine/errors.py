"""Exception hierarchy shared by the schedule and solver layers.

Every error raised by ``srs_engine`` derives from :class:`SrsError`, so
callers can handle any failure without coupling to a specific solver.  The
three solver errors (:class:`InvalidRecordError`, :class:`SingularSystemError`,
:class:`NonConvergenceError`) are *returned* by the ``solve_*`` entry points
inside a :class:`~srs_engine.solvers.result.SolveResult` rather than raised.
"""

from __future__ import annotations


class SrsError(Exception):
    """Base exception for all srs_engine errors."""


class InvalidRecordError(SrsError):
    """A team record cannot take part in rating computation.

    Raised for a non-positive ``games_played``, an opponent list whose length
    differs from ``games_played``, or an opponent that is not in the league.
    """

    def __init__(self, team_id: str, reason: str) -> None:
        self.team_id = team_id
        self.reason = reason
        super().__init__(f"team {team_id!r}: {reason}")


class SingularSystemError(SrsError):
    """The linear system has no unique solution.

    Routine for SRS: the rating definition only fixes ratings up to an
    additive constant.  Callers are expected to retry with the iterative
    solver.
    """


class NonConvergenceError(SrsError):
    """The iterative solver hit its iteration cap before converging."""

    def __init__(self, iterations: int, delta: float, tolerance: float) -> None:
        self.iterations = iterations
        self.delta = delta
        self.tolerance = tolerance
        super().__init__(
            f"no convergence after {iterations} iterations (delta {delta:.6g} > tolerance {tolerance:g})"
        )


class ScheduleFormatError(SrsError):
    """A games file does not match the expected layout."""
