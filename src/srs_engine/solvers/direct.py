"""Exact SRS solve through an LU decomposition."""

from __future__ import annotations

import logging

from srs_engine.errors import InvalidRecordError, SingularSystemError
from srs_engine.schedule.league import League
from srs_engine.solvers.linalg import DEFAULT_BACKEND, LinearAlgebraBackend
from srs_engine.solvers.normalize import normalize_ratings
from srs_engine.solvers.result import SolveResult
from srs_engine.solvers.system import assign_ratings, build_system

logger = logging.getLogger(__name__)


def solve_direct(
    league: League,
    normalize: bool = True,
    *,
    backend: LinearAlgebraBackend | None = None,
) -> SolveResult:
    """Solve ``A @ rating = mov`` exactly.

    A closed schedule always produces a rank-deficient ``A``, so a
    ``SingularSystemError`` result is the common outcome; callers fall back
    to :func:`~srs_engine.solvers.iterative.solve_iterative`.

    Args:
        league: League to rate; records are updated in place.
        normalize: Shift the solution to zero mean.
        backend: Linear algebra backend (NumPy by default).

    Returns:
        A :class:`SolveResult`; on failure ``margin_of_victory`` may be set
        but ``rating``/``sos`` are untouched.
    """
    backend = backend if backend is not None else DEFAULT_BACKEND
    try:
        system = build_system(league)
        if system.size == 0:
            return SolveResult(league=league, method="direct")
        solution = backend.solve(system.coefficients, system.margins)
    except (InvalidRecordError, SingularSystemError) as exc:
        logger.info("direct: %s", exc)
        return SolveResult(league=league, method="direct", error=exc)

    assign_ratings(league, solution)
    if normalize:
        normalize_ratings(league)
    return SolveResult(league=league, method="direct")
