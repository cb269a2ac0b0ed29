"""Fixed-point (Gauss-Seidel style) SRS solver.

This is the reference solver: it never inverts a matrix, so it copes with the
singular systems the matrix solvers reject.  Each pass walks the teams in
league order and immediately reuses ratings already updated in the same pass.
"""

from __future__ import annotations

import logging

from srs_engine.errors import InvalidRecordError, NonConvergenceError
from srs_engine.schedule.league import League
from srs_engine.solvers.config import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE
from srs_engine.solvers.normalize import normalize_ratings
from srs_engine.solvers.result import SolveResult
from srs_engine.solvers.system import assign_margins, assign_ratings, validate_league
from srs_engine.utils.logger import VERBOSE

logger = logging.getLogger(__name__)


def solve_iterative(
    league: League,
    normalize: bool = True,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> SolveResult:
    """Compute SRS ratings by relaxation.

    Starts from ``rating = mov`` and ``sos = 0``; every pass sets
    ``sos_i = mean(rating_j for j in opponents_i)`` and
    ``rating_i = mov_i + sos_i``.  Stops once the largest SOS change in a pass
    is at most *tolerance*.

    Args:
        league: League to rate; records are updated in place.
        normalize: Shift the converged ratings to zero mean.
        max_iterations: Hard cap on the number of passes.
        tolerance: Convergence threshold on the per-pass SOS change.

    Returns:
        A :class:`SolveResult` carrying the pass count, or
        ``InvalidRecordError`` / ``NonConvergenceError``.  Ratings are only
        written on success.
    """
    if max_iterations < 1:
        msg = f"max_iterations must be at least 1, got {max_iterations}"
        raise ValueError(msg)

    try:
        validate_league(league)
    except InvalidRecordError as exc:
        logger.info("iterative: %s", exc)
        return SolveResult(league=league, method="iterative", error=exc)

    margins = assign_margins(league).tolist()
    index = {team_id: i for i, team_id in enumerate(league)}
    schedule = [[index[opponent] for opponent in record.opponents] for record in league.values()]

    ratings = list(margins)
    sos = [0.0] * len(ratings)
    delta = 0.0
    for iteration in range(1, max_iterations + 1):
        delta = 0.0
        for i, opponents in enumerate(schedule):
            new_sos = sum(ratings[j] for j in opponents) / len(opponents)
            ratings[i] = margins[i] + new_sos
            delta = max(delta, abs(new_sos - sos[i]))
            sos[i] = new_sos
        if delta <= tolerance:
            break
    else:
        error = NonConvergenceError(max_iterations, delta, tolerance)
        logger.warning("iterative: %s", error)
        return SolveResult(league=league, method="iterative", error=error, iterations=max_iterations)

    logger.log(VERBOSE, "iterative: converged after %d iterations (delta %.3g)", iteration, delta)
    assign_ratings(league, ratings)
    if normalize:
        normalize_ratings(league)
    return SolveResult(league=league, method="iterative", iterations=iteration)
