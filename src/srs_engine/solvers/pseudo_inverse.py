"""Least-squares SRS solve through the pseudo-inverse of an augmented system.

The N x N averaging coefficients (``-1 / games_played`` per game played, no
unit diagonal) gain a column of ones, adding one synthetic unknown that soaks
up the additive constant the ratings are otherwise free to carry.  The
minimum-norm solution of ``[A - I | 1] @ x = mov`` is computed from the SVD,
and the first N components are the ratings.  This is a different system from
the one the iterative and direct solvers use, so its ratings differ from
theirs by more than a constant.  The singularity test multiplies every
singular value together, which makes this the most numerically fragile of
the three solvers on large leagues.
"""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from srs_engine.errors import InvalidRecordError, SingularSystemError
from srs_engine.schedule.league import League
from srs_engine.solvers.config import DEFAULT_SINGULARITY_EPSILON
from srs_engine.solvers.linalg import DEFAULT_BACKEND, LinearAlgebraBackend
from srs_engine.solvers.normalize import normalize_ratings
from srs_engine.solvers.result import SolveResult
from srs_engine.solvers.system import assign_ratings, build_system

logger = logging.getLogger(__name__)


def solve_pseudo_inverse(
    league: League,
    normalize: bool = True,
    singularity_epsilon: float = DEFAULT_SINGULARITY_EPSILON,
    *,
    backend: LinearAlgebraBackend | None = None,
) -> SolveResult:
    """Solve the augmented SRS system with ``V @ diag(1/S) @ U.T @ mov``.

    Args:
        league: League to rate; records are updated in place.
        normalize: Shift the solution to zero mean.
        singularity_epsilon: The system counts as singular when the product
            of its singular values is smaller than this in magnitude.
        backend: Linear algebra backend (NumPy by default).

    Returns:
        A :class:`SolveResult`; on failure ``margin_of_victory`` may be set
        but ``rating``/``sos`` are untouched.
    """
    backend = backend if backend is not None else DEFAULT_BACKEND
    try:
        system = build_system(league)
        if system.size == 0:
            return SolveResult(league=league, method="pseudo_inverse")
        u, s, vt = backend.svd(system.augmented(), singularity_epsilon=singularity_epsilon)
    except (InvalidRecordError, SingularSystemError) as exc:
        logger.info("pseudo_inverse: %s", exc)
        return SolveResult(league=league, method="pseudo_inverse", error=exc)

    solution: npt.NDArray[np.float64] = vt.T @ np.diag(1.0 / s) @ u.T @ system.margins
    logger.debug("pseudo_inverse: offset unknown = %.6g", solution[system.size])

    assign_ratings(league, solution[: system.size])
    if normalize:
        normalize_ratings(league)
    return SolveResult(league=league, method="pseudo_inverse")
