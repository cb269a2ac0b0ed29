"""Config-driven solver selection with iterative fallback."""

from __future__ import annotations

import logging

from srs_engine.errors import SingularSystemError
from srs_engine.schedule.league import League
from srs_engine.solvers.config import SolverConfig
from srs_engine.solvers.direct import solve_direct
from srs_engine.solvers.iterative import solve_iterative
from srs_engine.solvers.linalg import LinearAlgebraBackend
from srs_engine.solvers.pseudo_inverse import solve_pseudo_inverse
from srs_engine.solvers.result import SolveResult

logger = logging.getLogger(__name__)


def compute_ratings(
    league: League,
    config: SolverConfig | None = None,
    *,
    backend: LinearAlgebraBackend | None = None,
) -> SolveResult:
    """Rate *league* with the configured method.

    A matrix method that reports a singular system is retried with the
    iterative solver when ``config.fallback`` is set; the returned result then
    reports ``method="iterative"``.  Other failures are returned as-is.

    Args:
        league: League to rate; records are updated in place.
        config: Solver configuration (defaults to :class:`SolverConfig`).
        backend: Linear algebra backend for the matrix methods.

    Returns:
        The :class:`SolveResult` of the last solver that ran.
    """
    cfg = config if config is not None else SolverConfig()

    if cfg.method == "direct":
        result = solve_direct(league, cfg.normalize, backend=backend)
    elif cfg.method == "pseudo_inverse":
        result = solve_pseudo_inverse(league, cfg.normalize, cfg.singularity_epsilon, backend=backend)
    else:
        return solve_iterative(league, cfg.normalize, cfg.max_iterations, cfg.tolerance)

    if isinstance(result.error, SingularSystemError) and cfg.fallback:
        logger.warning("%s solve is singular (%s); falling back to iterative solver", cfg.method, result.error)
        return solve_iterative(league, cfg.normalize, cfg.max_iterations, cfg.tolerance)
    return result
