"""SRS rating solvers: iterative, direct (LU) and pseudo-inverse (SVD)."""

from __future__ import annotations

from srs_engine.solvers.config import SolveMethod, SolverConfig
from srs_engine.solvers.direct import solve_direct
from srs_engine.solvers.dispatch import compute_ratings
from srs_engine.solvers.iterative import solve_iterative
from srs_engine.solvers.linalg import LinearAlgebraBackend, NumpyBackend
from srs_engine.solvers.normalize import normalize_ratings
from srs_engine.solvers.pseudo_inverse import solve_pseudo_inverse
from srs_engine.solvers.result import SolveResult
from srs_engine.solvers.system import LinearSystem, build_system, validate_league

__all__ = [
    "LinearAlgebraBackend",
    "LinearSystem",
    "NumpyBackend",
    "SolveMethod",
    "SolveResult",
    "SolverConfig",
    "build_system",
    "compute_ratings",
    "normalize_ratings",
    "solve_direct",
    "solve_iterative",
    "solve_pseudo_inverse",
    "validate_league",
]
