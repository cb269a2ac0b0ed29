"""Solver configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SolveMethod = Literal["iterative", "direct", "pseudo_inverse"]

DEFAULT_MAX_ITERATIONS: int = 10_000
DEFAULT_TOLERANCE: float = 0.001
DEFAULT_SINGULARITY_EPSILON: float = 1e-40


class SolverConfig(BaseModel):
    """Frozen configuration for :func:`~srs_engine.solvers.dispatch.compute_ratings`.

    ``fallback`` only matters for the matrix methods: a singular system is
    retried with the iterative solver when it is set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: SolveMethod = "iterative"
    fallback: bool = True
    normalize: bool = True
    max_iterations: int = Field(default=DEFAULT_MAX_ITERATIONS, ge=1)
    tolerance: float = Field(default=DEFAULT_TOLERANCE, gt=0.0)
    singularity_epsilon: float = Field(default=DEFAULT_SINGULARITY_EPSILON, ge=0.0)
