"""Linear algebra backend used by the matrix solvers.

The direct and pseudo-inverse solvers only talk to a
:class:`LinearAlgebraBackend`, so a different numeric library can be plugged
in without touching solver logic.  Both operations raise
:class:`~srs_engine.errors.SingularSystemError` when the system has no unique
answer.
"""

from __future__ import annotations

import abc

import numpy as np
import numpy.typing as npt

from srs_engine.errors import SingularSystemError

DEFAULT_RCOND: float = 1e-10

SvdFactors = tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]


class LinearAlgebraBackend(abc.ABC):
    """Abstract linear algebra operations needed by the SRS solvers."""

    @abc.abstractmethod
    def solve(self, a: npt.NDArray[np.float64], b: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Return ``x`` with ``a @ x == b`` for a square, non-singular *a*.

        Raises:
            SingularSystemError: *a* has no inverse.
        """

    @abc.abstractmethod
    def svd(self, a: npt.NDArray[np.float64], *, singularity_epsilon: float) -> SvdFactors:
        """Return the reduced SVD ``(U, S, Vt)`` of *a*.

        Raises:
            SingularSystemError: ``|prod(S)|`` is below *singularity_epsilon*.
        """


class NumpyBackend(LinearAlgebraBackend):
    """Backend built on ``numpy.linalg`` (LAPACK LU and SVD).

    Args:
        rcond: ``solve`` treats a matrix as singular when its smallest
            singular value is at most ``rcond`` times its largest.
    """

    def __init__(self, rcond: float = DEFAULT_RCOND) -> None:
        self._rcond = rcond

    def solve(self, a: npt.NDArray[np.float64], b: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        n = a.shape[0]
        if a.shape != (n, n):
            msg = f"solve needs a square matrix, got shape {a.shape}"
            raise ValueError(msg)
        # LU only fails on an exact zero pivot; rounding usually hides
        # singularity, so check the singular value spread first.
        s = np.linalg.svd(a, compute_uv=False)
        if n and s[-1] <= self._rcond * s[0]:
            msg = f"coefficient matrix is numerically singular (smallest singular value {s[-1]:.3g})"
            raise SingularSystemError(msg)
        try:
            x: npt.NDArray[np.float64] = np.linalg.solve(a, b)
        except np.linalg.LinAlgError as exc:
            msg = f"LU decomposition failed: {exc}"
            raise SingularSystemError(msg) from exc
        return x

    def svd(self, a: npt.NDArray[np.float64], *, singularity_epsilon: float) -> SvdFactors:
        try:
            u, s, vt = np.linalg.svd(a, full_matrices=False)
        except np.linalg.LinAlgError as exc:
            msg = f"SVD did not converge: {exc}"
            raise SingularSystemError(msg) from exc
        product = float(np.prod(s))
        if abs(product) < singularity_epsilon:
            msg = f"product of singular values {product:.3g} is below {singularity_epsilon:g}"
            raise SingularSystemError(msg)
        return u, s, vt


DEFAULT_BACKEND: LinearAlgebraBackend = NumpyBackend()
