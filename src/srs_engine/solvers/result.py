"""Outcome of a single solver run."""

from __future__ import annotations

import dataclasses

from srs_engine.errors import SrsError
from srs_engine.schedule.league import League
from srs_engine.solvers.config import SolveMethod


@dataclasses.dataclass(frozen=True)
class SolveResult:
    """Summary of one solver invocation.

    ``league`` is always the caller's league object.  On failure ``error``
    holds the reason and no team's ``rating``/``sos`` has been touched.
    """

    league: League
    method: SolveMethod
    error: SrsError | None = None
    iterations: int | None = None

    @property
    def ok(self) -> bool:
        """``True`` when ratings were written."""
        return self.error is None

    def unwrap(self) -> League:
        """Return the rated league, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.league
