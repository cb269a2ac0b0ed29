"""Construction of the SRS linear system.

The recursive definition ``rating_i = mov_i + mean(rating_j for j in
opponents_i)`` is the linear system ``A @ rating = b`` with

* ``A[i][i] = 1``,
* ``A[i][j] -= 1 / games_played[i]`` for every game ``i`` played against ``j``,
* ``b[i] = mov_i``.

Each row of ``A`` sums to zero, so ``A`` is always rank-deficient: ratings are
only defined up to an additive constant.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from srs_engine.errors import InvalidRecordError
from srs_engine.schedule.league import League

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class LinearSystem:
    """Coefficient matrix and target vector, indexed by ``team_ids`` order."""

    team_ids: tuple[str, ...]
    coefficients: npt.NDArray[np.float64]
    margins: npt.NDArray[np.float64]

    @property
    def size(self) -> int:
        return len(self.team_ids)

    def augmented(self) -> npt.NDArray[np.float64]:
        """Return ``[A - I | 1]``: the averaging coefficients plus a column of ones.

        The first N columns drop the unit diagonal and keep only the
        ``-1 / games_played`` entries per game.  The extra unknown absorbs
        the additive degree of freedom.
        """
        averaging = self.coefficients - np.eye(self.size)
        ones: npt.NDArray[np.float64] = np.ones((self.size, 1))
        return np.hstack([averaging, ones])


def validate_league(league: League) -> None:
    """Check every record before anything divides by ``games_played``.

    Raises:
        InvalidRecordError: Non-positive ``games_played``, an opponent list of
            the wrong length, or an opponent missing from the league.
    """
    for team_id, record in league.items():
        if record.games_played <= 0:
            raise InvalidRecordError(team_id, f"games_played must be positive, got {record.games_played}")
        if len(record.opponents) != record.games_played:
            msg = f"{len(record.opponents)} opponents listed for {record.games_played} games played"
            raise InvalidRecordError(team_id, msg)
        for opponent in record.opponents:
            if opponent not in league:
                raise InvalidRecordError(team_id, f"opponent {opponent!r} is not in the league")


def assign_margins(league: League) -> npt.NDArray[np.float64]:
    """Write ``margin_of_victory`` onto every record and return them in league order.

    The league must already have passed :func:`validate_league`.
    """
    margins: npt.NDArray[np.float64] = np.empty(len(league))
    for i, record in enumerate(league.values()):
        record.margin_of_victory = record.point_spread / record.games_played
        margins[i] = record.margin_of_victory
    return margins


def assign_ratings(league: League, ratings: Sequence[float] | npt.NDArray[np.float64]) -> None:
    """Write ``rating`` and ``sos`` onto every record, in league order.

    ``sos`` is always derived from the rating written, so
    ``sos == rating - margin_of_victory`` holds exactly.
    """
    for record, rating in zip(league.values(), ratings, strict=True):
        if record.margin_of_victory is None:
            msg = "margins must be assigned before ratings"
            raise ValueError(msg)
        record.rating = float(rating)
        record.sos = record.rating - record.margin_of_victory


def build_system(league: League) -> LinearSystem:
    """Validate *league*, derive margins and build ``A`` and ``b``.

    Raises:
        InvalidRecordError: See :func:`validate_league`.
    """
    validate_league(league)
    margins = assign_margins(league)

    team_ids = tuple(league)
    index = {team_id: i for i, team_id in enumerate(team_ids)}
    coefficients: npt.NDArray[np.float64] = np.eye(len(team_ids))
    for i, record in enumerate(league.values()):
        weight = 1.0 / record.games_played
        for opponent in record.opponents:
            coefficients[i, index[opponent]] -= weight

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("SRS coefficient matrix for %s:\n%s", list(team_ids), coefficients)
    return LinearSystem(team_ids=team_ids, coefficients=coefficients, margins=margins)
