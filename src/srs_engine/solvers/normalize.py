"""Zero-mean normalization of SRS ratings.

Adding a constant ``c`` to every rating still satisfies
``rating_i + c = mov_i + mean(rating_j + c)``, so each solver returns one
member of an infinite family.  Normalization picks the member whose ratings
average to zero.
"""

from __future__ import annotations

import logging

from srs_engine.schedule.league import League

logger = logging.getLogger(__name__)


def normalize_ratings(league: League) -> float:
    """Shift every rating (and SOS) so ratings average to zero.

    Idempotent: a second call shifts by a rounding-level amount only.

    Args:
        league: A league whose teams all carry a ``rating``.

    Returns:
        The mean that was subtracted (``0.0`` for an empty league).

    Raises:
        ValueError: A team has no rating yet.
    """
    if not league:
        return 0.0

    rated: list[tuple[float, float]] = []
    for team_id, record in league.items():
        if record.rating is None or record.margin_of_victory is None:
            msg = f"team {team_id!r} has no rating; run a solver before normalizing"
            raise ValueError(msg)
        rated.append((record.rating, record.margin_of_victory))
    mean = sum(rating for rating, _ in rated) / len(rated)

    for record, (rating, mov) in zip(league.values(), rated, strict=True):
        record.rating = rating - mean
        # Same shift as subtracting the mean from sos, without rounding drift.
        record.sos = record.rating - mov

    logger.debug("normalized %d ratings by %.6g", len(league), mean)
    return mean
