"""Pydantic v2 schema models for league schedule data.

``TeamRecord`` is the per-team input the rating solvers read (games played,
cumulative point spread, opponents) and the record they write the derived
fields back onto.  ``Game`` is a single played game, used by the loaders that
build team records from results.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TeamRecord(BaseModel):
    """A team's season-to-date schedule record.

    ``games_played`` is unconstrained here.  The solvers report bad counts
    as :class:`~srs_engine.errors.InvalidRecordError`.

    The derived fields stay ``None`` until a solver has run:

    * ``margin_of_victory``: ``point_spread / games_played``.
    * ``rating``: the SRS value.
    * ``sos``: strength of schedule, always ``rating - margin_of_victory``.
    """

    model_config = ConfigDict(populate_by_name=True)

    games_played: int = Field(..., alias="GamesPlayed")
    point_spread: float = Field(..., allow_inf_nan=False, alias="PointSpread")
    opponents: list[str] = Field(default_factory=list, alias="Opponents")

    margin_of_victory: float | None = None
    rating: float | None = None
    sos: float | None = None


class Game(BaseModel):
    """A single completed game."""

    model_config = ConfigDict(populate_by_name=True)

    home_team: str = Field(..., min_length=1, alias="HomeTeam")
    away_team: str = Field(..., min_length=1, alias="AwayTeam")
    home_score: int = Field(..., ge=0, alias="HomeScore")
    away_score: int = Field(..., ge=0, alias="AwayScore")

    @model_validator(mode="after")
    def _check_distinct_teams(self) -> Game:
        if self.home_team == self.away_team:
            msg = f"home_team and away_team must differ (both are {self.home_team!r})"
            raise ValueError(msg)
        return self

    @property
    def margin(self) -> int:
        """Home score minus away score."""
        return self.home_score - self.away_score
