"""Unit tests for the DataFrame assertions module."""

from __future__ import annotations

import numpy as np
import pandas as pd  # type: ignore[import-untyped]
import pytest
from pandera.errors import SchemaError

from srs_engine.utils.assertions import assert_columns, assert_no_nulls, assert_value_range


@pytest.fixture
def games_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "home_team": ["KC", "BUF", "MIA"],
            "away_team": ["BUF", "MIA", "KC"],
            "home_score": [27, 31, 0],
            "away_score": [24, 17, 3],
        }
    )


# ---------------------------------------------------------------------------
# assert_columns
# ---------------------------------------------------------------------------


@pytest.mark.smoke
class TestAssertColumns:
    """Tests for `assert_columns`."""

    def test_all_present_passes(self, games_df: pd.DataFrame) -> None:
        assert_columns(games_df, ["home_team", "away_team", "home_score", "away_score"])

    def test_extra_columns_ignored(self, games_df: pd.DataFrame) -> None:
        games_df["week"] = [1, 1, 2]
        assert_columns(games_df, ["home_team"])

    def test_empty_requirement_passes(self) -> None:
        assert_columns(pd.DataFrame(), [])

    def test_missing_column_raises(self, games_df: pd.DataFrame) -> None:
        with pytest.raises(SchemaError, match="neutral_site"):
            assert_columns(games_df, ["home_team", "neutral_site"])


# ---------------------------------------------------------------------------
# assert_no_nulls
# ---------------------------------------------------------------------------


@pytest.mark.smoke
class TestAssertNoNulls:
    """Tests for `assert_no_nulls`."""

    def test_clean_frame_passes(self, games_df: pd.DataFrame) -> None:
        assert_no_nulls(games_df)

    def test_null_in_checked_column_raises(self, games_df: pd.DataFrame) -> None:
        games_df.loc[1, "away_score"] = np.nan
        with pytest.raises(SchemaError):
            assert_no_nulls(games_df, ["away_score"])

    def test_null_in_unchecked_column_passes(self, games_df: pd.DataFrame) -> None:
        games_df["notes"] = [None, "OT", None]
        assert_no_nulls(games_df, ["home_team", "away_team"])

    def test_all_columns_checked_by_default(self, games_df: pd.DataFrame) -> None:
        games_df["notes"] = [None, "OT", None]
        with pytest.raises(SchemaError):
            assert_no_nulls(games_df)

    def test_missing_column_raises(self, games_df: pd.DataFrame) -> None:
        with pytest.raises(SchemaError):
            assert_no_nulls(games_df, ["neutral_site"])


# ---------------------------------------------------------------------------
# assert_value_range
# ---------------------------------------------------------------------------


@pytest.mark.smoke
class TestAssertValueRange:
    """Tests for `assert_value_range`."""

    def test_within_bounds_passes(self, games_df: pd.DataFrame) -> None:
        assert_value_range(games_df, "home_score", min_val=0, max_val=100)

    def test_inclusive_lower_bound(self, games_df: pd.DataFrame) -> None:
        assert_value_range(games_df, "home_score", min_val=0)

    def test_below_min_raises(self, games_df: pd.DataFrame) -> None:
        games_df.loc[0, "home_score"] = -3
        with pytest.raises(SchemaError):
            assert_value_range(games_df, "home_score", min_val=0)

    def test_above_max_raises(self, games_df: pd.DataFrame) -> None:
        with pytest.raises(SchemaError):
            assert_value_range(games_df, "home_score", max_val=30)

    def test_missing_column_fails_without_bounds(self, games_df: pd.DataFrame) -> None:
        with pytest.raises(SchemaError):
            assert_value_range(games_df, "spread")
