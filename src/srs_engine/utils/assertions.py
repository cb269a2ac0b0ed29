"""DataFrame validation helpers backed by Pandera.

Used by the schedule loaders to check raw game tables before any record is
built: column presence, missing values and score ranges.  Every helper
propagates ``pandera.errors.SchemaError`` on failure.

Usage:
    >>> import pandas as pd
    >>> from srs_engine.utils.assertions import assert_columns, assert_no_nulls
    >>> df = pd.DataFrame({"home_team": ["KC"], "home_score": [27]})
    >>> assert_columns(df, ["home_team", "home_score"])
    >>> assert_no_nulls(df)
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd  # type: ignore[import-untyped]
import pandera.pandas as pa


def assert_columns(df: pd.DataFrame, required: Sequence[str]) -> None:
    """Validate that all required columns exist in the DataFrame.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.

    Raises:
        pandera.errors.SchemaError: If any required columns are missing.
    """
    if not required:
        return
    pa.DataFrameSchema(
        {col: pa.Column() for col in required},
        strict=False,
    ).validate(df)


def assert_no_nulls(
    df: pd.DataFrame,
    columns: Sequence[str] | None = None,
) -> None:
    """Validate no null values in specified or all columns.

    Args:
        df: DataFrame to check.
        columns: Specific columns to check.  ``None`` checks all columns.

    Raises:
        pandera.errors.SchemaError: If null values are found, or a specified
            column is not present.
    """
    cols = list(df.columns) if columns is None else list(columns)
    if not cols:
        return
    pa.DataFrameSchema(
        {col: pa.Column(nullable=False) for col in cols},
        strict=False,
    ).validate(df)


def assert_value_range(
    df: pd.DataFrame,
    column: str,
    *,
    min_val: float | None = None,
    max_val: float | None = None,
) -> None:
    """Validate that column values fall within the given bounds.

    Args:
        df: DataFrame to check.
        column: Column whose values to validate.
        min_val: Minimum allowed value (inclusive).  ``None`` to skip.
        max_val: Maximum allowed value (inclusive).  ``None`` to skip.

    Raises:
        pandera.errors.SchemaError: If any values fall outside the specified
            range, or the column is not present.

    Example:
        >>> import pandas as pd
        >>> from srs_engine.utils.assertions import assert_value_range
        >>> df = pd.DataFrame({"home_score": [17, 24, 31]})
        >>> assert_value_range(df, "home_score", min_val=0)
    """
    checks: list[pa.Check] = []
    if min_val is not None:
        checks.append(pa.Check.ge(min_val))
    if max_val is not None:
        checks.append(pa.Check.le(max_val))
    # Always build the schema so a missing column fails even without bounds.
    pa.DataFrameSchema(
        {column: pa.Column(checks=checks or None)},
        strict=False,
    ).validate(df)
