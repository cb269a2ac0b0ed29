"""Smoke tests for package structure and basic contracts.

These tests run in pre-commit hooks to catch structural issues quickly.
"""

from __future__ import annotations

import importlib.metadata
from pathlib import Path

import pytest


@pytest.mark.smoke
def test_package_metadata_accessible() -> None:
    """Verify the distribution is installed under its index name (srs-engine)."""
    version = importlib.metadata.version("srs-engine")
    assert version


@pytest.mark.smoke
@pytest.mark.parametrize("subpackage", ["", "schedule", "solvers", "cli", "utils"])
def test_src_directory_structure(subpackage: str) -> None:
    """Verify the src/ layout ships every subpackage with an ``__init__.py``."""
    project_root = Path(__file__).parent.parent.parent
    package_dir = project_root / "src" / "srs_engine" / subpackage
    assert package_dir.is_dir(), f"Package directory not found: {package_dir}"
    assert (package_dir / "__init__.py").exists(), f"__init__.py missing in {package_dir}"
