"""Entry point for ``python -m srs_engine.cli``."""

from __future__ import annotations

from srs_engine.cli.main import app

app()
