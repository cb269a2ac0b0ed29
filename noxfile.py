"""Nox sessions for the srs_engine quality pipeline.

``nox`` runs lint, typecheck and tests in that order.  ``nox -s smoke`` is the
fast pre-commit subset; ``nox -s properties`` runs only the hypothesis
invariants.  Extra arguments after ``--`` are forwarded to pytest.
"""

from __future__ import annotations

import nox

nox.options.sessions = ["lint", "typecheck", "tests"]

_SOURCES = ("src/srs_engine", "tests", "noxfile.py")


@nox.session(python=False)
def lint(session: nox.Session) -> None:
    """Ruff lint and format check (no rewrites)."""
    session.run("ruff", "check", *_SOURCES)
    session.run("ruff", "format", "--check", *_SOURCES)


@nox.session(python=False)
def typecheck(session: nox.Session) -> None:
    """Strict mypy over the package and its tests."""
    session.run("mypy", "--strict", "--show-error-codes", "src/srs_engine", "tests")


@nox.session(python=False)
def smoke(session: nox.Session) -> None:
    """Structural checks only."""
    session.run("pytest", "-m", "smoke", "-q", *session.posargs)


@nox.session(python=False)
def properties(session: nox.Session) -> None:
    """Hypothesis solver invariants."""
    session.run("pytest", "-m", "property", "--hypothesis-show-statistics", *session.posargs)


@nox.session(python=False)
def tests(session: nox.Session) -> None:
    """Full unit and integration suite."""
    session.run("pytest", "--tb=short", *session.posargs)
