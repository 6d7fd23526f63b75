"""Nox sessions for barrelify's test and quality checks."""

import nox

PYTHON_VERSIONS = ["3.12", "3.13"]

nox.options.sessions = ["tests", "lint", "typecheck", "check_isolation"]


def _sync(session: nox.Session) -> None:
    """Install the project with the test and dev extras into the uv environment."""
    session.run("uv", "sync", "--all-extras", external=True)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run unit, property and integration tests with branch coverage.

    Extra arguments are forwarded to pytest, e.g. ``nox -s tests -- -k walker``.
    """
    _sync(session)
    session.run(
        "pytest",
        "--cov=barrelify",
        "--cov-branch",
        "--cov-report=term-missing:skip-covered",
        "--cov-fail-under=80",
        *session.posargs,
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def lint(session: nox.Session) -> None:
    """Run ruff lint rules and the formatter in check mode."""
    _sync(session)
    session.run("ruff", "check", "src", "tests", "scripts")
    session.run("ruff", "format", "--check", "src", "tests", "scripts")


@nox.session(python=PYTHON_VERSIONS[-1])
def typecheck(session: nox.Session) -> None:
    """Run basedpyright over the source tree."""
    _sync(session)
    session.run("uvx", "basedpyright@latest", external=True)


@nox.session(python=PYTHON_VERSIONS[-1], name="format")
def format_code(session: nox.Session) -> None:
    """Apply ruff fixes and formatting in place."""
    _sync(session)
    session.run("ruff", "check", "--fix", "src", "tests", "scripts")
    session.run("ruff", "format", "src", "tests", "scripts")


@nox.session(python=False)
def check_isolation(session: nox.Session) -> None:
    """Fail if core/ or types/ read the disk without going through a DirectoryStore."""
    session.run("python3", "scripts/check_core_isolation.py", external=True)
