import os
from pathlib import Path

import nox

# Default Nox behavior
nox.options.default_venv_backend = "uv|virtualenv"
nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = ["pre-commit", "unit"]

# Environment variables for consistent runs
PROJECT_ENV = {
    "PYTHONIOENCODING": "utf-8",
}
VENV_DIR = Path("./venv").resolve()


def set_env(session, env_dict):
    """Helper: apply environment variables to session."""
    for key, value in env_dict.items():
        session.env[key] = value


@nox.session(name="unit")
def run_unit(session):
    """Run unit tests."""
    set_env(session, PROJECT_ENV)
    session.install("-e", ".[dev]", silent=False)  # editable + dev deps
    session.run("pytest", "-m", "unit")


@nox.session(name="coverage")
def run_coverage(session):
    """Run tests with coverage tracking."""
    set_env(session, PROJECT_ENV)
    session.install("coverage", "pytest-cov", silent=False)
    session.install("-e", ".[dev]", silent=False)
    session.run(
        "pytest",
        "-m",
        "unit",
        "--cov=casemap",
        "--cov-report=xml",
        "tests/",
    )


@nox.session(name="pre-commit")
def lint(session):
    """Run pre-commit hooks (lint, format, etc.)."""
    session.install("pre-commit", silent=False)
    session.run("pre-commit", "run", "--all-files")


@nox.session(name="dev")
def dev_env(session):
    """Create a reusable developer venv with all dependencies."""
    set_env(session, PROJECT_ENV)
    session.install("virtualenv")
    session.run("virtualenv", os.fsdecode(VENV_DIR), silent=True)
    python = os.fsdecode(VENV_DIR.joinpath("bin/python"))
    session.run(python, "-m", "pip", "install", "-e", ".[dev]", external=True)


@nox.session(name="doctests")
def run_doc_tests(session):
    """Run the doctests embedded in the package docstrings."""
    set_env(session, PROJECT_ENV)
    session.install("-e", ".[dev]", silent=False)
    # Fixed locale so that default-locale examples fold the same everywhere
    session.env["LC_ALL"] = "C.UTF-8"
    session.run("pytest", "--doctest-modules", "casemap")


@nox.session(name="docs")
def build_docs(session):
    """Build the HTML documentation."""
    set_env(session, PROJECT_ENV)
    session.install("-e", ".[docs]", silent=False)
    session.chdir("docs")

    sourcedir = "."
    outputdir = "_build/html"

    # Local development
    if session.interactive:
        session.run(
            "sphinx-autobuild",
            sourcedir,
            outputdir,
            "-b",
            "html",
            "--open-browser",
            "-qT",
        )
    # Runs in CI only, treating warnings as errors
    else:
        session.run(
            "sphinx-build",
            "-W",
            "--keep-going",
            "-b",
            "html",
            sourcedir,
            outputdir,
        )
