"""Developer tasks powered by Invoke."""

from __future__ import annotations

import pathlib
import subprocess
from typing import Iterable

from invoke import task

ROOT = pathlib.Path(__file__).parent.resolve()
RESULTS_DIR = ROOT / "results"


def _run(command: Iterable[str] | str) -> None:
    cmd = command if isinstance(command, str) else " ".join(command)
    subprocess.run(cmd, shell=True, check=True, cwd=ROOT)


@task
def tests(_context):
    """Run the unit and integration tests."""
    _run(["uv", "run", "pytest", "tests/"])


@task
def coverage(_context):
    """Run tests under coverage and write reports to results/."""
    RESULTS_DIR.mkdir(exist_ok=True)
    _run(["uv", "run", "coverage", "erase"])
    _run(["uv", "run", "coverage", "run", "-m", "pytest", "tests/", "--junitxml=results/pytest.xml"])
    _run(["uv", "run", "coverage", "report"])
    _run(["uv", "run", "coverage", "xml", "-o", "results/coverage.xml"])


@task
def lint(_context):
    """Run formatting and type checks."""
    _run(["uv", "run", "black", "--check", "src", "tests"])
    _run(["uv", "run", "mypy", "src/paremcp"])


@task
def build(_context):
    """Build distribution artifacts."""
    _run(["uv", "build"])
