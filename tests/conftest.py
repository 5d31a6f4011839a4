from __future__ import annotations

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner


# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from httperrors import ErrorFactory, RecordingReporter  # noqa: E402


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def factory(recorder: RecordingReporter) -> ErrorFactory:
    """Factory whose deprecation signals land in ``recorder``."""

    return ErrorFactory(deprecate=recorder)


@pytest.fixture
def cli_runner(monkeypatch):
    monkeypatch.delenv("HTTPERRORS_DEBUG", raising=False)
    return CliRunner()
