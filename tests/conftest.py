"""Shared test configuration and fixtures."""

import pytest

from milu.config import LOG_LEVEL_ENV_VAR, OUTPUT_ENV_VAR

# A small annotated .env covering every annotation kind
ANNOTATED_ENV = """\
# [@responsible=platform-team]
# [@type=string]
# [@secret=false]
# [@policy=required]
# [@docs=https://nodejs.org/api/process.html]
# Runtime mode of the application
NODE_ENV=development

# [@responsible=backend]
# [@type=number]
# HTTP port
PORT=8080

# [@type=url]
# [@secret=true]
DATABASE_URL=postgres://localhost:5432/app
"""


@pytest.fixture
def annotated_env_text() -> str:
    return ANNOTATED_ENV


@pytest.fixture
def annotated_env_file(tmp_path):
    """Write ANNOTATED_ENV to a temporary .env.example and return its path."""
    path = tmp_path / ".env.example"
    path.write_text(ANNOTATED_ENV, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_milu_env(monkeypatch):
    """Hide MILU_* settings from the developer's shell for the duration of a test."""
    for name in (OUTPUT_ENV_VAR, LOG_LEVEL_ENV_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
