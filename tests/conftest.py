"""Shared pytest fixtures for the create-server-startup test suite.

Provides reusable fixtures for:
- Answer sets for the common language / database / security choices
- A quiet Rich console for output assertions
- Mock subprocess helpers for the dependency installer
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from rich.console import Console

from server_startup.config import AnswerSet, Database, Language, Security


# ---------------------------------------------------------------------------
# Answer sets
# ---------------------------------------------------------------------------

def make_answers(
    name: str = "demo",
    language: Language = Language.JS,
    database: Database = Database.NONE,
    security: Security = Security.NONE,
) -> AnswerSet:
    return AnswerSet(
        project_name=name,
        language=language,
        database=database,
        security=security,
    )


@pytest.fixture
def answers_factory():
    """Factory building an ``AnswerSet`` with sensible test defaults."""
    return make_answers


@pytest.fixture
def js_answers() -> AnswerSet:
    """Plain JavaScript project without optional features."""
    return make_answers()


@pytest.fixture
def ts_answers() -> AnswerSet:
    """TypeScript project without optional features."""
    return make_answers(language=Language.TS)


@pytest.fixture
def full_answers() -> AnswerSet:
    """TypeScript project with PostgreSQL and JWT auth."""
    return make_answers(
        name="full-app",
        language=Language.TS,
        database=Database.POSTGRES,
        security=Security.JWT,
    )


# ---------------------------------------------------------------------------
# Output capture
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_console() -> Console:
    """A Rich console that records output instead of printing it."""
    return Console(record=True, width=120, force_terminal=False)


@pytest.fixture
def quiet_console(recording_console: Console):
    """Route ``server_startup.utils.console`` output to a recording console."""
    with patch("server_startup.utils.console", recording_console), \
            patch("server_startup.pipeline.console", recording_console):
        yield recording_console


# ---------------------------------------------------------------------------
# Subprocess helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_command():
    """Patch the installer's ``run_command`` to succeed without running npm."""
    mock = AsyncMock(return_value=(0, "", ""))
    with patch("server_startup.scaffolder.installer.run_command", mock):
        yield mock

