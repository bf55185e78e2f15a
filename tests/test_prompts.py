"""Unit tests for interactive answer collection (server_startup.prompts)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from server_startup.config import Database, Language, Security
from server_startup.errors import UserCancelled
from server_startup.prompts import collect_answers

pytestmark = pytest.mark.unit

PROMPT = "server_startup.prompts.Prompt.ask"


class TestCollectAnswers:
    def test_questions_in_order(self, recording_console):
        with patch(PROMPT, side_effect=["my-api", "ts", "postgres", "jwt"]) as ask:
            answers = collect_answers(recording_console)

        assert answers.project_name == "my-api"
        assert answers.language is Language.TS
        assert answers.database is Database.POSTGRES
        assert answers.security is Security.JWT
        assert ask.call_count == 4

        output = recording_console.export_text()
        assert output.index("JavaScript or TypeScript?") < output.index("Database")
        assert output.index("Database") < output.index("Security level")

    def test_choices_and_defaults(self, recording_console):
        with patch(PROMPT, side_effect=["node-server", "js", "none", "basic"]) as ask:
            collect_answers(recording_console)

        name_call, lang_call, db_call, sec_call = ask.call_args_list
        assert name_call.kwargs["default"] == "node-server"
        assert lang_call.kwargs["choices"] == ["js", "ts"]
        assert lang_call.kwargs["default"] == "js"
        assert db_call.kwargs["choices"] == ["none", "mongodb", "postgres", "mysql", "sqlite"]
        assert db_call.kwargs["default"] == "none"
        assert sec_call.kwargs["choices"] == ["none", "basic", "jwt"]
        assert sec_call.kwargs["default"] == "basic"

    def test_labels_are_shown(self, recording_console):
        with patch(PROMPT, side_effect=["x", "js", "none", "none"]):
            collect_answers(recording_console)
        output = recording_console.export_text()
        assert "PostgreSQL" in output
        assert "JWT Authentication" in output

    def test_blank_name_is_asked_again(self, recording_console):
        with patch(PROMPT, side_effect=["   ", "a/b", "ok", "js", "none", "none"]) as ask:
            answers = collect_answers(recording_console)

        assert answers.project_name == "ok"
        assert ask.call_count == 6
        assert "Project name is required" in recording_console.export_text()

    def test_rejected_name_is_echoed_verbatim(self, recording_console):
        with patch(PROMPT, side_effect=["a/[b]", "ok", "js", "none", "none"]):
            collect_answers(recording_console)

        assert "Invalid project name: 'a/[b]'" in recording_console.export_text()

    @pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
    def test_abort_raises_user_cancelled(self, recording_console, error):
        with patch(PROMPT, side_effect=["demo", error()]):
            with pytest.raises(UserCancelled):
                collect_answers(recording_console)
