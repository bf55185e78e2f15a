"""Unit tests for the error taxonomy (server_startup.errors)."""

from __future__ import annotations

from pathlib import Path

import pytest

from server_startup.errors import (
    GeneratorError,
    InstallFailure,
    PatchFailure,
    TargetExists,
    UserCancelled,
    WriteFailure,
)

pytestmark = pytest.mark.unit


class TestErrors:
    @pytest.mark.parametrize(
        "error",
        [
            UserCancelled(),
            TargetExists(Path("/tmp/demo")),
            WriteFailure(Path("/tmp/demo/a.js")),
            PatchFailure("health"),
            InstallFailure("npm install", 1),
        ],
    )
    def test_all_are_generator_errors(self, error):
        assert isinstance(error, GeneratorError)

    def test_user_cancelled_message(self):
        assert str(UserCancelled()) == "Operation cancelled."

    def test_target_exists_names_directory(self):
        error = TargetExists(Path("/tmp/demo"))
        assert error.path == Path("/tmp/demo")
        assert str(error) == 'Directory "demo" already exists!'

    def test_write_failure_reason(self):
        error = WriteFailure(Path("/tmp/a.js"), "Permission denied")
        assert str(error) == "Failed to write /tmp/a.js: Permission denied"
        assert str(WriteFailure(Path("/tmp/a.js"))) == "Failed to write /tmp/a.js"

    def test_patch_failure_anchor(self):
        error = PatchFailure("health")
        assert error.anchor == "health"
        assert "health" in str(error)

    def test_install_failure(self):
        error = InstallFailure("npm install", 2, "ERESOLVE")
        assert error.command == "npm install"
        assert error.returncode == 2
        assert str(error) == "'npm install' exited with code 2: ERESOLVE"
