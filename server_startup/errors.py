"""Error taxonomy for the generator.

Every failure that can end a run is a ``GeneratorError`` subclass.  They are
raised where the failure happens and only caught by the top-level handler in
``server_startup.pipeline.main``.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for all generator failures."""


class UserCancelled(GeneratorError):
    """Raised when the interactive prompts are aborted (Ctrl+C / EOF)."""

    def __init__(self, message: str = "Operation cancelled.") -> None:
        super().__init__(message)


class TargetExists(GeneratorError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f'Directory "{self.path.name}" already exists!')


class WriteFailure(GeneratorError):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Failed to write {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PatchFailure(GeneratorError):
    """Raised when auth wiring cannot find the section it is anchored to."""

    def __init__(self, anchor: str, message: str = "") -> None:
        self.anchor = anchor
        super().__init__(message or f"Anchor section '{anchor}' not found in application file")


class InstallFailure(GeneratorError):
    """Raised when the package-manager command fails."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"'{command}' exited with code {returncode}"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)
