"""Dependency installation for the generated project."""

from __future__ import annotations

import time
from pathlib import Path

from ..errors import InstallFailure
from ..utils import run_command

DEFAULT_INSTALL_COMMAND: tuple[str, ...] = ("npm", "install")


class DependencyInstaller:
    """Runs the package manager inside a freshly generated project.

    Output is not captured: the package manager writes straight to the
    user's terminal.
    """

    def __init__(
        self,
        command: list[str] | tuple[str, ...] = DEFAULT_INSTALL_COMMAND,
        timeout: int = 600,
    ) -> None:
        self.command = list(command)
        self.timeout = timeout

    @property
    def command_str(self) -> str:
        return " ".join(self.command)

    async def install(self, project_root: str | Path) -> float:
        """Install dependencies in *project_root*.

        Returns:
            Elapsed wall-clock seconds.

        Raises:
            InstallFailure: If the command is missing, times out or exits
                with a non-zero code.  The project directory is left as is.
        """
        started = time.monotonic()
        try:
            returncode, _, stderr = await run_command(
                self.command,
                cwd=project_root,
                timeout=self.timeout,
                capture=False,
            )
        except FileNotFoundError as exc:
            raise InstallFailure(
                self.command_str, 127, f"'{self.command[0]}' not found on PATH"
            ) from exc

        if returncode != 0:
            raise InstallFailure(self.command_str, returncode, stderr)
        return time.monotonic() - started
