"""Layout planning.

``plan`` turns an ``AnswerSet`` into the ordered list of directories and file
tasks of a generation run.  It is a pure function: the same answers always
produce the same plan, in the same order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..config import AnswerSet


# ---------------------------------------------------------------------------
# Plan model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileTask:
    """One file to render: output path, template id and extra parameters."""

    path: str
    template: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FilePlan:
    """Directories and files of a generation run, in creation order."""

    directories: tuple[str, ...]
    files: tuple[FileTask, ...]

    def paths(self) -> list[str]:
        return [task.path for task in self.files]

    def get(self, path: str) -> FileTask | None:
        for task in self.files:
            if task.path == path:
                return task
        return None

    def __contains__(self, path: object) -> bool:
        return path in self.paths() or path in self.directories


# ---------------------------------------------------------------------------
# Layout rules
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/config",
    "src/controllers",
    "src/routes",
    "src/routes/v1",
    "src/middlewares",
    "src/services",
    "src/utils",
)

DATABASE_DIRECTORIES: tuple[str, ...] = (
    "src/db",
    "src/models",
    "src/repositories",
)


def plan(answers: AnswerSet) -> FilePlan:
    """Derive the directory tree and file tasks from *answers*."""
    ext = answers.ext

    directories = list(BASE_DIRECTORIES)
    if answers.has_database:
        directories.extend(DATABASE_DIRECTORIES)

    files = [
        FileTask("package.json", "package.json.j2"),
        FileTask(".env.example", "env.example.j2"),
        FileTask(".gitignore", "gitignore.j2"),
        FileTask("README.md", "README.md.j2"),
        FileTask(f"server.{ext}", "server.j2"),
        FileTask(f"src/app.{ext}", "src/app.j2"),
        FileTask(f"src/config/logger.{ext}", "src/config/logger.j2"),
        FileTask(
            f"src/controllers/health.controller.{ext}",
            "src/controllers/health.controller.j2",
        ),
        FileTask(
            f"src/routes/v1/health.routes.{ext}",
            "src/routes/v1/routes.j2",
            {"controller": "health", "handler": "healthCheck", "method": "get", "path": "/"},
        ),
        FileTask(
            f"src/middlewares/error.middleware.{ext}",
            "src/middlewares/error.middleware.j2",
        ),
    ]

    if answers.has_database:
        files.append(FileTask(f"src/db/db-utils.{ext}", "src/db/db-utils.j2"))

    if answers.has_security:
        files.append(
            FileTask(
                f"src/middlewares/security.middleware.{ext}",
                "src/middlewares/security.middleware.j2",
            )
        )

    if answers.token_auth:
        files.extend([
            FileTask(
                f"src/middlewares/auth.middleware.{ext}",
                "src/middlewares/auth.middleware.j2",
            ),
            FileTask(
                f"src/controllers/auth.controller.{ext}",
                "src/controllers/auth.controller.j2",
            ),
            FileTask(
                f"src/routes/v1/auth.routes.{ext}",
                "src/routes/v1/routes.j2",
                {"controller": "auth", "handler": "login", "method": "post", "path": "/login"},
            ),
        ])

    if answers.typed:
        files.append(FileTask("tsconfig.json", "tsconfig.json.j2"))

    return FilePlan(directories=tuple(directories), files=tuple(files))
