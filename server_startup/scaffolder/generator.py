"""Main scaffolding orchestrator.

Takes an ``AnswerSet`` and writes the boilerplate Express server project it
describes: the planned directory skeleton and every planned file, rendered
from the Jinja2 template catalog.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from ..config import AnswerSet
from ..errors import TargetExists, WriteFailure
from .app_file import IMPORT_EXT, build_app_sections
from .manifest import build_manifest, render_manifest, render_tsconfig
from .patcher import apply_auth_wiring
from .planner import FilePlan, plan
from .templates import TemplateRenderer

DEFAULT_PORT = 3000
HEALTH_PATH = "/api/v1/health"


class ProjectGenerator:
    """Writes a generated project for a single ``AnswerSet``.

    The target directory must not exist yet: generation refuses to start
    otherwise, so the files it writes never overwrite anything.  A failure
    half-way leaves the partially written directory in place.
    """

    def __init__(
        self,
        answers: AnswerSet,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.answers = answers
        self.renderer = renderer or TemplateRenderer()
        self.plan: FilePlan = plan(answers)

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path) -> Path:
        """Generate the project under *output_dir*.

        Returns:
            Path to the generated project root
            (``<output_dir>/<project_name>``).

        Raises:
            TargetExists: If the project root already exists.
            WriteFailure: If a directory or file cannot be written.
        """
        project_root = Path(output_dir) / self.answers.project_name
        if project_root.exists():
            raise TargetExists(project_root)

        context = self.build_context()

        await asyncio.to_thread(_make_dir, project_root, False)
        await self._create_directory_structure(project_root)

        for task in self.plan.files:
            await self.renderer.render_to_file(
                task.template,
                project_root / task.path,
                {**context, **task.params},
            )

        return project_root

    # -- Context building --------------------------------------------------

    def build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context shared by every file."""
        answers = self.answers

        sections = build_app_sections(answers)
        if answers.token_auth:
            apply_auth_wiring(sections)

        return {
            "project_name": answers.project_name,
            "language": answers.language.value,
            "typed": answers.typed,
            "ext": answers.ext,
            "import_ext": IMPORT_EXT,
            "database": answers.database.value,
            "db_label": answers.database.label,
            "has_database": answers.has_database,
            "security": answers.security.value,
            "has_security": answers.has_security,
            "token_auth": answers.token_auth,
            "port": DEFAULT_PORT,
            "health_path": HEALTH_PATH,
            "start_command": start_command(answers),
            "manifest": render_manifest(build_manifest(answers)),
            "tsconfig": render_tsconfig(),
            **sections.as_context(),
        }

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the planned directory tree, in plan order."""
        for d in self.plan.directories:
            await asyncio.to_thread(_make_dir, root / d, True)


def start_command(answers: AnswerSet) -> str:
    """Command that starts the generated server during development."""
    return "npm run dev" if answers.typed else "npm start"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_dir(path: Path, exist_ok: bool) -> None:
    try:
        path.mkdir(parents=True, exist_ok=exist_ok)
    except FileExistsError as exc:
        if not exist_ok:
            raise TargetExists(path) from exc
        raise WriteFailure(path, "a file is in the way") from exc
    except OSError as exc:
        raise WriteFailure(path, exc.strerror or str(exc)) from exc
