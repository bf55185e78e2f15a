"""create-server-startup pipeline orchestrator.

Runs one generation from start to finish:

1. COLLECT  -- ask for project name, language, database and security level.
2. GENERATE -- plan the layout and render every template into a new directory.
3. INSTALL  -- run the package manager inside the new project.
4. REPORT   -- print the next steps.

Usage::

    create-server-startup
    python -m server_startup
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from server_startup.config import AnswerSet, GeneratorConfig
from server_startup.errors import GeneratorError, UserCancelled
from server_startup.prompts import collect_answers
from server_startup.scaffolder import DependencyInstaller, ProjectGenerator
from server_startup.scaffolder.generator import DEFAULT_PORT, HEALTH_PATH, start_command
from server_startup.utils import (
    console,
    format_duration,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


class Pipeline:
    """Drives a single, strictly sequential generation run.

    Attributes:
        config: Settings of the run (output directory, install command).
        installer: Package-manager runner used after generation.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.installer = DependencyInstaller(
            self.config.install_command,
            timeout=self.config.install_timeout,
        )

    def collect(self) -> AnswerSet:
        """Show the banner and prompt for the answers of this run.

        Runs outside the event loop so that Ctrl+C reaches the prompt.

        Raises:
            UserCancelled: If the prompts are aborted.
        """
        print_banner(
            "CREATE-SERVER-STARTUP",
            "Create a production-ready Node.js server in seconds!",
        )
        return collect_answers(console)

    async def run(self, answers: AnswerSet) -> Path:
        """Generate and install the project for *answers*.

        Returns:
            The generated project root.

        Raises:
            GeneratorError: Any failure of generation or install.
        """
        print_summary_table(
            {
                "Project": answers.project_name,
                "Language": answers.language.label,
                "Database": answers.database.label,
                "Security": answers.security.label,
            },
            title="Project settings",
        )

        generator = ProjectGenerator(answers)
        with console.status("Creating project..."):
            project_root = await generator.generate(self.config.output_dir)
        print_success(f"Project structure created ({len(generator.plan.files)} files)")

        if self.config.skip_install:
            print_warning("Skipping dependency installation.")
        else:
            console.print(
                f"Installing dependencies ({self.installer.command_str})...", markup=False
            )
            elapsed = await self.installer.install(project_root)
            print_success(f"Dependencies installed in {format_duration(elapsed)}")

        self._print_next_steps(answers, project_root)
        return project_root

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _print_next_steps(self, answers: AnswerSet, project_root: Path) -> None:
        console.print()
        print_success(f"Project created successfully at {project_root}")
        console.print("\n[yellow]Next steps:[/yellow]")
        console.print(f"cd {answers.project_name}", markup=False)

        if answers.has_database:
            console.print("\n[yellow]Set your database connection:[/yellow]")
            console.print("Edit .env file and add:")
            console.print(
                f'DATABASE_URL="your_{answers.database.value}_connection_string"',
                markup=False,
            )

        console.print("\n[yellow]Start the server:[/yellow]")
        console.print(start_command(answers))
        console.print("\n[yellow]Test the health endpoint:[/yellow]")
        console.print(f"curl http://localhost:{DEFAULT_PORT}{HEALTH_PATH}")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``create-server-startup`` (takes no arguments)."""
    pipeline = Pipeline()
    try:
        answers = pipeline.collect()
        asyncio.run(pipeline.run(answers))
    except UserCancelled as exc:
        console.print(f"\n[yellow]{exc}[/yellow]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print(f"\n[yellow]{UserCancelled()}[/yellow]")
        sys.exit(1)
    except GeneratorError as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
