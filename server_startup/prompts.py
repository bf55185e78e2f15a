"""Interactive answer collection.

Asks the four questions of a generation run in a fixed order using
``rich.prompt`` and returns an immutable ``AnswerSet``.  Rich re-asks on its
own when an answer is not one of the offered choices; the project name is
re-asked here until it passes validation.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from .config import (
    DEFAULT_PROJECT_NAME,
    AnswerSet,
    Database,
    Language,
    Security,
    validate_project_name,
)
from .errors import UserCancelled
from .utils import console as default_console

E = TypeVar("E", bound=Enum)


def collect_answers(console: Console | None = None) -> AnswerSet:
    """Prompt for project name, language, database and security level.

    Raises:
        UserCancelled: If the user presses Ctrl+C or closes stdin.
    """
    console = console or default_console
    try:
        project_name = _ask_project_name(console)
        language = _ask_choice(
            console, "JavaScript or TypeScript?", Language, Language.JS
        )
        database = _ask_choice(console, "Database", Database, Database.NONE)
        security = _ask_choice(console, "Security level", Security, Security.BASIC)
    except (KeyboardInterrupt, EOFError) as exc:
        raise UserCancelled() from exc

    return AnswerSet(
        project_name=project_name,
        language=language,
        database=database,
        security=security,
    )


def _ask_project_name(console: Console) -> str:
    while True:
        raw = Prompt.ask(
            "[blue]➤ Project name[/blue]",
            default=DEFAULT_PROJECT_NAME,
            console=console,
        )
        try:
            return validate_project_name(raw)
        except ValueError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")


def _ask_choice(console: Console, question: str, options: type[E], default: E) -> E:
    """Show the labelled options of *options* and ask for one of their values."""
    table = Table(show_header=False, box=None)
    for option in options:
        table.add_row(f"[cyan]{option.value}[/cyan]", option.label)
    console.print(f"\n[bold blue]➤ {question}[/bold blue]")
    console.print(table)

    value = Prompt.ask(
        "Choice",
        choices=[option.value for option in options],
        default=default.value,
        console=console,
    )
    return options(value)
