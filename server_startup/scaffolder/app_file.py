"""Composable sections of the generated application-setup file (``src/app``).

The application file is assembled from named import, middleware and route
lines.  Optional features add or insert sections by name instead of editing
rendered text, and the ``src/app.j2`` template only lays the sections out.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AnswerSet

IMPORT_EXT = "js"


@dataclass(frozen=True)
class Section:
    """A single named line of the application file."""

    name: str
    line: str


@dataclass
class AppSections:
    """Ordered sections of the application file."""

    imports: list[Section] = field(default_factory=list)
    middleware: list[Section] = field(default_factory=list)
    routes: list[Section] = field(default_factory=list)
    database: bool = False

    def names(self, group: str) -> list[str]:
        return [section.name for section in getattr(self, group)]

    def index_of(self, group: str, name: str) -> int:
        """Return the position of section *name* in *group*, or ``-1``."""
        for i, section in enumerate(getattr(self, group)):
            if section.name == name:
                return i
        return -1

    def insert_after(self, group: str, anchor: str, section: Section) -> bool:
        """Insert *section* right after *anchor*; return ``False`` if absent."""
        index = self.index_of(group, anchor)
        if index < 0:
            return False
        getattr(self, group).insert(index + 1, section)
        return True

    def as_context(self) -> dict[str, object]:
        return {
            "app_imports": [s.line for s in self.imports],
            "app_middleware": [s.line for s in self.middleware],
            "app_routes": [s.line for s in self.routes],
            "app_database": self.database,
        }


def _import(name: str, binding: str, module: str) -> Section:
    return Section(name, f"import {binding} from '{module}';")


def build_app_sections(answers: AnswerSet) -> AppSections:
    """Build the sections for *answers*, without auth wiring."""
    sections = AppSections(database=answers.has_database)

    express_binding = "express, { Request, Response }" if answers.typed else "express"
    sections.imports.extend([
        _import("express", express_binding, "express"),
        _import("logger", "{ httpLogger }", f"./config/logger.{IMPORT_EXT}"),
        _import("health", "healthRouter", f"./routes/v1/health.routes.{IMPORT_EXT}"),
        _import("error", "errorMiddleware", f"./middlewares/error.middleware.{IMPORT_EXT}"),
    ])
    if answers.has_security:
        sections.imports.append(
            _import(
                "security",
                "securityMiddleware",
                f"./middlewares/security.middleware.{IMPORT_EXT}",
            )
        )
    if answers.has_database:
        sections.imports.append(
            _import("database", "{ createConnection }", f"./db/db-utils.{IMPORT_EXT}")
        )

    sections.middleware.extend([
        Section("json", "app.use(express.json());"),
        Section("logger", "app.use(httpLogger);"),
    ])
    if answers.has_security:
        sections.middleware.append(Section("security", "app.use(securityMiddleware);"))

    sections.routes.append(
        Section("health", "app.use('/api/v1/health', healthRouter);")
    )
    return sections
