"""Generator configuration and answer models.

The ``AnswerSet`` is the single input of every planning and rendering
decision.  All models use Pydantic v2 so that invalid answers are rejected at
construction time, before anything touches the filesystem.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    """Language variant of the generated project."""

    JS = "js"
    TS = "ts"

    @property
    def label(self) -> str:
        return "TypeScript" if self is Language.TS else "JavaScript"


class Database(str, Enum):
    """Database driver wired into the generated project."""

    NONE = "none"
    MONGODB = "mongodb"
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"

    @property
    def label(self) -> str:
        return DATABASE_LABELS[self]


class Security(str, Enum):
    """Security level of the generated project."""

    NONE = "none"
    BASIC = "basic"
    JWT = "jwt"

    @property
    def label(self) -> str:
        return SECURITY_LABELS[self]


DATABASE_LABELS: dict[Database, str] = {
    Database.NONE: "None",
    Database.MONGODB: "MongoDB",
    Database.POSTGRES: "PostgreSQL",
    Database.MYSQL: "MySQL",
    Database.SQLITE: "SQLite",
}

SECURITY_LABELS: dict[Security, str] = {
    Security.NONE: "None",
    Security.BASIC: "Basic (Helmet, CORS)",
    Security.JWT: "JWT Authentication",
}

DEFAULT_PROJECT_NAME = "node-server"


def validate_project_name(value: str) -> str:
    """Return the stripped project name or raise ``ValueError``.

    The name becomes a directory directly under the output directory, so
    path separators and the special ``.``/``..`` entries are rejected.
    """
    value = value.strip()
    if not value:
        raise ValueError("Project name is required")
    if value in (".", "..") or "/" in value or "\\" in value:
        raise ValueError(f"Invalid project name: {value!r}")
    return value


# ---------------------------------------------------------------------------
# AnswerSet
# ---------------------------------------------------------------------------


class AnswerSet(BaseModel):
    """The four choices that fully parameterize a generation run."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Name of the directory to create")
    language: Language = Field(default=Language.JS)
    database: Database = Field(default=Database.NONE)
    security: Security = Field(default=Security.BASIC)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    # -- Derived flags -----------------------------------------------------

    @property
    def typed(self) -> bool:
        return self.language is Language.TS

    @property
    def ext(self) -> str:
        """File extension of generated source files."""
        return self.language.value

    @property
    def has_database(self) -> bool:
        return self.database is not Database.NONE

    @property
    def has_security(self) -> bool:
        return self.security is not Security.NONE

    @property
    def token_auth(self) -> bool:
        return self.security is Security.JWT


# ---------------------------------------------------------------------------
# GeneratorConfig
# ---------------------------------------------------------------------------


class GeneratorConfig(BaseModel):
    """Settings of a single generator run.

    There are no CLI flags or environment overrides; callers embedding the
    pipeline (and the tests) construct this directly.
    """

    output_dir: Path = Field(default_factory=Path.cwd)
    install_command: list[str] = Field(default_factory=lambda: ["npm", "install"])
    install_timeout: int = Field(
        default=600, ge=10, description="Package-manager timeout in seconds"
    )
    skip_install: bool = Field(default=False)
