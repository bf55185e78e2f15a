"""``package.json`` and ``tsconfig.json`` documents for the generated project.

The manifest is built as a Pydantic model so that it can be rendered to JSON
and parsed back without losing anything.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import AnswerSet, Database, Security

LATEST = "latest"

DATABASE_DRIVERS: dict[Database, str] = {
    Database.MONGODB: "mongoose",
    Database.POSTGRES: "pg",
    Database.MYSQL: "mysql2",
    Database.SQLITE: "sqlite3",
}

# Only drivers that do not ship their own typings.
DATABASE_TYPINGS: dict[Database, str] = {
    Database.POSTGRES: "@types/pg",
}

TS_DEV_SCRIPT = 'nodemon --watch server.ts --ext ts --exec "node --loader ts-node/esm server.ts"'
JS_DEV_SCRIPT = 'nodemon --watch server.js --exec "node server.js"'
TEST_SCRIPT = 'echo "Error: no test specified" && exit 1'


class PackageManifest(BaseModel):
    """Structured form of the generated ``package.json``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str = "1.0.0"
    type: str = "module"
    description: str = "Minimal Node.js server"
    main: str = "server.js"
    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    def dependency_names(self) -> set[str]:
        """Return runtime and development dependency names together."""
        return set(self.dependencies) | set(self.dev_dependencies)


def build_manifest(answers: AnswerSet) -> PackageManifest:
    """Assemble the manifest for *answers*."""
    dependencies = {"express": LATEST, "dotenv": LATEST, "winston": LATEST}
    if answers.has_security:
        dependencies.update({"helmet": LATEST, "cors": LATEST, "express-rate-limit": LATEST})
        if answers.security is Security.JWT:
            dependencies.update({"jsonwebtoken": LATEST, "bcryptjs": LATEST})
    if answers.has_database:
        dependencies[DATABASE_DRIVERS[answers.database]] = LATEST

    scripts = {"test": TEST_SCRIPT}
    if answers.typed:
        main = "dist/server.js"
        scripts.update({
            "build": "tsc",
            "start": "node dist/server.js",
            "dev": TS_DEV_SCRIPT,
        })
        dev_dependencies = {
            "typescript": LATEST,
            "ts-node": LATEST,
            "nodemon": LATEST,
            "@types/node": LATEST,
            "@types/express": LATEST,
        }
        if answers.token_auth:
            dev_dependencies["@types/jsonwebtoken"] = LATEST
            dev_dependencies["@types/bcryptjs"] = LATEST
        if answers.database in DATABASE_TYPINGS:
            dev_dependencies[DATABASE_TYPINGS[answers.database]] = LATEST
    else:
        main = "server.js"
        scripts.update({"start": "node server.js", "dev": JS_DEV_SCRIPT})
        dev_dependencies = {"nodemon": LATEST}

    return PackageManifest(
        name=answers.project_name,
        main=main,
        scripts=scripts,
        dependencies=dependencies,
        dev_dependencies=dev_dependencies,
    )


def render_manifest(manifest: PackageManifest) -> str:
    """Serialise the manifest the way npm writes it (2-space JSON)."""
    return _render_json(manifest.model_dump(by_alias=True))


def parse_manifest(text: str) -> PackageManifest:
    return PackageManifest.model_validate_json(text)


def build_tsconfig() -> dict[str, Any]:
    """Compiler options for the TypeScript variant."""
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "ESNext",
            "moduleResolution": "node",
            "outDir": "dist",
            "rootDir": ".",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "types": ["node"],
        },
        "include": ["server.ts", "src/**/*.ts"],
        "exclude": ["node_modules", "dist"],
    }


def render_tsconfig() -> str:
    return _render_json(build_tsconfig())


def _render_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
