"""Tests for package.json / tsconfig.json documents (server_startup.scaffolder.manifest)."""

from __future__ import annotations

import itertools
import json

import pytest

from server_startup.config import Database, Language, Security
from server_startup.scaffolder.manifest import (
    DATABASE_DRIVERS,
    PackageManifest,
    build_manifest,
    build_tsconfig,
    parse_manifest,
    render_manifest,
    render_tsconfig,
)

pytestmark = pytest.mark.unit


class TestBuildManifest:
    def test_typed_without_features(self, answers_factory):
        manifest = build_manifest(answers_factory(name="demo", language=Language.TS))
        assert manifest.name == "demo"
        assert "build" in manifest.scripts
        assert "dev" in manifest.scripts
        assert manifest.scripts["build"] == "tsc"
        assert manifest.main == "dist/server.js"
        assert not set(DATABASE_DRIVERS.values()) & manifest.dependency_names()

    def test_javascript_scripts(self, js_answers):
        manifest = build_manifest(js_answers)
        assert manifest.main == "server.js"
        assert manifest.scripts["start"] == "node server.js"
        assert "build" not in manifest.scripts
        assert manifest.dev_dependencies == {"nodemon": "latest"}

    def test_base_dependencies(self, js_answers):
        assert build_manifest(js_answers).dependencies == {
            "express": "latest",
            "dotenv": "latest",
            "winston": "latest",
        }

    def test_basic_security_dependencies(self, answers_factory):
        deps = build_manifest(answers_factory(security=Security.BASIC)).dependencies
        assert {"helmet", "cors", "express-rate-limit"} <= set(deps)
        assert "jsonwebtoken" not in deps

    def test_jwt_dependencies(self, answers_factory):
        deps = build_manifest(answers_factory(security=Security.JWT)).dependencies
        assert {"helmet", "cors", "express-rate-limit", "jsonwebtoken", "bcryptjs"} <= set(deps)

    @pytest.mark.parametrize("database,driver", list(DATABASE_DRIVERS.items()))
    def test_database_driver(self, answers_factory, database, driver):
        deps = build_manifest(answers_factory(database=database)).dependencies
        assert driver in deps
        others = set(DATABASE_DRIVERS.values()) - {driver}
        assert not others & set(deps)

    def test_typed_jwt_typings(self, full_answers):
        dev = build_manifest(full_answers).dev_dependencies
        assert "@types/jsonwebtoken" in dev
        assert "@types/bcryptjs" in dev
        assert "@types/pg" in dev

    def test_javascript_has_no_typings(self, answers_factory):
        manifest = build_manifest(answers_factory(security=Security.JWT, database=Database.POSTGRES))
        assert not any(name.startswith("@types/") for name in manifest.dev_dependencies)


class TestManifestSerialisation:
    def test_render_uses_npm_keys(self, ts_answers):
        data = json.loads(render_manifest(build_manifest(ts_answers)))
        assert "devDependencies" in data
        assert "dev_dependencies" not in data
        assert data["type"] == "module"

    def test_render_format(self, js_answers):
        text = render_manifest(build_manifest(js_answers))
        assert text.endswith("}\n")
        assert text.startswith('{\n  "name": "demo"')

    @pytest.mark.parametrize(
        "language,database,security",
        list(itertools.product(Language, Database, Security)),
    )
    def test_render_parse_keeps_dependencies(self, answers_factory, language, database, security):
        manifest = build_manifest(
            answers_factory(language=language, database=database, security=security)
        )
        parsed = parse_manifest(render_manifest(manifest))
        assert parsed == manifest
        assert parsed.dependency_names() == manifest.dependency_names()
        assert render_manifest(parsed) == render_manifest(manifest)

    def test_parse_accepts_npm_json(self):
        manifest = parse_manifest('{"name": "x", "devDependencies": {"nodemon": "latest"}}')
        assert isinstance(manifest, PackageManifest)
        assert manifest.dev_dependencies == {"nodemon": "latest"}


class TestTsconfig:
    def test_compiler_options(self):
        options = build_tsconfig()["compilerOptions"]
        assert options["strict"] is True
        assert options["outDir"] == "dist"
        assert options["module"] == "ESNext"

    def test_compiles_server_entry_into_dist(self):
        config = build_tsconfig()
        assert config["compilerOptions"]["rootDir"] == "."
        assert config["include"] == ["server.ts", "src/**/*.ts"]

    def test_render_tsconfig(self):
        text = render_tsconfig()
        assert text.endswith("}\n")
        assert json.loads(text) == build_tsconfig()
