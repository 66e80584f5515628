"""Tests for the template writer (vitegen.scaffolder.files_gen).

Covers:
- Every file and directory of the common file set
- vite.config.js only for the deploy profile
- Overwrite semantics and byte-identical re-runs
- Directory creation on re-run
"""

from __future__ import annotations

from pathlib import Path

import pytest

from vitegen.config import ProjectConfig
from vitegen.scaffolder.files_gen import (
    DIRECTORIES,
    PLACEHOLDER_FILES,
    TemplateWriter,
    build_context,
)
from vitegen.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def writer() -> TemplateWriter:
    return TemplateWriter(TemplateRenderer())


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


class TestBuildContext:
    def test_context(self, basic_config: ProjectConfig):
        assert build_context(basic_config) == {
            "project_name": "demo",
            "host": "localhost",
            "port": 5173,
        }


class TestWriteAll:
    @pytest.mark.asyncio
    async def test_common_file_set(
        self, writer: TemplateWriter, basic_config: ProjectConfig, vite_project: Path
    ):
        written = await writer.write_all(vite_project, basic_config)
        names = {p.relative_to(vite_project).as_posix() for p in written}
        assert names == {
            "tailwind.config.js",
            "postcss.config.cjs",
            "src/main.js",
            "src/style.css",
            "index.html",
            *PLACEHOLDER_FILES,
        }
        for d in DIRECTORIES:
            assert (vite_project / d).is_dir()
        assert not (vite_project / "vite.config.js").exists()

    @pytest.mark.asyncio
    async def test_html_shell_contains_config_values(
        self, writer: TemplateWriter, basic_config: ProjectConfig, vite_project: Path
    ):
        await writer.write_all(vite_project, basic_config)
        html = (vite_project / "index.html").read_text(encoding="utf-8")
        assert "demo" in html
        assert "localhost" in html
        assert "5173" in html

    @pytest.mark.asyncio
    async def test_replaces_create_vite_entry(
        self, writer: TemplateWriter, basic_config: ProjectConfig, vite_project: Path
    ):
        await writer.write_all(vite_project, basic_config)
        main_js = (vite_project / "src" / "main.js").read_text(encoding="utf-8")
        assert main_js.startswith("import 'bootstrap/dist/css/bootstrap.min.css';")
        assert "import './style.css'\n" not in main_js

    @pytest.mark.asyncio
    async def test_placeholders_are_empty(
        self, writer: TemplateWriter, basic_config: ProjectConfig, vite_project: Path
    ):
        home = vite_project / "src" / "views" / "Home.js"
        home.parent.mkdir(parents=True)
        home.write_text("export default {};\n", encoding="utf-8")
        await writer.write_all(vite_project, basic_config)
        for rel in PLACEHOLDER_FILES:
            assert (vite_project / rel).read_text(encoding="utf-8") == ""

    @pytest.mark.asyncio
    async def test_vite_config_for_deploy(
        self, writer: TemplateWriter, deploy_config: ProjectConfig, vite_project: Path
    ):
        written = await writer.write_all(
            vite_project, deploy_config, include_vite_config=True
        )
        vite_config = vite_project / "vite.config.js"
        assert vite_config in written
        text = vite_config.read_text(encoding="utf-8")
        assert "host: 'localhost'" in text
        assert "port: 5173" in text

    @pytest.mark.asyncio
    async def test_rerun_is_byte_identical(
        self, writer: TemplateWriter, basic_config: ProjectConfig, vite_project: Path
    ):
        await writer.write_all(vite_project, basic_config)
        first = _snapshot(vite_project)
        await writer.write_all(vite_project, basic_config)
        assert _snapshot(vite_project) == first

    @pytest.mark.asyncio
    async def test_works_without_existing_project(
        self, writer: TemplateWriter, basic_config: ProjectConfig, tmp_path: Path
    ):
        root = tmp_path / "fresh"
        await writer.write_all(root, basic_config)
        assert (root / "index.html").is_file()


class TestCreateDirectories:
    @pytest.mark.asyncio
    async def test_idempotent(self, writer: TemplateWriter, tmp_path: Path):
        first = await writer.create_directories(tmp_path)
        second = await writer.create_directories(tmp_path)
        assert first == second
        assert all(p.is_dir() for p in second)

    @pytest.mark.asyncio
    async def test_creates_parents(self, writer: TemplateWriter, tmp_path: Path):
        await writer.create_directories(tmp_path / "deep" / "root")
        assert (tmp_path / "deep" / "root" / "src" / "assets" / "images").is_dir()
