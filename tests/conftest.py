"""Shared pytest fixtures for the vitegen test suite.

Provides reusable fixtures for:
- Sample configuration payloads and files
- Validated basic / deploy configs
- A fake ``package.json`` as written by ``npm create vite``
- A fake npm that stands in for every external command
"""

from __future__ import annotations

import json
import shlex
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from vitegen.config import DeployProjectConfig, ProjectConfig


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def config_data() -> dict[str, Any]:
    """A valid configuration payload for the basic profile."""
    return {"projectName": "demo", "host": "localhost", "port": 5173}


@pytest.fixture
def deploy_config_data(config_data: dict[str, Any]) -> dict[str, Any]:
    """A valid configuration payload for the deploy profile."""
    return {**config_data, "githubUsername": "octocat"}


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper that writes a payload to ``tmp_path/config.json``."""

    def _write(data: Any, name: str = "config.json") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def basic_config(config_data: dict[str, Any]) -> ProjectConfig:
    return ProjectConfig.model_validate(config_data)


@pytest.fixture
def deploy_config(deploy_config_data: dict[str, Any]) -> DeployProjectConfig:
    return DeployProjectConfig.model_validate(deploy_config_data)


# ---------------------------------------------------------------------------
# Generated project
# ---------------------------------------------------------------------------

CREATE_VITE_MANIFEST: dict[str, Any] = {
    "name": "demo",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {
        "dev": "vite",
        "build": "vite build",
        "preview": "vite preview",
    },
    "devDependencies": {
        "vite": "^5.4.0",
    },
}


def write_create_vite_project(project_root: Path) -> Path:
    """Lay down what ``npm create vite -- --template vanilla`` produces."""
    project_root.mkdir(parents=True, exist_ok=True)
    manifest = dict(CREATE_VITE_MANIFEST, name=project_root.name)
    (project_root / "package.json").write_text(
        json.dumps(manifest, indent=2), encoding="utf-8"
    )
    (project_root / "index.html").write_text("<!doctype html>\n", encoding="utf-8")
    (project_root / "src").mkdir(exist_ok=True)
    (project_root / "src" / "main.js").write_text("import './style.css'\n", encoding="utf-8")
    return project_root


@pytest.fixture
def vite_project(tmp_path: Path) -> Path:
    """A project directory as left behind by ``npm create vite``."""
    return write_create_vite_project(tmp_path / "demo")


# ---------------------------------------------------------------------------
# Fake npm
# ---------------------------------------------------------------------------

class FakeNpm:
    """Records commands and emulates ``npm create vite``.

    Set ``fail_on`` to a substring to make the first matching command exit
    with status 1.
    """

    def __init__(self) -> None:
        self.commands: list[tuple[str, Path]] = []
        self.fail_on: str | None = None

    async def __call__(self, cmd: str, cwd: str | Path | None = None) -> int:
        self.commands.append((cmd, Path(cwd) if cwd else Path.cwd()))
        if self.fail_on and self.fail_on in cmd:
            return 1
        if cmd.startswith("npm create vite"):
            name = shlex.split(cmd)[3]
            write_create_vite_project(Path(cwd) / name)
        return 0

    @property
    def command_lines(self) -> list[str]:
        return [c for c, _ in self.commands]


@pytest.fixture
def fake_npm():
    """Patch the command runner so no real process is spawned."""
    fake = FakeNpm()
    with patch("vitegen.scaffolder.runner.run_command", new=fake):
        yield fake


@pytest.fixture
def free_port():
    """Make the pre-flight port probe report the port as free."""
    with patch(
        "vitegen.pipeline.check_port_available", AsyncMock(return_value=True)
    ) as mock:
        yield mock
