"""npm-driven project creation and dependency installation."""

from __future__ import annotations

import shlex
from pathlib import Path

from vitegen.config import ProjectConfig
from vitegen.utils import console

from .runner import CommandRunner

# Tailwind 4 dropped the ``init`` subcommand, so stay on the v3 line.
FEATURE_LIBRARIES: tuple[str, ...] = (
    "bootstrap",
    "tailwindcss@3",
    "postcss",
    "autoprefixer",
)


class ScaffoldInstaller:
    """Creates the Vite project and installs its libraries via npm."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    async def create_project(self, config: ProjectConfig, output_dir: Path) -> Path:
        """Run ``npm create vite`` inside *output_dir*.

        Returns:
            The new project root, ``output_dir / project_name``.
        """
        console.print("Initializing a new Vite project...")
        await self.runner.run(
            f"npm create vite@latest {shlex.quote(config.project_name)} -- --template vanilla",
            "Failed to initialize Vite project.",
            cwd=output_dir,
        )
        return output_dir / config.project_name

    async def install_dependencies(self, project_root: Path) -> None:
        console.print("Installing project dependencies...")
        await self.runner.run(
            "npm install",
            "Failed to install project dependencies.",
            cwd=project_root,
        )

    async def install_feature_libraries(self, project_root: Path) -> None:
        console.print("Installing Bootstrap, Tailwind CSS, PostCSS, and Autoprefixer...")
        await self.runner.run(
            "npm install " + " ".join(FEATURE_LIBRARIES),
            "Failed to install Bootstrap, Tailwind CSS, PostCSS, and Autoprefixer.",
            cwd=project_root,
        )

    async def init_tailwind(self, project_root: Path) -> None:
        console.print("Initializing Tailwind CSS configuration...")
        await self.runner.run(
            "npx tailwindcss init -p",
            "Failed to initialize Tailwind CSS configuration.",
            cwd=project_root,
        )
