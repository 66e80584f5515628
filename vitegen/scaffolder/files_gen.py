"""Static and templated files written into a freshly created Vite project.

Every path is relative to the project root.  Existing files are overwritten
without confirmation, so running the writer twice with the same
configuration leaves byte-identical content behind.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from vitegen.config import ProjectConfig
from vitegen.utils import console, ensure_dir, write_text

from .templates import TemplateRenderer

DIRECTORIES: tuple[str, ...] = (
    "src/assets/images",
    "src/assets/styles",
    "src/components",
    "src/views",
)

PLACEHOLDER_FILES: tuple[str, ...] = (
    "src/assets/styles/_variables.scss",
    "src/assets/styles/_mixins.scss",
    "src/assets/styles/main.scss",
    "src/components/ExampleComponent.js",
    "src/views/Home.js",
)

# Template name -> output file name
TAILWIND_FILES: dict[str, str] = {
    "tailwind.config.js.j2": "tailwind.config.js",
    "postcss.config.cjs.j2": "postcss.config.cjs",
}

ENTRY_FILES: dict[str, str] = {
    "src/main.js.j2": "src/main.js",
    "src/style.css.j2": "src/style.css",
}

HTML_SHELL: tuple[str, str] = ("index.html.j2", "index.html")

VITE_CONFIG: tuple[str, str] = ("vite.config.js.j2", "vite.config.js")


def build_context(config: ProjectConfig) -> dict[str, Any]:
    """Build the Jinja2 template context from the project config."""
    return {
        "project_name": config.project_name,
        "host": config.host,
        "port": config.port,
    }


class TemplateWriter:
    """Writes the configuration files, directory tree and source stubs."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def write_all(
        self,
        project_root: Path,
        config: ProjectConfig,
        *,
        include_vite_config: bool = False,
    ) -> list[Path]:
        """Write the full file set for one project.

        Args:
            project_root: Root of the Vite project created by ``npm create``.
            config: Validated project configuration.
            include_vite_config: Also write ``vite.config.js`` (deploy profile).

        Returns:
            Every file written, in write order.
        """
        context = build_context(config)
        written: list[Path] = []

        console.print("Configuring Tailwind CSS and PostCSS...")
        written += await self._render_map(project_root, TAILWIND_FILES, context)

        console.print("Creating default project directory structure...")
        await self.create_directories(project_root)
        written += await self.write_placeholders(project_root)

        console.print("Setting up project entry files...")
        written += await self._render_map(project_root, ENTRY_FILES, context)

        console.print("Updating index.html...")
        template_name, output_name = HTML_SHELL
        written.append(
            await self.renderer.render_to_file(
                template_name, project_root / output_name, context
            )
        )

        if include_vite_config:
            console.print("Writing Vite configuration...")
            template_name, output_name = VITE_CONFIG
            written.append(
                await self.renderer.render_to_file(
                    template_name, project_root / output_name, context
                )
            )

        return written

    async def create_directories(self, project_root: Path) -> list[Path]:
        """Create the asset/component/view tree; existing directories are fine."""
        return [
            await asyncio.to_thread(ensure_dir, project_root / d)
            for d in DIRECTORIES
        ]

    async def write_placeholders(self, project_root: Path) -> list[Path]:
        """Truncate (or create) the empty placeholder source files."""
        written: list[Path] = []
        for rel in PLACEHOLDER_FILES:
            path = project_root / rel
            await asyncio.to_thread(write_text, path, "")
            written.append(path)
        return written

    async def _render_map(
        self, project_root: Path, files: dict[str, str], context: dict[str, Any]
    ) -> list[Path]:
        return [
            await self.renderer.render_to_file(
                template_name, project_root / output_name, context
            )
            for template_name, output_name in files.items()
        ]
