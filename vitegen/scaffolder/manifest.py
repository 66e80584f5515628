"""``package.json`` rewriting.

Only the documented fields are touched; everything else, including key
order, comes back out exactly as the JSON parser read it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from vitegen.config import DeployProjectConfig, ProjectConfig
from vitegen.errors import ManifestParseError, ManifestReadError
from vitegen.utils import console, load_json, save_json

MANIFEST_NAME = "package.json"

BUILD_SCRIPT = "vite build"
DEPLOY_SCRIPT = "gh-pages -d dist"


class ManifestPatcher:
    """Sets npm scripts (and the homepage, when deploying) in ``package.json``."""

    def manifest_path(self, project_root: Path) -> Path:
        return project_root / MANIFEST_NAME

    async def patch(self, project_root: Path, config: ProjectConfig) -> dict[str, Any]:
        """Patch the manifest under *project_root* and write it back.

        A ``DeployProjectConfig`` additionally sets the ``build`` and
        ``deploy`` scripts and the ``homepage`` URL.

        Returns:
            The manifest as written.

        Raises:
            ManifestReadError: ``package.json`` cannot be read.
            ManifestParseError: ``package.json`` is not a JSON object.
        """
        console.print("Configuring Vite server...")
        path = self.manifest_path(project_root)
        manifest = self.read(path)
        apply_patch(manifest, config)
        await save_json(manifest, path)
        return manifest

    def read(self, path: Path) -> dict[str, Any]:
        try:
            data = load_json(path)
        except OSError as exc:
            raise ManifestReadError(f"Failed to read {path}: {exc}") from exc
        except ValueError as exc:
            raise ManifestParseError(f"Failed to parse {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestParseError(
                f"Failed to parse {path}: expected a JSON object, got {type(data).__name__}"
            )
        return data


def apply_patch(manifest: dict[str, Any], config: ProjectConfig) -> dict[str, Any]:
    """Mutate *manifest* in place for *config* and return it."""
    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        scripts = {}
        manifest["scripts"] = scripts

    scripts["dev"] = config.dev_command

    if isinstance(config, DeployProjectConfig):
        scripts["build"] = BUILD_SCRIPT
        scripts["deploy"] = DEPLOY_SCRIPT
        manifest["homepage"] = config.homepage_url

    return manifest
