"""GitHub Pages publishing setup for the ``deploy`` profile.

Installs ``gh-pages`` as a dev dependency and writes a GitHub Actions
workflow that builds the site on every push to ``main``.  The workflow is
static: it is identical for every project.
"""

from __future__ import annotations

from pathlib import Path

from vitegen.utils import console

from .runner import CommandRunner
from .templates import TemplateRenderer

DEPLOY_HELPER = "gh-pages"

WORKFLOW_TEMPLATE = "workflows/deploy.yml.j2"
WORKFLOW_PATH = Path(".github") / "workflows" / "deploy.yml"


class DeploymentPublisher:
    """Adds the deployment helper and the CI workflow to a project."""

    def __init__(self, runner: CommandRunner, renderer: TemplateRenderer) -> None:
        self.runner = runner
        self.renderer = renderer

    async def install_helper(self, project_root: Path) -> None:
        console.print(f"Installing {DEPLOY_HELPER}...")
        await self.runner.run(
            f"npm install {DEPLOY_HELPER} --save-dev",
            f"Failed to install {DEPLOY_HELPER}.",
            cwd=project_root,
        )

    async def write_workflow(self, project_root: Path) -> Path:
        """Write ``.github/workflows/deploy.yml``, creating its parents."""
        console.print("Creating GitHub Actions workflow...")
        return await self.renderer.render_to_file(
            WORKFLOW_TEMPLATE, project_root / WORKFLOW_PATH, {}
        )

    async def publish(self, project_root: Path) -> Path:
        await self.install_helper(project_root)
        return await self.write_workflow(project_root)
