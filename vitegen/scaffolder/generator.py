"""Main scaffolding orchestrator.

Takes a validated ``ProjectConfig`` and produces a Vite + Tailwind CSS +
Bootstrap project under an output directory, optionally wired for GitHub
Pages publishing.  Steps run strictly one after another; the first failure
propagates and later steps never start.  Nothing is rolled back.
"""

from __future__ import annotations

from pathlib import Path

from vitegen.config import DeployProjectConfig, Profile, ProjectConfig
from vitegen.errors import ConfigValidationError
from vitegen.utils import print_step_header

from .deploy_gen import DeploymentPublisher
from .files_gen import TemplateWriter
from .installer import ScaffoldInstaller
from .manifest import ManifestPatcher
from .runner import CommandRunner
from .templates import TemplateRenderer


class ProjectGenerator:
    """Runs the scaffolding steps for one project.

    The project root is passed explicitly to every step after creation; the
    process working directory is never changed.

    Attributes:
        config: The validated project configuration.
        profile: ``basic`` or ``deploy``.
        written: Files written so far, in order.
    """

    def __init__(
        self,
        config: ProjectConfig,
        profile: Profile = Profile.BASIC,
        runner: CommandRunner | None = None,
    ) -> None:
        if profile is Profile.DEPLOY and not isinstance(config, DeployProjectConfig):
            raise ConfigValidationError(["githubUsername"])
        self.config = config
        self.profile = profile
        self.runner = runner or CommandRunner()
        self.renderer = TemplateRenderer()
        self.installer = ScaffoldInstaller(self.runner)
        self.writer = TemplateWriter(self.renderer)
        self.manifest = ManifestPatcher()
        self.publisher = DeploymentPublisher(self.runner, self.renderer)
        self.written: list[Path] = []

    @property
    def deploy(self) -> bool:
        return self.profile is Profile.DEPLOY

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path) -> Path:
        """Generate the complete project.

        Args:
            output_dir: Parent directory in which ``npm create vite`` creates
                the project folder.

        Returns:
            Path to the generated project root.
        """
        output_dir = Path(output_dir)

        # 1. Create the Vite project
        print_step_header(1)
        project_root = await self.installer.create_project(self.config, output_dir)

        # 2. Base dependencies
        print_step_header(2)
        await self.installer.install_dependencies(project_root)

        # 3. Bootstrap, Tailwind CSS, PostCSS, Autoprefixer
        print_step_header(3)
        await self.installer.install_feature_libraries(project_root)

        # 4. tailwind.config.js / postcss.config.js skeletons
        print_step_header(4)
        await self.installer.init_tailwind(project_root)

        # 5. Config files, directory tree, entry points, index.html
        print_step_header(5)
        self.written += await self.writer.write_all(
            project_root, self.config, include_vite_config=self.deploy
        )

        # 6. package.json scripts (and homepage)
        print_step_header(6)
        await self.manifest.patch(project_root, self.config)
        self.written.append(self.manifest.manifest_path(project_root))

        # 7. gh-pages and the CI workflow
        if self.deploy:
            print_step_header(7)
            self.written.append(await self.publisher.publish(project_root))

        return project_root
