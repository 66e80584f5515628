"""vitegen scaffolder -- generates Vite front-end project skeletons.

Drives ``npm`` to create a Vite project, installs Bootstrap and Tailwind CSS,
writes the configuration and source stubs, patches ``package.json`` and,
for the ``deploy`` profile, adds a GitHub Pages workflow.

Quick usage::

    from vitegen.config import Profile, load_config
    from vitegen.scaffolder import ProjectGenerator

    config = load_config("project.json", Profile.BASIC)
    generator = ProjectGenerator(config, Profile.BASIC)
    project_path = await generator.generate("/tmp/output")
"""

from vitegen.scaffolder.deploy_gen import DeploymentPublisher
from vitegen.scaffolder.files_gen import TemplateWriter
from vitegen.scaffolder.generator import ProjectGenerator
from vitegen.scaffolder.installer import ScaffoldInstaller
from vitegen.scaffolder.manifest import ManifestPatcher
from vitegen.scaffolder.runner import CommandRunner
from vitegen.scaffolder.templates import TemplateRenderer

__all__ = [
    "CommandRunner",
    "DeploymentPublisher",
    "ManifestPatcher",
    "ProjectGenerator",
    "ScaffoldInstaller",
    "TemplateRenderer",
    "TemplateWriter",
]
