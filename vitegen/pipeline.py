"""vitegen pipeline orchestrator and CLI.

Loads the project configuration, runs the pre-flight checks, drives the
scaffolder and prints the final summary.  ``main`` is the single place where
errors become a diagnostic line and an exit code.

Usage::

    vitegen project.json
    vitegen project.json --profile deploy --output-dir ~/code
    python -m vitegen project.json
"""

from __future__ import annotations

import argparse
import asyncio
import shutil
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.markup import escape
from rich.panel import Panel

from vitegen.config import DeployProjectConfig, Profile, ProjectConfig, load_config
from vitegen.errors import VitegenError
from vitegen.scaffolder import ProjectGenerator
from vitegen.utils import (
    check_port_available,
    console,
    format_duration,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Scaffolds one project from a validated configuration.

    Attributes:
        config: Validated project configuration.
        profile: ``basic`` or ``deploy``.
        output_dir: Directory the project folder is created in.
        state: Run metadata (timestamps, project path, warnings).
    """

    def __init__(
        self,
        config: ProjectConfig,
        profile: Profile = Profile.BASIC,
        output_dir: str | Path = ".",
    ) -> None:
        self.config = config
        self.profile = profile
        self.output_dir = Path(output_dir)
        self.generator = ProjectGenerator(config, profile)
        self.state: dict[str, Any] = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "warnings": [],
            "success": False,
        }

    @property
    def project_root(self) -> Path:
        return self.output_dir / self.config.project_name

    # ------------------------------------------------------------------
    # Pre-flight checks
    # ------------------------------------------------------------------

    async def _preflight(self) -> list[str]:
        """Collect non-fatal warnings before anything is created.

        * ``npm`` must be on ``PATH`` for any step to succeed.
        * An existing project directory will be partially overwritten.
        * A busy port means ``npm run dev`` will not bind.
        """
        console.print(Panel("[bold]Running pre-flight checks...[/bold]", style="cyan"))
        warnings: list[str] = []

        if shutil.which("npm") is None:
            warnings.append("npm was not found on PATH; the scaffolding commands will fail.")

        if self.project_root.exists():
            warnings.append(
                f"{self.project_root} already exists; generated files will overwrite "
                f"existing ones."
            )

        if not await check_port_available(self.config.port, self.config.host):
            warnings.append(
                f"Port {self.config.port} is already in use on {self.config.host}."
            )

        for warning in warnings:
            print_warning(f"  {warning}")
        if not warnings:
            console.print("  [green]+[/green] All checks passed")

        self.state["warnings"] = warnings
        return warnings

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    async def run(self) -> Path:
        """Run the whole pipeline.

        Returns:
            Path to the generated project.

        Raises:
            VitegenError: On the first failing step.
        """
        start = time.monotonic()
        await self._preflight()

        project_root = await self.generator.generate(self.output_dir)

        self.state.update(
            project_root=str(project_root),
            finished_at=datetime.now(timezone.utc).isoformat(),
            elapsed=format_duration(time.monotonic() - start),
            success=True,
        )
        self._print_summary()
        return project_root

    def _print_summary(self) -> None:
        console.print()
        print_success("Project setup completed successfully.")

        summary = {
            "Project": self.config.project_name,
            "Profile": self.profile.value,
            "Location": self.state["project_root"],
            "Dev server": self.config.dev_url,
        }
        if isinstance(self.config, DeployProjectConfig):
            summary["Homepage"] = self.config.homepage_url
        summary["Files written"] = str(len(self.generator.written))
        summary["Commands run"] = str(len(self.generator.runner.history))
        summary["Elapsed"] = self.state["elapsed"]
        print_summary_table(summary, title="vitegen")

        console.print("Next steps:")
        for i, step in enumerate(next_steps(self.config, self.profile), start=1):
            console.print(f"{i}. {escape(step)}", highlight=False)


def next_steps(config: ProjectConfig, profile: Profile) -> list[str]:
    """Instructions printed after a successful run."""
    steps = [
        f"Navigate to the project directory: cd {config.project_name}",
        "Start the development server: npm run dev",
    ]
    if profile is Profile.DEPLOY:
        steps.append("Publish to GitHub Pages: npm run deploy (or push to main)")
    steps.append("Open the project in your browser and start developing!")
    return steps


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors like any other failure: one line on stderr, exit 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        print_error(message)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``vitegen`` and ``python -m vitegen``."""
    parser = _ArgumentParser(
        prog="vitegen",
        description="Scaffold a Vite + Tailwind CSS + Bootstrap project from a JSON config",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Config file keys: projectName, host, port (and githubUsername for --profile deploy)\n"
            "\n"
            "Examples:\n"
            "  vitegen project.json\n"
            "  vitegen project.json --profile deploy -o ~/code\n"
        ),
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to the JSON configuration file",
    )
    parser.add_argument(
        "--profile",
        choices=[p.value for p in Profile],
        default=Profile.BASIC.value,
        help="basic: dev setup only; deploy: also GitHub Pages publishing (default: basic)",
    )
    parser.add_argument(
        "--output-dir", "-o",
        default=".",
        help="Directory in which the project folder is created (default: current directory)",
    )

    args = parser.parse_args(argv)
    if not args.config:
        print_error("Please provide a path to the configuration file.")
        sys.exit(1)
    profile = Profile(args.profile)

    try:
        config = load_config(args.config, profile)
        pipeline = Pipeline(config, profile, args.output_dir)
        asyncio.run(pipeline.run())
    except VitegenError as exc:
        print_error(str(exc))
        sys.exit(1)
    except KeyboardInterrupt:
        print_error("Interrupted; the project directory may be incomplete.")
        sys.exit(130)


if __name__ == "__main__":
    main()
