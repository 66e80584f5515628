"""Fail-fast wrapper around :func:`vitegen.utils.run_command`.

Every external command of the scaffolding pipeline goes through
``CommandRunner.run``.  Commands inherit the terminal's streams so npm's
progress output stays visible, and any failure surfaces as a
``CommandExecutionError`` carrying the step's own message.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from vitegen.errors import CommandExecutionError
from vitegen.utils import console, run_command


class CommandRunner:
    """Runs external commands one at a time, raising on the first failure.

    Attributes:
        history: Every command issued, in order, with its working directory.
    """

    def __init__(self) -> None:
        self.history: list[tuple[str, Path]] = []

    async def run(self, command: str, error_message: str, cwd: Path) -> None:
        """Run *command* in *cwd* and wait for it to finish.

        No timeout is applied; a hung command blocks the pipeline.

        Raises:
            CommandExecutionError: Non-zero exit status or spawn failure.
        """
        self.history.append((command, cwd))
        console.print(f"[dim]$ {escape(command)}[/dim]", highlight=False)
        try:
            returncode = await run_command(command, cwd=cwd)
        except OSError as exc:
            raise CommandExecutionError(error_message, command, detail=str(exc)) from exc

        if returncode != 0:
            raise CommandExecutionError(error_message, command, returncode=returncode)
