"""Shared utility functions for vitegen.

Provides async command execution, JSON I/O, file-system helpers, Rich-based
console reporting, and a local port probe used by the pre-flight checks.
"""

from __future__ import annotations

import asyncio
import json
import socket
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True, soft_wrap=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: str, cwd: str | Path | None = None) -> int:
    """Run a shell command with the parent's stdin, stdout and stderr.

    The child's progress output is visible live.  There is no timeout: a hung
    command blocks until it is interrupted.

    Returns:
        The command's exit status.

    Raises:
        OSError: The process could not be spawned (e.g. *cwd* does not exist).
    """
    process = await asyncio.create_subprocess_shell(
        cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Key order is preserved as it appears in the file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid UTF-8 JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON with a trailing newline.

    Parent directories are created automatically.  The write itself is
    performed in a thread-pool executor to avoid blocking the event loop.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: Path, content: str) -> None:
    """Create parent dirs and write *content*, replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STEP_NAMES: dict[int, str] = {
    1: "CREATE",
    2: "INSTALL",
    3: "LIBRARIES",
    4: "TAILWIND",
    5: "TEMPLATES",
    6: "MANIFEST",
    7: "DEPLOY",
}


def print_step_header(step: int) -> None:
    """Print a full-width rule announcing a pipeline step."""
    label = STEP_NAMES.get(step, "?")
    console.print()
    console.print(Rule(f"[bold cyan] Step {step}: {label} [/bold cyan]", style="cyan"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Keys and values are printed literally; square brackets in project names
    or paths are not treated as Rich markup.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", highlight=False)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]", highlight=False)


# ---------------------------------------------------------------------------
# Port helpers
# ---------------------------------------------------------------------------


async def check_port_available(port: int, host: str = "127.0.0.1") -> bool:
    """Check whether a TCP port is free on *host*.

    Attempts a ``connect`` to host:port. If the connection is *refused* the
    port is available; if it *succeeds* something is already listening.
    """
    loop = asyncio.get_running_loop()

    def _probe() -> bool:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.settimeout(1)
        try:
            # connect_ex returns 0 on success (port in use), nonzero on failure (port free)
            return sock.connect_ex((host, port)) != 0
        except OSError:
            return True
        finally:
            sock.close()

    return await loop.run_in_executor(None, _probe)
