"""Exception hierarchy for vitegen.

Library code raises these; only the CLI entry point in ``vitegen.pipeline``
turns them into a diagnostic line and a non-zero exit code.
"""

from __future__ import annotations


class VitegenError(Exception):
    """Base class for every error the scaffolding pipeline raises."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigError(VitegenError):
    """Raised when the project configuration file cannot be used."""


class ConfigReadError(ConfigError):
    """The configuration file could not be read (missing, unreadable)."""


class ConfigParseError(ConfigError):
    """The configuration file is not a well-formed JSON object."""


class ConfigValidationError(ConfigError):
    """One or more required configuration fields are missing or falsy."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(
            "Invalid configuration. Please provide "
            + ", ".join(fields)
            + "."
        )


# ---------------------------------------------------------------------------
# External commands
# ---------------------------------------------------------------------------


class CommandExecutionError(VitegenError):
    """Raised when an external command exits non-zero or cannot be spawned."""

    def __init__(
        self,
        step_message: str,
        command: str,
        returncode: int | None = None,
        detail: str = "",
    ) -> None:
        self.step_message = step_message
        self.command = command
        self.returncode = returncode
        if returncode is not None:
            reason = f"`{command}` exited with status {returncode}"
        else:
            reason = f"`{command}` could not be started: {detail}"
        super().__init__(f"{step_message} {reason}")


# ---------------------------------------------------------------------------
# Package manifest
# ---------------------------------------------------------------------------


class ManifestError(VitegenError):
    """Raised when the generated ``package.json`` cannot be patched."""


class ManifestReadError(ManifestError):
    """``package.json`` could not be read."""


class ManifestParseError(ManifestError):
    """``package.json`` is not a well-formed JSON object."""
