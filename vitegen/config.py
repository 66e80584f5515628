"""Project configuration for vitegen.

The JSON file handed to the CLI is validated into an immutable
``ProjectConfig`` (or ``DeployProjectConfig`` for the ``deploy`` profile)
before any command runs or any file is written. Validation is strict and
all-or-nothing: there are no defaults for required fields.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from vitegen.errors import ConfigParseError, ConfigReadError, ConfigValidationError


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Settings shared by every profile.

    Keys in the JSON file use camelCase (``projectName``); attributes use
    snake_case. Empty strings and a zero port are rejected the same way as
    missing keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    project_name: str = Field(..., alias="projectName", min_length=1)
    port: int = Field(..., ge=1, le=65535, description="Dev server port")
    host: str = Field(..., min_length=1, description="Dev server host")

    @field_validator("port", mode="before")
    @classmethod
    def _port_is_not_bool(cls, value: Any) -> Any:
        # JSON true/false would otherwise coerce to 1/0
        if isinstance(value, bool):
            raise ValueError("port must be a number, not a boolean")
        return value

    @property
    def dev_command(self) -> str:
        """The ``npm run dev`` script bound to the configured host and port."""
        return f"vite --host {self.host} --port {self.port}"

    @property
    def dev_url(self) -> str:
        return f"http://{self.host}:{self.port}/"


class DeployProjectConfig(ProjectConfig):
    """Settings for the ``deploy`` profile (GitHub Pages publishing)."""

    github_username: str = Field(..., alias="githubUsername", min_length=1)

    @property
    def homepage_url(self) -> str:
        """GitHub Pages URL written to ``package.json`` as ``homepage``."""
        return f"https://{self.github_username}.github.io/"


class Profile(str, Enum):
    """Which flavour of project to generate."""

    BASIC = "basic"
    DEPLOY = "deploy"

    @property
    def config_model(self) -> type[ProjectConfig]:
        if self is Profile.DEPLOY:
            return DeployProjectConfig
        return ProjectConfig


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def load_config(path: str | Path, profile: Profile = Profile.BASIC) -> ProjectConfig:
    """Read, parse and validate a project configuration file.

    Args:
        path: Path to the JSON configuration file.
        profile: Profile whose required fields are enforced.

    Returns:
        A frozen ``ProjectConfig`` (``DeployProjectConfig`` for
        ``Profile.DEPLOY``).

    Raises:
        ConfigReadError: The file is missing or unreadable.
        ConfigParseError: The contents are not a JSON object.
        ConfigValidationError: A required field is missing or falsy.
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(
            f"Failed to read the configuration file {file_path}: {exc}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise ConfigParseError(
            f"Failed to parse the configuration file {file_path}: {exc}"
        ) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(
            f"Failed to parse the configuration file {file_path}: {exc}"
        ) from exc

    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Failed to parse the configuration file {file_path}: "
            f"expected a JSON object, got {type(data).__name__}"
        )

    return validate_config(data, profile)


def validate_config(
    data: dict[str, Any], profile: Profile = Profile.BASIC
) -> ProjectConfig:
    """Validate an already-parsed configuration mapping.

    Raises:
        ConfigValidationError: Listing every offending field by its JSON key.
    """
    model = profile.config_model
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ConfigValidationError(_invalid_fields(exc)) from exc


def _invalid_fields(exc: ValidationError) -> list[str]:
    """Return the JSON keys named in a validation error, in field order."""
    fields: list[str] = []
    for error in exc.errors():
        loc = error.get("loc") or ("<root>",)
        name = str(loc[0])
        if name not in fields:
            fields.append(name)
    return fields
