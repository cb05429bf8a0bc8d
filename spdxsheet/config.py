"""Configuration helpers for spdxsheet.

Resolves the working directory used for log files and loads sheet schemas
from YAML, validating the payload with pydantic before building the frozen
``SheetSchema``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .schema import ColumnSpec, ScalarKind, SheetSchema

HOME_ENV = "SPDXSHEET_HOME"
DEFAULT_HOME = Path.home() / "SPDXSheets"


def resolve_home(home: str | os.PathLike[str] | None = None) -> Path:
    """Return the spdxsheet home, defaulting to $SPDXSHEET_HOME or ~/SPDXSheets."""

    if home is None:
        env_value = os.environ.get(HOME_ENV)
        base = Path(env_value) if env_value else DEFAULT_HOME
    else:
        base = Path(home)
    return base.expanduser().resolve()


def log_dir(home: str | os.PathLike[str] | None = None) -> Path:
    """Return the log directory, creating it when missing."""

    target = resolve_home(home) / "logs"
    target.mkdir(parents=True, exist_ok=True)
    return target


class ColumnConfig(BaseModel):
    """One column entry of a schema YAML file."""

    model_config = ConfigDict(extra="forbid")

    name: str
    required: bool = True
    kind: ScalarKind = ScalarKind.STRING


class SchemaConfig(BaseModel):
    """Complete schema file model."""

    model_config = ConfigDict(extra="forbid")

    title: str
    columns: List[ColumnConfig] = Field(min_length=1)
    supported_versions: List[str] = Field(min_length=1)
    presence_column: str
    current_version: Optional[str] = None
    version_column: Optional[str] = None
    list_columns: List[str] = Field(default_factory=list)

    def to_schema(self) -> SheetSchema:
        return SheetSchema(
            title=self.title,
            columns=tuple(
                ColumnSpec(name=col.name, required=col.required, kind=col.kind)
                for col in self.columns
            ),
            supported_versions=tuple(self.supported_versions),
            presence_column=self.presence_column,
            current_version=self.current_version,
            version_column=self.version_column,
            list_columns=tuple(self.list_columns),
        )


def load_schema(path: str | Path) -> SheetSchema:
    """Load a sheet schema from a YAML file.

    Raises:
        ConfigError: When the file is missing or its content is not a valid schema.
    """

    schema_path = Path(path)
    if not schema_path.exists():
        raise ConfigError(f"Schema file not found: {schema_path}")
    with schema_path.open("r", encoding="utf-8") as fh:
        payload = yaml.safe_load(fh)
    if not isinstance(payload, dict):
        raise ConfigError("Invalid schema YAML structure (expected mapping)")
    try:
        return SchemaConfig.model_validate(payload).to_schema()
    except ValidationError as exc:
        raise ConfigError(f"Invalid schema file {schema_path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(f"Inconsistent schema file {schema_path}: {exc}") from exc
