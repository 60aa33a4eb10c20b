from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator


class EngineConfig(BaseModel):
    """Settings that shape how failure reports are rendered and logged."""

    model_config = ConfigDict(extra="forbid")

    max_value_length: int | None = Field(default=None, ge=4)
    qualified_type_names: bool = False
    verbose: bool = False
    log_file: str | None = None

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ${VAR} and ${VAR:-default} references.

        Raises ValueError when a variable without a default is not set.
        """
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"log_file references a missing environment variable: {e}") from e


def load_config(path: Path) -> EngineConfig:
    """Load and validate engine settings from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    # An empty file means "all defaults"
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping of settings, got {type(raw).__name__}")

    config = EngineConfig(**raw)

    # Resolve a relative log_file against the settings file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config
