"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:             str  = "udiff"
    engine:               str  = Field(default="difflib", pattern="^(difflib|none)$", description="Line diff engine; none emits headers only")
    encoding:             str  = Field(default="utf-8",   description="Text encoding used to read input files")
    validate_edit_script: bool = Field(default=True,      description="Reject edit scripts with out-of-order line numbers")
    log_level:            str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL|debug|info|warning|error|critical)$", description="Level for the udiff logger")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Parse a YAML mapping of Settings fields; a missing or empty file gives {}."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def _env_values() -> dict[str, str]:
    """Non-empty UDIFF_<FIELD> variables keyed by field name; pydantic coerces the strings."""
    values = {name: os.getenv(f"UDIFF_{name.upper()}") for name in Settings.model_fields}
    return {name: val for name, val in values.items() if val}


def load_config(overrides: dict[str, Any] = None, config_file: Path = Path(CONFIG_FILE)) -> Settings:
    """Build Settings from config_file, then UDIFF_<FIELD> env vars, then non-None overrides."""
    data = {**_read_config_file(config_file), **_env_values()}
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
