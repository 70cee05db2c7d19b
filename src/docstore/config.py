"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    max_id_attempts: int = Field(default=100, ge=1, description="Id candidates drawn before giving up on a save")
    log_level:       str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Minimum log level")
    log_file:        Optional[str] = Field(default=None, description="Optional log file path; stderr only when unset")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
