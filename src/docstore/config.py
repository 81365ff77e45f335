"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:   str = "docstore"
    id_policy:  str = Field(default="advance", pattern="^(advance|preserve)$",
                            description="advance: explicit ids push the id counter past them; preserve: counter untouched")
    match_mode: str = Field(default="any", pattern="^(any|all)$",
                            description="any: OR active search filters; all: AND them")
    log_level:  str = Field(default="WARNING", pattern="^(?i:debug|info|warning|error|critical)$",
                            description="Root logging level for the CLI")


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
