"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MARKSHARE_"


class Settings(BaseModel):
    app_name:      str = "markshare"
    theme:         str = Field(default="light", pattern="^(light|dark|github|sepia)$", description="Theme stylesheet")
    themes_dir:    Optional[str] = Field(default=None, description="Directory searched for <theme>.css before the bundled themes")
    output_dir:    str = Field(default="dist", description="Directory for exported documents")
    output_format: str = Field(default="html", pattern="^(html|pdf|png)$", description="html, pdf or png")
    max_workers:   int = Field(default=1, ge=1, description="Worker threads for conversation rendering")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MARKSHARE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
