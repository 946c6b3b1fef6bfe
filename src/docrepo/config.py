"""Application configuration: settings schema and docrepo.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "docrepo.yaml"


class Settings(BaseModel):
    app_name:      str  = "docrepo"
    log_level:     str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    content_match: str  = Field(default="prefix", pattern="^(prefix|substring)$",
                                description="How contains_contents values are compared to content")
    author_match:  str  = Field(default="document_id", pattern="^(document_id|author_id)$",
                                description="Field that author_ids prefixes are compared against")
    thread_safe:   bool = Field(default=False, description="Guard repository operations with a lock")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from docrepo.yaml, then DOCREPO_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCREPO_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
