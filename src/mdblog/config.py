"""mdblog settings: where posts live, where the export goes, and how the feed reads"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDBLOG_"


class Settings(BaseModel):
    """Blog build settings.

    Paths are kept as strings and resolved by the caller against the working
    directory. The site_* and feed_* fields fill the RSS channel; post links are
    built as ``<site_url>/blog/<id>``.
    """
    app_name: str = "mdblog"

    # corpus and export locations
    posts_dir:  str = Field(default="content/posts", description="Directory of .md/.mdx posts")
    output_dir: str = Field(default="public",        description="Receives posts.json, posts/<id>.json and rss.xml")

    # RSS channel
    site_url:         str = Field(default="http://localhost:8080", description="Absolute site URL used in feed links")
    site_title:       str = Field(default="mdblog", description="Channel title")
    site_description: str = Field(default="",       description="Channel description")
    feed_language:    str = Field(default="en-us",  description="Channel language tag")
    excerpt_length:   int = Field(default=200, ge=1, description="Max characters of an item description")

    # logging
    verbose:  bool = Field(default=False, description="Debug-level mdblog logs")
    log_json: bool = Field(default=False, description="Render logs as JSON lines")


def read_config_file(path: Path) -> dict[str, Any]:
    """Mapping from a YAML settings file; empty when the file does not exist."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")
    return data


def env_settings() -> dict[str, str]:
    """Non-empty MDBLOG_<FIELD> variables keyed by field name."""
    values = {name: os.getenv(f"{ENV_PREFIX}{name.upper()}") for name in Settings.model_fields}
    return {name: value for name, value in values.items() if value}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Settings from config.yaml, then the environment, then non-None overrides (CLI flags)."""
    data = read_config_file(Path(CONFIG_FILE))
    data.update(env_settings())
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
