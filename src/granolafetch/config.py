"""Configuration loading and defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


DEFAULT_CREDENTIALS_PATH = Path.home() / "Library/Application Support/Granola/supabase.json"
_DEFAULT_CONFIG_DIR = Path.home() / ".config" / "granolafetch"
_DEFAULT_CONFIG_PATH = _DEFAULT_CONFIG_DIR / "config.yaml"

DEFAULT_API_BASE_URL = "https://api.granola.ai"
DEFAULT_CLIENT_VERSION = "5.354.0"

# Documents scanned when looking up notes by id. Older documents report no notes.
NOTES_LOOKUP_LIMIT = 100
# Recent documents scanned when looking for someone's latest 1:1.
ONE_ON_ONE_WINDOW = 50
DEFAULT_LIMIT = 20

_INT_KEYS = ("notes_lookup_limit", "one_on_one_window", "default_limit")


@dataclass
class Config:
    credentials_path: Path = field(default_factory=lambda: DEFAULT_CREDENTIALS_PATH)
    api_base_url: str = DEFAULT_API_BASE_URL
    client_version: str = DEFAULT_CLIENT_VERSION
    timeout: float | None = None
    notes_lookup_limit: int = NOTES_LOOKUP_LIMIT
    one_on_one_window: int = ONE_ON_ONE_WINDOW
    default_limit: int = DEFAULT_LIMIT


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML.

    An explicit path must exist. When no path is given and the default file is
    absent, every setting falls back to its default.
    """
    if config_path is None:
        path = _DEFAULT_CONFIG_PATH
        if not path.exists():
            return Config()
    else:
        path = Path(config_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text())
    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config file: {path}")

    kwargs: dict = {}
    if "credentials_path" in raw:
        kwargs["credentials_path"] = Path(raw["credentials_path"]).expanduser()
    if "api_base_url" in raw:
        kwargs["api_base_url"] = str(raw["api_base_url"]).rstrip("/")
    if "client_version" in raw:
        kwargs["client_version"] = str(raw["client_version"])
    if "timeout" in raw:
        timeout = raw["timeout"]
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float))):
            raise ValueError("'timeout' must be a number of seconds")
        kwargs["timeout"] = timeout
    for key in _INT_KEYS:
        if key in raw:
            value = raw[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"'{key}' must be a positive integer")
            kwargs[key] = value

    return Config(**kwargs)
