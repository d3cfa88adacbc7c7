"""Configuration management for the namespace resolver."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from nsresolver.exceptions import ConfigError

RESOLVER_DIR = ".nsresolver"
CONFIG_FILE = "config.json"
MANIFEST_FILE = "composer.json"


class ResolverConfig(BaseModel):
    """Resolver settings.

    Fields are snake_case in Python and camelCase on disk, so files written
    for the editor extension (``autoSort``, ``sortNatural``...) load as-is.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    auto_sort: bool = False
    sort_alphabetically: bool = False
    sort_natural: bool = False
    leading_separator: bool = True
    show_message_on_status_bar: bool = False
    exclude: str = "**/node_modules/**"

    def get(self, key: str) -> Any:
        """Read a setting by its snake_case or camelCase name."""
        field = _field_name(key)
        if field is None:
            raise KeyError(f"Invalid config key: {key}")
        return getattr(self, field)


def _field_name(key: str) -> str | None:
    for name, info in ResolverConfig.model_fields.items():
        if key in (name, info.alias):
            return name
    return None


def find_project_root(start: Path | None = None) -> Path | None:
    """Walk up from `start` looking for a .nsresolver directory."""
    current = (start or Path.cwd()).resolve()
    while current != current.parent:
        if (current / RESOLVER_DIR).is_dir():
            return current
        current = current.parent
    if (current / RESOLVER_DIR).is_dir():
        return current
    return None


def get_resolver_dir(root: Path) -> Path:
    """Get the .nsresolver directory for a project root."""
    return root / RESOLVER_DIR


def load_config(root: Path) -> ResolverConfig:
    """Load configuration from .nsresolver/config.json."""
    config_path = get_resolver_dir(root) / CONFIG_FILE
    if config_path.exists():
        try:
            data = json.loads(config_path.read_text())
            return ResolverConfig(**data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
    return ResolverConfig()


def save_config(root: Path, config: ResolverConfig) -> None:
    """Save configuration to .nsresolver/config.json."""
    rs_dir = get_resolver_dir(root)
    rs_dir.mkdir(parents=True, exist_ok=True)
    config_path = rs_dir / CONFIG_FILE
    config_path.write_text(json.dumps(config.model_dump(by_alias=True), indent=2))


def set_config_value(config: ResolverConfig, key: str, value: Any) -> ResolverConfig:
    """Set a config value by either key spelling (e.g., 'autoSort' or 'auto_sort')."""
    field = _field_name(key)
    if field is None:
        raise KeyError(f"Invalid config key: {key}")
    data = config.model_dump()
    data[field] = value
    try:
        return ResolverConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid value for {key}: {value!r}") from e
