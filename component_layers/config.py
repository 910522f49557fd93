"""Project config file loading and CLI override merging."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from component_layers.models import CheckConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "component-layers.json"


class ConfigError(ValueError):
    """The config file is unreadable or does not match the schema."""


class ConfigFile(BaseModel):
    """Schema of ``component-layers.json``. Every key is optional."""

    model_config = ConfigDict(extra="forbid")

    pages_dir: Optional[str] = None
    components_dir: Optional[str] = None
    extensions: Optional[list[str]] = None
    index_name: Optional[str] = None
    alias_prefix: Optional[str] = None
    alias_namespaces: Optional[list[str]] = None
    style_extensions: Optional[list[str]] = None
    ignore_patterns: Optional[list[str]] = None
    test_patterns: Optional[list[str]] = None
    shared_dirs: Optional[list[str]] = None
    allow_unused: Optional[list[str]] = None
    max_depth: Optional[int] = None
    max_workers: Optional[int] = None


_TUPLE_FIELDS = {"extensions", "alias_namespaces", "style_extensions", "shared_dirs"}


def read_config_file(path: Path) -> dict:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    try:
        parsed = ConfigFile(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
    return parsed.model_dump(exclude_none=True)


def load_config(
    project_root: Path,
    config_path: Path | None = None,
    **overrides,
) -> CheckConfig:
    """Build a CheckConfig from defaults, the config file and overrides.

    An explicit ``config_path`` must exist; the default file in the project
    root is optional. Overrides set to None are ignored.
    """
    values: dict = {}

    if config_path is None:
        default = Path(project_root) / CONFIG_FILENAME
        if default.is_file():
            config_path = default
    elif not Path(config_path).is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    if config_path is not None:
        logger.info("loading config from %s", config_path)
        values.update(read_config_file(Path(config_path)))

    values.update({k: v for k, v in overrides.items() if v is not None})

    for key in _TUPLE_FIELDS & values.keys():
        values[key] = tuple(values[key])

    return CheckConfig(project_root=Path(project_root), **values)
