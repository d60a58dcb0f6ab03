from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .config_schema import AppConfig
from .errors import ConfigError


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp)
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML in {path} must be a mapping/object")
    return data


def load_config(path: str | Path) -> AppConfig:
    """
    Load a YAML config file and validate it into a typed AppConfig.

    Include/exclude patterns are compiled during validation, so a bad pattern
    surfaces here as a ConfigError before any post is looked at.
    """
    p = Path(path)
    data = _read_yaml_mapping(p)

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        details = "\n".join(_describe_errors(e))
        raise ConfigError(f"Invalid configuration in {p}:\n{details}") from e


def config_sha256(config: AppConfig) -> str:
    """Stable hash of the effective config, recorded in run logs."""
    canonical = json.dumps(
        config.model_dump(mode="json"),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def _describe_errors(err: ValidationError) -> list[str]:
    out: list[str] = []
    for item in err.errors():
        where = ".".join(str(part) for part in item.get("loc", ())) or "<root>"
        out.append(f"- {where}: {item.get('msg', 'invalid value')}")
    return out
