"""Layered configuration loading: defaults < YAML < environment < CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import AppConfig, EnvOverrides

_SECTIONS = ("tmdb", "http", "logging", "appwrite", "search")
_TOP_LEVEL_KEYS = ("app_name", "environment")

# Flat keys (env vars, CLI flags) and where they live in the sectioned shape
_FLAT_KEYS: dict[str, tuple[str, str]] = {
    "tmdb_api_key": ("tmdb", "api_key"),
    "tmdb_base_url": ("tmdb", "base_url"),
    "http_timeout_seconds": ("http", "timeout_seconds"),
    "http_user_agent": ("http", "user_agent"),
    "log_level": ("logging", "level"),
    "log_format": ("logging", "format"),
    "appwrite_endpoint": ("appwrite", "endpoint"),
    "appwrite_project_id": ("appwrite", "project_id"),
    "appwrite_database_id": ("appwrite", "database_id"),
    "appwrite_collection_id": ("appwrite", "collection_id"),
    "appwrite_api_key": ("appwrite", "api_key"),
    "debounce_ms": ("search", "debounce_ms"),
    "trending_limit": ("search", "trending_limit"),
}


def _merged(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``override`` laid over ``base``.

    Nested mappings merge key by key; any other value replaces the old one.
    """
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = _merged(current, value)
        else:
            result[key] = value
    return result


def _sectioned(layer: Mapping[str, Any]) -> dict[str, Any]:
    """Bring one layer into the sectioned shape ``AppConfig`` validates.

    A layer may mix both spellings, e.g. ``{"search": {...}}`` from YAML and
    ``{"debounce_ms": 300}`` from the environment. Unknown keys are dropped.
    """
    out: dict[str, Any] = {
        section: dict(layer[section])
        for section in _SECTIONS
        if isinstance(layer.get(section), Mapping)
    }
    out.update({key: layer[key] for key in _TOP_LEVEL_KEYS if key in layer})

    for flat_key, (section, key) in _FLAT_KEYS.items():
        if flat_key in layer:
            out.setdefault(section, {})[key] = layer[flat_key]
    return out


def _require_file(path: Path) -> Path:
    if not path.exists():
        raise FileNotFoundError(path)
    return path


def _read_yaml(path: Path) -> dict[str, Any]:
    parsed = yaml.safe_load(_require_file(path).read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(parsed).__name__}")
    return parsed


def load_config(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AppConfig:
    """Build the validated config from every layer.

    Precedence, lowest first: built-in defaults, the YAML file, ``REELSCOUT_*``
    environment variables (a ``.env`` file only fills variables that are not
    already set), CLI overrides.

    Nothing is written to disk. A missing TMDB token is not an error here;
    ``create_app`` refuses to start without one.

    Raises:
        FileNotFoundError: ``config_path`` or ``dotenv_path`` does not exist.
        ValueError: the YAML file is not a mapping.
        pydantic.ValidationError: the merged values are invalid.
    """
    if dotenv_path is not None:
        load_dotenv(_require_file(dotenv_path), override=False)

    layers: list[Mapping[str, Any]] = [DEFAULT_CONFIG]
    if config_path is not None:
        layers.append(_read_yaml(config_path))
    layers.append(EnvOverrides().to_update_dict())
    layers.append(cli_overrides or {})

    merged: dict[str, Any] = {}
    for layer in layers:
        merged = _merged(merged, _sectioned(layer))

    return AppConfig.model_validate(merged)
