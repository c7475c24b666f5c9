"""
Config file sources: search paths, YAML/JSON loading, and deep merging.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from pigeon.config.settings import ResolverSettings
from pigeon.credentials.models import SkippedSource
from pigeon.exceptions import ConfigFileError

logger = logging.getLogger(__name__)


def candidate_paths(
    config_file: str | Path | None = None,
    settings: ResolverSettings | None = None,
) -> list[Path]:
    """
    Config files to read, in ascending precedence.

    An explicit ``config_file`` is the only candidate; otherwise the
    project-level then user-level defaults from ``settings``.
    """
    if config_file:
        return [Path(config_file).expanduser().resolve()]
    settings = settings or ResolverSettings.from_env()
    return settings.search_paths()


def _parse(path: Path, text: str) -> Any:
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


async def read_config_file(path: str | Path) -> dict[str, Any]:
    """
    Read and parse one config file, raising on any problem.

    JSON is used for ``.json`` files, YAML for everything else. An empty
    YAML document loads as ``{}``.

    Raises:
        ConfigFileError: missing or unreadable file, invalid syntax, or a
            root value that is not a mapping.
    """
    path = Path(path)
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigFileError(path, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(path, str(e)) from e

    try:
        data = _parse(path, text)
    except (yaml.YAMLError, ValueError, TypeError, AttributeError, RecursionError) as e:
        # PyYAML constructors raise plain ValueError/AttributeError on bad tags
        raise ConfigFileError(path, f"invalid syntax: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError(path, f"expected a mapping, got {type(data).__name__}")
    return data


async def load_file(path: str | Path, skipped: list[SkippedSource] | None = None) -> dict[str, Any]:
    """Best-effort ``read_config_file``: any failure yields ``{}``."""
    try:
        return await read_config_file(path)
    except ConfigFileError as e:
        logger.debug("Skipping config file %s: %s", e.path, e.reason)
        if skipped is not None:
            skipped.append(SkippedSource(path=e.path, reason=e.reason))
        return {}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Recursively merge ``override`` into a copy of ``base``.

    Nested dicts present on both sides are merged key by key; any other
    override value (lists included) replaces the base value outright.
    """
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


async def load_config_files(
    candidates: list[Path],
    skipped: list[SkippedSource] | None = None,
) -> dict[str, Any]:
    """Load candidates one at a time, later files overriding earlier ones."""
    merged: dict[str, Any] = {}
    for candidate in candidates:
        data = await load_file(candidate, skipped)
        if data:
            logger.debug("Loaded config file %s", candidate)
            merged = deep_merge(merged, data)
    return merged
