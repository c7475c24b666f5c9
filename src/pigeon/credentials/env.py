"""
Environment sources: dotenv files and PIGEON_<SERVICE>_<FIELD> variables.
"""

from __future__ import annotations

import asyncio
import logging
import os
import re
from pathlib import Path
from typing import Mapping, MutableMapping

from dotenv import dotenv_values, load_dotenv
from dotenv.variables import parse_variables

from pigeon.credentials.models import SkippedSource

logger = logging.getLogger(__name__)

_UNDERSCORE_LETTER = re.compile(r"_([a-z])")

SLACK_SERVICE = "slack"
SLACK_TOKEN_ALIAS = "PIGEON_SLACK_TOKEN"


def field_name_from_env(suffix: str) -> str:
    """BOT_TOKEN_EXTRA -> botTokenExtra."""
    return _UNDERSCORE_LETTER.sub(lambda m: m.group(1).upper(), suffix.lower())


def extract_env_credentials(
    service: str,
    environ: Mapping[str, str] | None = None,
    prefix: str = "PIGEON",
    slack_token_alias: bool = True,
) -> dict[str, str]:
    """
    Collect ``<PREFIX>_<SERVICE>_<FIELD>`` variables for one service.

    Empty values are ignored. For the slack service, ``PIGEON_SLACK_TOKEN``
    fills ``botToken`` when ``PIGEON_SLACK_BOT_TOKEN`` is not set.
    """
    environ = os.environ if environ is None else environ
    var_prefix = f"{prefix}_{service.upper()}_"
    result: dict[str, str] = {}

    for key, value in environ.items():
        if not key.startswith(var_prefix) or not value:
            continue
        suffix = key[len(var_prefix):]
        if not suffix:
            continue
        result[field_name_from_env(suffix)] = value

    if slack_token_alias and service == SLACK_SERVICE:
        alias = environ.get(SLACK_TOKEN_ALIAS)
        if alias and "botToken" not in result:
            result["botToken"] = alias

    return result


def _fill_missing(path: Path, environ: MutableMapping[str, str]) -> None:
    """
    Add dotenv entries absent from ``environ``.

    ${VAR} references expand against ``environ`` and earlier entries of the
    file, never against ``os.environ``; existing variables win as with
    ``load_dotenv(override=False)``.
    """
    loaded: dict[str, str] = {}
    for key, raw in dotenv_values(path, interpolate=False).items():
        if raw is None:
            continue
        scope = {**loaded, **environ}
        loaded[key] = "".join(atom.resolve(scope) for atom in parse_variables(raw))
    for key, value in loaded.items():
        if key not in environ:
            environ[key] = value


async def load_env_file(
    env_file: str | Path | None,
    environ: MutableMapping[str, str] | None = None,
    skipped: list[SkippedSource] | None = None,
) -> bool:
    """
    Load a dotenv file without overriding variables that are already set.

    With ``environ=None`` the process environment is updated and the change
    persists for the rest of the process. Returns True if the file was read.
    """
    if not env_file:
        return False
    path = Path(env_file).expanduser()

    def _skip(reason: str) -> bool:
        logger.debug("Skipping env file %s: %s", path, reason)
        if skipped is not None:
            skipped.append(SkippedSource(path=path, reason=reason))
        return False

    if not await asyncio.to_thread(path.is_file):
        return _skip("file not found")

    try:
        if environ is None:
            await asyncio.to_thread(load_dotenv, dotenv_path=path, override=False)
        else:
            await asyncio.to_thread(_fill_missing, path, environ)
    except (OSError, UnicodeDecodeError) as e:
        return _skip(str(e))

    logger.debug("Loaded env file %s", path)
    return True
