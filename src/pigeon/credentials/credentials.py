"""
Layered credential resolution for pigeon services.

Sources, lowest precedence first:

1. Config files: ``.pigeon.{yml,yaml,json}`` in the working directory,
   then ``~/.pigeon/config.{yml,yaml,json}`` (or one explicit file).
2. Environment variables: ``PIGEON_<SERVICE>_<FIELD>``, optionally
   seeded from a dotenv file.
3. Programmatic overrides passed by the caller.

Unavailable or malformed sources never raise; they contribute nothing and
are listed in ``CredentialResolution.skipped``.

Example:
    creds = await resolve_credentials("slack", ResolveOptions(env_file=".env"))
    token = creds.get("botToken")
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pigeon.config.settings import ResolverSettings
from pigeon.credentials.env import extract_env_credentials, load_env_file
from pigeon.credentials.files import candidate_paths, load_config_files
from pigeon.credentials.models import (
    CredentialResolution,
    CredentialSource,
    ResolveOptions,
)

logger = logging.getLogger(__name__)


def _service_section(store: dict[str, Any] | None, service: str) -> dict[str, Any]:
    section = (store or {}).get(service)
    return dict(section) if isinstance(section, dict) else {}


async def resolve_credentials_detailed(
    service: str,
    options: ResolveOptions | None = None,
) -> CredentialResolution:
    """
    Resolve credentials for ``service`` and report where each field came from.

    Args:
        service: Service name, e.g. ``"slack"``.
        options: Overrides, explicit config/env files, and an optional
            isolated environment.

    Returns:
        CredentialResolution with the merged credentials, per-field
        provenance, the searched config paths, and skipped sources.

    Raises:
        ValueError: If ``service`` is empty or not a string.
    """
    if not isinstance(service, str) or not service:
        raise ValueError(f"service must be a non-empty string, got {service!r}")
    options = options or ResolveOptions()
    resolution = CredentialResolution(service=service)

    # The env file must be in place before variables are scanned below.
    environ = None if options.environ is None else dict(options.environ)
    await load_env_file(options.env_file, environ, resolution.skipped)
    settings = options.settings or ResolverSettings.from_env(environ)

    resolution.searched = candidate_paths(options.config_file, settings)
    from_files = await load_config_files(resolution.searched, resolution.skipped)

    layers = [
        (CredentialSource.FILE, _service_section(from_files, service)),
        (
            CredentialSource.ENV,
            extract_env_credentials(
                service,
                environ,
                prefix=settings.env_prefix,
                slack_token_alias=settings.slack_token_alias,
            ),
        ),
        (CredentialSource.OVERRIDE, _service_section(options.overrides, service)),
    ]
    for source, fields in layers:
        for name, value in fields.items():
            resolution.credentials[name] = value
            resolution.sources[name] = source

    logger.debug(
        "Resolved %s credentials: fields=%s skipped=%d",
        service,
        sorted(resolution.credentials),
        len(resolution.skipped),
    )
    return resolution


async def resolve_credentials(
    service: str,
    options: ResolveOptions | None = None,
) -> dict[str, Any]:
    """
    Resolve the flat credential mapping for ``service``.

    Precedence is config files < environment < overrides. Returns an empty
    dict when no source mentions the service.
    """
    resolution = await resolve_credentials_detailed(service, options)
    return resolution.credentials


def resolve_credentials_sync(
    service: str,
    options: ResolveOptions | None = None,
) -> dict[str, Any]:
    """Blocking wrapper around ``resolve_credentials`` for synchronous callers."""
    return asyncio.run(resolve_credentials(service, options))
