"""
Pigeon - per-service credential resolution for the pigeon CLI.

Credentials are merged from config files, PIGEON_* environment variables,
and programmatic overrides, in that order of precedence.

Example:
    from pigeon import ResolveOptions, resolve_credentials

    creds = await resolve_credentials(
        "slack",
        ResolveOptions(overrides={"slack": {"botToken": "xoxb-..."}}),
    )
"""

from pigeon.config import ResolverSettings
from pigeon.credentials import (
    CredentialResolution,
    CredentialSource,
    CredentialStore,
    ResolveOptions,
    SkippedSource,
    resolve_credentials,
    resolve_credentials_detailed,
    resolve_credentials_sync,
)
from pigeon.exceptions import ConfigFileError, CredentialError, PigeonError

__version__ = "0.1.0"

__all__ = [
    "ResolverSettings",
    "CredentialResolution",
    "CredentialSource",
    "CredentialStore",
    "ResolveOptions",
    "SkippedSource",
    "resolve_credentials",
    "resolve_credentials_detailed",
    "resolve_credentials_sync",
    "ConfigFileError",
    "CredentialError",
    "PigeonError",
]
