"""Layered credential resolution: config files, environment, overrides."""

from pigeon.credentials.credentials import (
    resolve_credentials,
    resolve_credentials_detailed,
    resolve_credentials_sync,
)
from pigeon.credentials.env import extract_env_credentials, field_name_from_env, load_env_file
from pigeon.credentials.files import (
    candidate_paths,
    deep_merge,
    load_config_files,
    load_file,
    read_config_file,
)
from pigeon.credentials.models import (
    CredentialResolution,
    CredentialSource,
    CredentialStore,
    ResolveOptions,
    SkippedSource,
)

__all__ = [
    "resolve_credentials",
    "resolve_credentials_detailed",
    "resolve_credentials_sync",
    "extract_env_credentials",
    "field_name_from_env",
    "load_env_file",
    "candidate_paths",
    "deep_merge",
    "load_config_files",
    "load_file",
    "read_config_file",
    "CredentialResolution",
    "CredentialSource",
    "CredentialStore",
    "ResolveOptions",
    "SkippedSource",
]
