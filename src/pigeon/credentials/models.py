"""
Data types for credential resolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, MutableMapping

from pigeon.config.settings import ResolverSettings

# service name -> credential field name -> value
CredentialStore = dict[str, dict[str, str]]


class CredentialSource(str, Enum):
    """Where a resolved credential field came from, lowest precedence first."""
    FILE = "file"
    ENV = "env"
    OVERRIDE = "override"


@dataclass
class ResolveOptions:
    """
    Options for a single resolution call.

    Attributes:
        overrides: Per-service field values that win over every other source
        config_file: Explicit config file; replaces the default search paths
        env_file: dotenv file loaded before environment variables are read
        environ: Explicit environment to read (and load ``env_file`` into)
            instead of ``os.environ``. When given, the process environment
            is neither read nor modified.
        settings: Naming conventions and search locations
    """
    overrides: CredentialStore | None = None
    config_file: str | Path | None = None
    env_file: str | Path | None = None
    environ: MutableMapping[str, str] | None = None
    settings: ResolverSettings | None = None


@dataclass(frozen=True)
class SkippedSource:
    """A source that contributed nothing, and why."""
    path: Path
    reason: str


@dataclass
class CredentialResolution:
    """
    Full outcome of resolving one service.

    ``credentials`` is what ``resolve_credentials`` returns; the other
    fields explain it.
    """
    service: str
    credentials: dict[str, Any] = field(default_factory=dict)
    sources: dict[str, CredentialSource] = field(default_factory=dict)
    searched: list[Path] = field(default_factory=list)
    skipped: list[SkippedSource] = field(default_factory=list)

    def source_of(self, field_name: str) -> CredentialSource | None:
        return self.sources.get(field_name)
