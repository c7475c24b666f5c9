"""
Configuration settings for pigeon credential resolution.

Holds the naming conventions shared by the file and environment sources:
which config files are searched, and which environment variable prefix
is scanned.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolverSettings:
    """
    Settings for locating credential sources.

    Environment Variables:
        PIGEON_CONFIG_HOME: Directory replacing ``~/.pigeon`` for
            user-level config files.

    Attributes:
        env_prefix: Prefix of credential environment variables
            (``PIGEON`` -> ``PIGEON_<SERVICE>_<FIELD>``)
        project_file_stem: Stem of project-level config files in the cwd
        user_config_dir: Directory under the home directory for user config
        user_file_stem: Stem of user-level config files
        extensions: Config file extensions, in search order
        slack_token_alias: Accept ``PIGEON_SLACK_TOKEN`` for ``botToken``
        config_home: Explicit user config directory (overrides home lookup)
    """
    env_prefix: str = "PIGEON"
    project_file_stem: str = ".pigeon"
    user_config_dir: str = ".pigeon"
    user_file_stem: str = "config"
    extensions: tuple[str, ...] = (".yml", ".yaml", ".json")
    slack_token_alias: bool = True
    config_home: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ResolverSettings":
        """Load settings from environment variables (``os.environ`` by default)."""
        environ = os.environ if environ is None else environ
        config_home = environ.get("PIGEON_CONFIG_HOME")
        if config_home:
            logger.debug("Using PIGEON_CONFIG_HOME=%s for user config", config_home)
        return cls(
            config_home=Path(config_home).expanduser() if config_home else None,
        )

    def user_dir(self, home: Path | None = None) -> Path:
        if self.config_home is not None:
            return self.config_home
        return (home or Path.home()) / self.user_config_dir

    def search_paths(self, cwd: Path | None = None, home: Path | None = None) -> list[Path]:
        """
        Default config file candidates, lowest precedence first.

        Project-level files in the working directory come first, then
        user-level files, so user-level values win on conflicting keys.
        """
        project_dir = (cwd or Path.cwd()).resolve()
        user_dir = self.user_dir(home)
        project = [project_dir / f"{self.project_file_stem}{ext}" for ext in self.extensions]
        user = [user_dir / f"{self.user_file_stem}{ext}" for ext in self.extensions]
        return project + user
