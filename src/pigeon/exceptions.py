"""
Custom exception hierarchy for pigeon.
"""

from __future__ import annotations

from pathlib import Path


class PigeonError(Exception):
    """Base exception for all pigeon errors."""
    pass


# === Credential Errors ===

class CredentialError(PigeonError):
    """Base exception for credential resolution errors."""
    pass


class ConfigFileError(CredentialError):
    """A config file could not be read, parsed, or is not a mapping."""
    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load config file {self.path}: {reason}")
