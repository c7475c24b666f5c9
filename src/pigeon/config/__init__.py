"""Naming conventions and search locations for credential sources."""

from pigeon.config.settings import ResolverSettings

__all__ = ["ResolverSettings"]
