"""Ambient concerns shared by every plugin: settings, logging, errors."""

from pipegen.core.errors import ConfigError, PipegenError

__all__ = ["ConfigError", "PipegenError"]
