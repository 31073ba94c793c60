"""Base exception types for pipegen."""


class PipegenError(Exception):
    """Root of every error raised by pipegen."""


class ConfigError(PipegenError):
    """Raised when project-level configuration cannot be loaded."""
