"""Custom exceptions for configuration handling."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when configuration files are missing or invalid."""

    pass
