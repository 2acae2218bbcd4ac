# adaptive_core/errors.py

from typing import Optional


class AdaptiveEngineError(Exception):
    """Base error for problems at the engine boundary (catalog files, configuration)."""


class CatalogError(AdaptiveEngineError):
    """Raised when the question catalog cannot be loaded or a record is invalid."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class ConfigError(AdaptiveEngineError, ValueError):
    """Raised when a session configuration value is out of range."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        super().__init__(message)
        self.field_name = field_name
