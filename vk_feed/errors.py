from __future__ import annotations


class ConfigError(RuntimeError):
    """Raised when configuration is missing or invalid."""


class PatternError(ConfigError):
    """Raised when an include/exclude pattern is not a valid regular expression."""


class WallResponseError(RuntimeError):
    """Raised when a wall response carries an API error instead of posts."""

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code
