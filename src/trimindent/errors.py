"""Error types for the command-line and editor surfaces."""

from __future__ import annotations


class _PathError(Exception):
    def __init__(self, message: str, path: str) -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}\n  --> {self.path}"


class InputError(_PathError):
    """Raised when an input file is missing, unreadable, or not UTF-8."""


class ConfigError(_PathError):
    """Raised when a config file cannot be loaded or has a mistyped key."""
