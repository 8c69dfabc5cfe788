"""
envstore/exceptions.py
Errors raised while loading .env files into a DotEnv store.
"""

from __future__ import annotations


class DotEnvError(Exception):
    """Base class for every error raised by envstore."""


class FileUnreadableError(DotEnvError):
    """The .env file is missing, not a regular file, or cannot be read."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"invalid file: {path}")


class FileEmptyError(DotEnvError):
    """The .env file exists but contains no lines."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"error while reading file: {path}")


class MissingRequiredVariableError(DotEnvError):
    """One or more mandatory variables are not set after a load."""

    def __init__(self, keys: list[str]):
        self.keys = list(keys)
        super().__init__('required variable(s) not set: "%s"' % ", ".join(self.keys))
