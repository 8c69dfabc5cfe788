"""
envstore/backends.py
Environment backends — the global tier of a DotEnv store.

A backend owns a global-tier mapping of the variables written through it and
mirrors them into an environment mapping.  ``OsEnvironBackend`` mirrors into
``os.environ`` and shares its tier across the whole process, so every store
running in global mode sees the same variables (and so do subprocesses).
Tests use ``MappingBackend`` over plain dicts.
"""

from __future__ import annotations

import abc
import logging
import os
from typing import MutableMapping, Optional

logger = logging.getLogger(__name__)

# process-wide global tier, shared by every OsEnvironBackend
_PROCESS_TIER: dict[str, str] = {}


class EnvironmentBackend(abc.ABC):
    """What a DotEnv store needs from the process environment."""

    @abc.abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Value of *key*, or None if it is not set."""

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None:
        """Create or overwrite *key*."""

    @abc.abstractmethod
    def unset(self, key: str) -> None:
        """Remove *key*; missing keys are ignored."""

    @abc.abstractmethod
    def has(self, key: str) -> bool:
        """Presence check (an empty value counts as set)."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove every variable written through this backend."""


class MappingBackend(EnvironmentBackend):
    """Global tier backed by a dict, mirrored into an environment mapping."""

    def __init__(self, environ: MutableMapping[str, str] | None = None,
                 tier: dict[str, str] | None = None):
        self.environ = {} if environ is None else environ
        self.tier = {} if tier is None else tier

    def get(self, key: str) -> Optional[str]:
        """Tier value first (presence, not truthiness), then the environment."""
        if key in self.tier:
            return self.tier[key]
        return self.environ.get(key)

    def set(self, key: str, value: str) -> None:
        self.environ[key] = value
        self.tier[key] = value

    def unset(self, key: str) -> None:
        self.tier.pop(key, None)
        self.environ.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self.tier or key in self.environ

    def clear(self) -> None:
        """Drop every tier variable, leaving foreign environment entries alone."""
        for key in self.tier:
            self.environ.pop(key, None)
        logger.debug("Cleared %d global variable(s)", len(self.tier))
        self.tier.clear()


class OsEnvironBackend(MappingBackend):
    """The real process environment."""

    def __init__(self):
        super().__init__(os.environ, _PROCESS_TIER)
