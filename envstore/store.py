"""
envstore/store.py
DotEnv — loads .env files into a two-tier variable store.

Global mode (default) writes every variable to the environment backend
(``os.environ`` unless another backend is injected) and to a private local
tier; reads prefer the backend.  With ``global_mode=False`` the backend is
never touched and variables are only reachable through the store.

Usage:
    from envstore import DotEnv
    env = DotEnv("/srv/app").load(required=["DB_HOST"])
    env.get("db_host")
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from envstore.backends import EnvironmentBackend, OsEnvironBackend
from envstore.exceptions import MissingRequiredVariableError
from envstore.loader import DEFAULT_FILENAME, compose_path, read_lines
from envstore.parser import parse_line, resolve_value

logger = logging.getLogger(__name__)


class DotEnv:
    """Variable store fed from .env files.

    Keys are case-insensitive (stored upper-cased).  An explicitly stored
    empty string is a value, distinct from an unset variable.
    """

    def __init__(self, path: str, filename: Optional[str] = None,
                 global_mode: Optional[bool] = None,
                 backend: Optional[EnvironmentBackend] = None):
        self.path = path
        self.filename = filename
        self.global_mode = True if global_mode is None else global_mode
        self.backend: EnvironmentBackend = backend if backend is not None else OsEnvironBackend()
        self._env: dict[str, str] = {}  # local tier, always written

    # ── Loading ───────────────────────────────────────────────────────────

    def load(self, required: Optional[Iterable[str]] = None) -> DotEnv:
        """(Re-)load the configured file, overwriting existing values."""
        return self.load_env(self.path, self.filename, True, required, self.global_mode)

    def load_env(self, path: str, filename: Optional[str] = None,
                 overwrite: Optional[bool] = None,
                 required: Optional[Iterable[str]] = None,
                 global_mode: Optional[bool] = None) -> DotEnv:
        """Load a .env file into the store.

        Args:
            path: directory holding the file.
            filename: file name, ``.env`` if omitted.
            overwrite: replace variables that are already set (default False).
            required: names that must be set once the file is applied.
            global_mode: write through to the backend (default True).

        Raises:
            FileUnreadableError, FileEmptyError: the file cannot be used.
            MissingRequiredVariableError: a required name is still unset.
                Variables from the file stay applied.
        """
        self.global_mode = True if global_mode is None else global_mode
        file = compose_path(path, filename)
        lines = read_lines(file)

        before = len(self._env)
        self.load_data(lines, bool(overwrite))
        logger.info("Loaded %s: %d line(s), %d new variable(s)",
                    file, len(lines), len(self._env) - before)

        return self.check_required(required)

    def add_env(self, path: str, filename: Optional[str] = None,
                overwrite: Optional[bool] = None,
                required: Optional[Iterable[str]] = None) -> DotEnv:
        """Merge another .env file, keeping the current global mode."""
        return self.load_env(path, filename, overwrite, required, self.global_mode)

    def load_data(self, lines: Iterable[str], overwrite: bool) -> DotEnv:
        """Apply raw lines in order; later lines may reference earlier ones."""
        for line in lines:
            entry = parse_line(line)
            if entry is None:
                continue

            if not overwrite and self.get(entry.key) is not None:
                logger.debug("Keeping existing value for %s", entry.key.upper())
                continue

            self.set(entry.key, entry.value)

        return self

    def check_required(self, required: Optional[Iterable[str]] = None) -> DotEnv:
        """Raise MissingRequiredVariableError naming every unset name."""
        if not required:
            return self

        missing = [var.upper() for var in required if not self.isset(var)]
        if missing:
            logger.warning("Required variable(s) missing: %s", ", ".join(missing))
            raise MissingRequiredVariableError(missing)

        return self

    # ── Accessors ─────────────────────────────────────────────────────────

    def get(self, var: str) -> Optional[str]:
        var = var.upper()
        env = self.backend.get(var) if self.global_mode else None
        if env is not None:
            return env
        return self._env.get(var)

    def set(self, var: str, value: Optional[str] = None) -> DotEnv:
        """Resolve *value* (quotes, comments, ``\\n``, ``${VAR}``) and store it."""
        var = var.upper()
        resolved = resolve_value(value, self.get)
        if resolved is None:
            resolved = ""

        if self.global_mode:
            self.backend.set(var, resolved)

        self._env[var] = resolved
        return self

    def isset(self, var: str) -> bool:
        var = var.upper()
        if self.global_mode and self.backend.has(var):
            return True
        return var in self._env

    def unset(self, var: str) -> DotEnv:
        var = var.upper()
        if self.global_mode:
            self.backend.unset(var)
        self._env.pop(var, None)
        return self

    def clear(self) -> DotEnv:
        """Remove every variable: the backend's global tier (in global mode)
        and the local tier.  Use with caution."""
        if self.global_mode:
            self.backend.clear()
        self._env.clear()
        return self

    def to_dict(self) -> dict[str, str]:
        """Copy of the local tier."""
        return dict(self._env)

    # ── Mapping sugar ─────────────────────────────────────────────────────

    def __getitem__(self, var: str) -> str:
        value = self.get(var)
        if value is None:
            raise KeyError(var)
        return value

    def __setitem__(self, var: str, value: Optional[str]) -> None:
        self.set(var, value)

    def __delitem__(self, var: str) -> None:
        self.unset(var)

    def __contains__(self, var: object) -> bool:
        return isinstance(var, str) and self.isset(var)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._env))

    def __len__(self) -> int:
        return len(self._env)

    def __repr__(self) -> str:
        mode = "global" if self.global_mode else "local"
        return f"DotEnv(path={self.path!r}, filename={self.filename!r}, mode={mode}, vars={len(self._env)})"


def load_dotenv(path: str = ".", filename: str = DEFAULT_FILENAME,
                overwrite: bool = False,
                required: Optional[Iterable[str]] = None,
                global_mode: bool = True,
                backend: Optional[EnvironmentBackend] = None) -> DotEnv:
    """Load ``path/filename`` into a new store and return it.

    Existing variables win unless *overwrite* is set.
    """
    env = DotEnv(path, filename, global_mode, backend)
    return env.load_env(path, filename, overwrite, required, global_mode)
