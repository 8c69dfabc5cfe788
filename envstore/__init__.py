"""envstore — load .env files into a two-tier variable store."""

from envstore.backends import EnvironmentBackend, MappingBackend, OsEnvironBackend
from envstore.exceptions import (
    DotEnvError,
    FileEmptyError,
    FileUnreadableError,
    MissingRequiredVariableError,
)
from envstore.parser import Entry, parse_line, resolve_value
from envstore.store import DotEnv, load_dotenv

__all__ = [
    "DotEnv",
    "DotEnvError",
    "Entry",
    "EnvironmentBackend",
    "FileEmptyError",
    "FileUnreadableError",
    "MappingBackend",
    "MissingRequiredVariableError",
    "OsEnvironBackend",
    "load_dotenv",
    "parse_line",
    "resolve_value",
]
