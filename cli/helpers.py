"""Shared utilities for CLI modules."""
from __future__ import annotations

import logging
import os
import tomllib

from rich.console import Console
from rich.markup import escape

from envstore.logging_config import setup_logging
from envstore.settings import Settings, load_settings
from envstore.store import DotEnv
from envstore.theme import theme as _theme

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def get_version() -> str:
    """Read version from pyproject.toml, fallback to '0.1.0'."""
    pyproject = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                             "pyproject.toml")
    if not os.path.exists(pyproject):
        return "0.1.0"
    try:
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        logger.debug("Could not read %s", pyproject, exc_info=True)
        return "0.1.0"
    return data.get("project", {}).get("version", "0.1.0")


def print_error(msg: str) -> None:
    err_console.print(f"  {_theme.markup('error', '✗')} {escape(msg)}", soft_wrap=True)


def print_success(msg: str) -> None:
    console.print(f"  {_theme.markup('success', '✓')} {escape(msg)}", soft_wrap=True)


def resolve_settings(args) -> Settings:
    """Settings from envstore.yaml, overridden by command line flags.

    Also configures logging, so call it once per command.
    """
    settings = load_settings(getattr(args, "config", None))

    if getattr(args, "path", None):
        settings.path = args.path
    if getattr(args, "file", None):
        settings.filename = args.file
    if getattr(args, "overwrite", False):
        settings.overwrite = True
    if getattr(args, "no_global", False):
        settings.global_mode = False
    if getattr(args, "require", None):
        settings.required = settings.required + list(args.require)
    if getattr(args, "log_level", None):
        settings.log_level = args.log_level.upper()

    setup_logging(level=settings.log_level, structured=settings.structured_logs)
    return settings


def open_store(settings: Settings) -> DotEnv:
    """Create a store from *settings* and load its file.

    Raises:
        DotEnvError: the file is unusable or a required variable is missing.
    """
    env = DotEnv(settings.path, settings.filename, settings.global_mode)
    return env.load_env(settings.path, settings.filename,
                        overwrite=settings.overwrite,
                        required=settings.required,
                        global_mode=settings.global_mode)
