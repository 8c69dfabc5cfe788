"""
envstore/settings.py
CLI settings from envstore.yaml.

Looks for ``envstore.yaml`` in the working directory unless ENVSTORE_CONFIG
(or ``--config``) names another file.  A missing file means defaults.

Example:
    path: config
    filename: .env.production
    overwrite: false
    global: true
    required: [DB_HOST, DB_USER]
    log_level: INFO
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = "envstore.yaml"
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

_BOOL_FIELDS = ("overwrite", "global", "structured_logs")
_STR_FIELDS = ("path", "filename", "log_level")


class SettingsError(Exception):
    """envstore.yaml could not be parsed or failed validation."""

    def __init__(self, path: str, errors: list[str]):
        self.path = path
        self.errors = errors
        super().__init__(f"{path}: " + "; ".join(errors))


@dataclass
class Settings:
    path: str = "."
    filename: str = ".env"
    overwrite: bool = False
    global_mode: bool = True
    required: list[str] = field(default_factory=list)
    log_level: str = "WARNING"
    structured_logs: bool = False


def config_path(explicit: Optional[str] = None) -> str:
    return explicit or os.environ.get("ENVSTORE_CONFIG", CONFIG_PATH)


def validate_settings(cfg: Any) -> list[str]:
    """Validate a parsed envstore.yaml.

    Returns list of error messages (empty = valid).
    """
    if cfg is None:
        return []
    if not isinstance(cfg, dict):
        return ["Config is not a dictionary"]

    errors: list[str] = []

    for name in _STR_FIELDS:
        if name in cfg and not isinstance(cfg[name], str):
            errors.append(f"'{name}' must be a string")

    for name in _BOOL_FIELDS:
        if name in cfg and not isinstance(cfg[name], bool):
            errors.append(f"'{name}' must be true or false")

    required = cfg.get("required")
    if required is not None:
        if not isinstance(required, list):
            errors.append("'required' must be a list")
        elif not all(isinstance(r, str) and r for r in required):
            errors.append("'required' entries must be non-empty strings")

    level = cfg.get("log_level")
    if isinstance(level, str) and level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"Unknown log_level '{level}'. "
            f"Valid: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    unknown = set(cfg) - set(_STR_FIELDS) - set(_BOOL_FIELDS) - {"required"}
    for name in sorted(unknown):
        logger.warning("Ignoring unknown setting '%s'", name)

    return errors


def load_settings(path: Optional[str] = None) -> Settings:
    """Read settings from *path* (or the default location).

    Raises:
        SettingsError: the file is not valid YAML or fails validation.
    """
    path = config_path(path)
    if not os.path.exists(path):
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()

    try:
        with open(path, encoding="utf-8") as f:
            cfg = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError(path, [f"YAML parse error: {e}"]) from e

    errors = validate_settings(cfg)
    if errors:
        raise SettingsError(path, errors)

    cfg = cfg or {}
    defaults = Settings()
    return Settings(
        path=cfg.get("path", defaults.path),
        filename=cfg.get("filename", defaults.filename),
        overwrite=cfg.get("overwrite", defaults.overwrite),
        global_mode=cfg.get("global", defaults.global_mode),
        required=list(cfg.get("required") or []),
        log_level=cfg.get("log_level", defaults.log_level).upper(),
        structured_logs=cfg.get("structured_logs", defaults.structured_logs),
    )
