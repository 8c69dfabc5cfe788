"""run subcommand — execute a program with the .env variables applied."""
from __future__ import annotations

import logging
import os
import subprocess

from cli.helpers import open_store, print_error, resolve_settings
from envstore.exceptions import DotEnvError
from envstore.settings import SettingsError

logger = logging.getLogger(__name__)


def cmd_run(args, command: list[str]) -> int:
    """Run *command* with the process environment plus the loaded variables.

    Returns the child's exit code.
    """
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        print_error("Usage: envstore run [options] -- <command> [args...]")
        return 2

    try:
        env = open_store(resolve_settings(args))
    except (DotEnvError, SettingsError) as e:
        print_error(str(e))
        return 1

    child_env = {**os.environ, **env.to_dict()}
    logger.info("Running %s with %d variable(s)", command[0], len(env))
    try:
        result = subprocess.run(command, env=child_env)
    except FileNotFoundError:
        print_error(f"Command not found: {command[0]}")
        return 127
    return result.returncode
