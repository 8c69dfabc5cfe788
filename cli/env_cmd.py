"""get / list / check subcommands."""
from __future__ import annotations

import json

import yaml
from rich.markup import escape
from rich.table import Table

from cli.helpers import console, open_store, print_error, print_success, resolve_settings
from envstore.exceptions import DotEnvError, MissingRequiredVariableError
from envstore.loader import compose_path
from envstore.settings import SettingsError
from envstore.theme import theme as _theme


def cmd_get(args, key: str, json_output: bool = False) -> int:
    """Print the resolved value of *key*; exit 1 if it is unset."""
    try:
        env = open_store(resolve_settings(args))
    except (DotEnvError, SettingsError) as e:
        print_error(str(e))
        return 1

    value = env.get(key)
    if json_output:
        print(json.dumps({"key": key.upper(), "value": value}, ensure_ascii=False))
        return 0 if value is not None else 1

    if value is None:
        print_error(f"Not set: {key.upper()}")
        return 1

    print(value)
    return 0


def cmd_list(args, fmt: str = "table") -> int:
    """Print every variable loaded from the file."""
    try:
        env = open_store(resolve_settings(args))
    except (DotEnvError, SettingsError) as e:
        print_error(str(e))
        return 1

    data = env.to_dict()

    if fmt == "json":
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return 0
    if fmt == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False,
                             allow_unicode=True, sort_keys=False), end="")
        return 0

    if not data:
        console.print(f"  {_theme.markup('muted', 'No variables loaded.')}")
        return 0

    table = Table(show_header=True, header_style=_theme.heading or None,
                  box=None, padding=(0, 2))
    table.add_column("Key", style=_theme.key or None)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(escape(key), escape(value))
    console.print(table)
    return 0


def cmd_check(args, json_output: bool = False) -> int:
    """Load the file and verify the required variables."""
    try:
        settings = resolve_settings(args)
        env = open_store(settings)
    except MissingRequiredVariableError as e:
        if json_output:
            print(json.dumps({"ok": False, "missing": e.keys}))
        else:
            print_error(str(e))
        return 1
    except (DotEnvError, SettingsError) as e:
        if json_output:
            print(json.dumps({"ok": False, "error": str(e)}))
        else:
            print_error(str(e))
        return 1

    if json_output:
        print(json.dumps({"ok": True, "variables": len(env),
                          "required": settings.required}))
        return 0

    print_success(f"{len(env)} variable(s) loaded from "
                  f"{compose_path(settings.path, settings.filename)}")
    if settings.required:
        print_success("required: " + ", ".join(r.upper() for r in settings.required))
    return 0
