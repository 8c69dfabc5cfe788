"""Version subcommand — version, Python and dependency info."""
from __future__ import annotations

import json
import sys
from importlib import metadata

from rich.table import Table

from cli.helpers import console, get_version
from envstore.theme import theme as _theme


def cmd_version(json_output: bool = False) -> int:
    """Show version, Python version, and key dependency versions."""
    version = get_version()
    py_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    deps: dict[str, str] = {}
    for pkg in ("pyyaml", "rich"):
        try:
            deps[pkg] = metadata.version(pkg)
        except metadata.PackageNotFoundError:
            deps[pkg] = "not installed"

    if json_output:
        info = {
            "version": version,
            "python": py_version,
            "dependencies": deps,
        }
        print(json.dumps(info, indent=2))
        return 0

    console.print(f"\n  {_theme.markup('heading', 'envstore')}  v{version}")
    console.print(f"  {_theme.markup('muted', 'Python:')}  {py_version}")

    table = Table(show_header=True, header_style=_theme.heading or None,
                  box=None, padding=(0, 2))
    table.add_column("Package", style=_theme.muted or None)
    table.add_column("Version")
    for pkg, ver in deps.items():
        role = "success" if ver != "not installed" else "error"
        table.add_row(pkg, _theme.markup(role, ver))
    console.print()
    console.print(table)
    console.print()
    return 0
