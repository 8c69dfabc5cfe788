"""
envstore/theme.py
Semantic color theme for CLI output.

Supports:
  - NO_COLOR=1 → disable all colors
  - FORCE_COLOR=1 → force colors in pipes
  - ENVSTORE_THEME=minimal → alternative theme

Usage:
    from envstore.theme import theme
    console.print(f"[{theme.success}]✓[/{theme.success}] loaded")
"""

from __future__ import annotations

import os
import sys


class Theme:
    """Semantic color definitions for consistent CLI appearance."""

    def __init__(self):
        self._no_color = bool(os.environ.get("NO_COLOR"))
        self._force_color = bool(os.environ.get("FORCE_COLOR"))
        self._theme_name = os.environ.get("ENVSTORE_THEME", "default")

        if self._no_color:
            self._apply_no_color()
        elif self._theme_name == "minimal":
            self._apply_minimal()
        else:
            self._apply_default()

    def _apply_default(self):
        self.accent = "bold cyan"
        self.key = "bold"
        self.success = "green"
        self.warning = "yellow"
        self.error = "red"
        self.muted = "dim"
        self.heading = "bold"

    def _apply_minimal(self):
        """Minimal theme — fewer colors, cleaner look."""
        self.accent = "bold"
        self.key = ""
        self.success = "green"
        self.warning = "yellow"
        self.error = "red"
        self.muted = "dim"
        self.heading = "bold"

    def _apply_no_color(self):
        for attr in ("accent", "key", "success", "warning", "error",
                     "muted", "heading"):
            setattr(self, attr, "")

    def markup(self, role: str, text: str) -> str:
        """Wrap *text* in rich markup for *role*, or return it bare when the
        role has no style."""
        style = getattr(self, role, "")
        if not style:
            return text
        return f"[{style}]{text}[/{style}]"

    @property
    def is_color_enabled(self) -> bool:
        if self._no_color:
            return False
        if self._force_color:
            return True
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


# Singleton instance
theme = Theme()
