"""
tests/test_theme.py
Semantic color theme.
"""

from envstore.theme import Theme


class TestTheme:

    def test_default_markup(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("ENVSTORE_THEME", raising=False)
        assert Theme().markup("error", "✗") == "[red]✗[/red]"

    def test_no_color_returns_bare_text(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        theme = Theme()
        assert theme.markup("error", "✗") == "✗"
        assert theme.is_color_enabled is False

    def test_minimal_theme(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("ENVSTORE_THEME", "minimal")
        assert Theme().markup("key", "A") == "A"

    def test_unknown_role(self):
        assert Theme().markup("nonexistent", "x") == "x"
