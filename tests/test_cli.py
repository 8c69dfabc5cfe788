"""
tests/test_cli.py
envstore command line — get / list / check / run.
"""

import json
import logging
import os
import sys

import pytest
import yaml

from main import build_parser, main


@pytest.fixture
def cli_env(env_dir, process_env, monkeypatch):
    """Run the CLI from env_dir with no settings file and a restored root logger."""
    monkeypatch.chdir(env_dir)
    monkeypatch.delenv("ENVSTORE_CONFIG", raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield env_dir
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParser:

    def test_common_options(self):
        args = build_parser().parse_args(
            ["get", "var", "--path", "cfg", "--file", ".env.prod",
             "--require", "A", "--require", "B", "--no-global", "--log-level", "debug"])
        assert args.cmd == "get"
        assert args.key == "var"
        assert args.path == "cfg"
        assert args.file == ".env.prod"
        assert args.require == ["A", "B"]
        assert args.no_global is True
        assert args.log_level == "DEBUG"

    def test_list_format(self):
        parser = build_parser()
        assert parser.parse_args(["list"]).format == "table"
        assert parser.parse_args(["list", "--yaml"]).format == "yaml"

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 2
        assert "envstore" in capsys.readouterr().out


class TestGet:

    def test_prints_value(self, cli_env, capsys):
        assert main(["get", "app_name"]) == 0
        assert capsys.readouterr().out == "envstore\n"

    def test_other_file(self, cli_env, capsys):
        assert main(["get", "VAR3", "--file", ".env_test", "--no-global"]) == 0
        assert capsys.readouterr().out == "Hello World!\n"
        assert "VAR3" not in os.environ

    def test_json(self, cli_env, capsys):
        assert main(["get", "app_debug", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"key": "APP_DEBUG", "value": "false"}

    def test_unset_key(self, cli_env, capsys):
        assert main(["get", "NOPE", "--no-global"]) == 1
        assert "Not set: NOPE" in capsys.readouterr().err

    def test_missing_file(self, cli_env, capsys):
        assert main(["get", "A", "--file", "missing"]) == 1
        assert "invalid file:" in capsys.readouterr().err


class TestList:

    def test_json(self, cli_env, capsys):
        assert main(["list", "--json", "--no-global"]) == 0
        assert json.loads(capsys.readouterr().out) == {
            "APP_NAME": "envstore", "APP_DEBUG": "false",
        }

    def test_yaml(self, cli_env, capsys):
        assert main(["list", "--yaml", "--file", ".another_env"]) == 0
        assert yaml.safe_load(capsys.readouterr().out) == {
            "FOO": "BAR", "VAR": "overwritten",
        }

    def test_table(self, cli_env, capsys):
        assert main(["list", "--no-global"]) == 0
        out = capsys.readouterr().out
        assert "APP_NAME" in out
        assert "envstore" in out


class TestCheck:

    def test_ok(self, cli_env, capsys):
        assert main(["check", "--require", "app_name"]) == 0
        out = capsys.readouterr().out
        assert "2 variable(s) loaded" in out
        assert "APP_NAME" in out

    def test_missing_required(self, cli_env, capsys):
        assert main(["check", "--require", "DB_HOST", "--require", "db_user"]) == 1
        assert 'required variable(s) not set: "DB_HOST, DB_USER"' in capsys.readouterr().err

    def test_missing_required_json(self, cli_env, capsys):
        assert main(["check", "--json", "--require", "DB_HOST"]) == 1
        assert json.loads(capsys.readouterr().out) == {"ok": False, "missing": ["DB_HOST"]}

    def test_empty_file_json(self, cli_env, capsys):
        assert main(["check", "--json", "--file", ".env_error"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["ok"] is False
        assert "error while reading file" in data["error"]

    def test_settings_file(self, cli_env, capsys):
        with open("envstore.yaml", "w") as f:
            yaml.dump({"filename": ".env_test", "required": ["VAR"], "global": False}, f)
        assert main(["check", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["ok"] is True
        assert data["required"] == ["VAR"]
        assert "VAR" not in os.environ

    def test_invalid_settings_file(self, cli_env, capsys):
        with open("envstore.yaml", "w") as f:
            yaml.dump({"overwrite": "maybe"}, f)
        assert main(["check"]) == 1
        assert "'overwrite' must be true or false" in capsys.readouterr().err


class TestRun:

    def test_child_sees_variables(self, cli_env):
        code = ("import os, sys; "
                "sys.exit(0 if os.environ.get('APP_NAME') == 'envstore' else 3)")
        assert main(["run", "--no-global", "--", sys.executable, "-c", code]) == 0

    def test_child_exit_code_is_returned(self, cli_env):
        assert main(["run", "--", sys.executable, "-c", "raise SystemExit(5)"]) == 5

    def test_without_command(self, cli_env, capsys):
        assert main(["run"]) == 2
        assert "Usage: envstore run" in capsys.readouterr().err

    def test_command_not_found(self, cli_env, capsys):
        assert main(["run", "--", "envstore-no-such-binary"]) == 127
        assert "Command not found" in capsys.readouterr().err
