"""
tests/conftest.py
Shared fixtures for envstore tests.
Provides sample .env files, an in-memory backend and a guarded os.environ.
"""

import os

import pytest

from envstore import backends
from envstore.backends import MappingBackend

ENV_TEST = """\
# a comment line
VAR=test
42=numeric keys are skipped
=empty keys too
MY KEY=and keys with spaces
TEST=Oh here's some silly &%=ä$&/"§% value # stripped comment line
MULTILINE="foo\\nbar\\nnope"
VAR1=Hello
VAR2=World!
VAR3=${VAR1} ${var2}
VAR4={$VAR1} $VAR2 {VAR1}
QUOTED='value # not a comment' # a real comment
EMPTY=
NOVALUE
"""

ANOTHER_ENV = """\
foo=BAR
VAR=overwritten
"""


@pytest.fixture
def env_dir(tmp_path):
    """Directory holding .env_test, .another_env, an empty .env_error and a .env."""
    (tmp_path / ".env_test").write_text(ENV_TEST, encoding="utf-8")
    (tmp_path / ".another_env").write_text(ANOTHER_ENV, encoding="utf-8")
    (tmp_path / ".env_error").write_text("", encoding="utf-8")
    (tmp_path / ".env").write_text("APP_NAME=envstore\nAPP_DEBUG=false\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def memory_backend():
    """Global tier over plain dicts instead of os.environ."""
    return MappingBackend(environ={}, tier={})


@pytest.fixture
def process_env():
    """Restore os.environ and the process-wide tier after the test."""
    saved_environ = dict(os.environ)
    saved_tier = dict(backends._PROCESS_TIER)
    backends._PROCESS_TIER.clear()
    yield os.environ
    os.environ.clear()
    os.environ.update(saved_environ)
    backends._PROCESS_TIER.clear()
    backends._PROCESS_TIER.update(saved_tier)
