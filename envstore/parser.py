"""
envstore/parser.py
Line parser and value resolver for .env files.

A line is either blank, a ``#`` comment, or ``KEY[=VALUE]``.  Values may be
quoted (quotes stripped, content kept verbatim), or unquoted (inline
``# comment`` stripped).  Literal ``\\n`` sequences become line breaks and
``${NAME}`` references are substituted from already known variables.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[str]]

# numeric literal: optional sign, digits with optional fraction, optional exponent
_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_COMMENT_RE = re.compile(r"(?<!\\)#")
_NESTED_VAR_RE = re.compile(r"\$\{(?P<var>[_a-z\d]+)\}", re.IGNORECASE)
_QUOTES = ("'", '"')


@dataclass(frozen=True)
class Entry:
    """A parsed, not yet resolved ``KEY=VALUE`` pair."""

    key: str
    value: Optional[str] = None


def is_numeric(value: str) -> bool:
    return bool(_NUMERIC_RE.match(value))


def is_valid_key(key: str) -> bool:
    """Keys must be non-empty, non-numeric and free of spaces."""
    return bool(key) and not is_numeric(key) and " " not in key


def parse_line(line: str) -> Entry | None:
    """Parse one raw line into an Entry, or None if the line is to be skipped.

    Skipped: blank lines, ``#`` comments, and lines whose key is empty,
    numeric or contains a space.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    key, sep, value = line.partition("=")
    key = key.strip()

    if not is_valid_key(key):
        logger.debug("Skipping line with invalid key: %r", key)
        return None

    return Entry(key=key, value=value.strip() if sep else None)


def _unquote(value: str, quote: str) -> str:
    # backslash pairs inside the quotes (escaped quote, escaped backslash, \n)
    # are kept verbatim; anything after the closing quote is dropped
    pattern = rf"^{quote}((?:[^{quote}\\]|\\.)*){quote}.*$"
    return re.sub(pattern, r"\1", value, flags=re.MULTILINE)


def _strip_comment(value: str) -> str:
    value = _COMMENT_RE.split(value, maxsplit=1)[0].strip()
    return value.replace("\\#", "#")


def resolve_value(raw: str | None, lookup: Lookup) -> str | None:
    """Resolve a raw value into the string that gets stored.

    Args:
        raw: value text as found after the ``=``, or None if there was none.
        lookup: callback used to resolve ``${NAME}`` references; it receives
            the name as written and returns None for unset variables.

    Returns:
        The resolved string, or None when *raw* is None.
    """
    if raw is None:
        return None

    quote = raw[:1]
    if quote in _QUOTES:
        value = _unquote(raw, quote)
    else:
        value = _strip_comment(raw)

    # multiline values
    value = value.replace("\\n", os.linesep)

    if "$" in value:
        value = _NESTED_VAR_RE.sub(lambda m: lookup(m.group("var")) or "", value)

    return value
