# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env files into key-value dicts.

Handles:
  - blank lines and ``#`` comments
  - ``export KEY=VALUE`` prefix
  - single-, double- and backtick-quoted values (quotes stripped, escaped
    quote characters unescaped)
  - multiline quoted values that span several physical lines
  - inline comments outside of quotes
  - ``${VAR}`` expansion and ``\\n`` escapes inside double-quoted values
  - values with ``=`` in them (only first ``=`` splits)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from exportenv.expand import expand_variables

log = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'", "`")
# backticks close on the same line or not at all
MULTILINE_QUOTES = ('"', "'")

_LINE_RE = re.compile(
    r"""
    ^\s*
    (?:export\s+)?          # optional export prefix
    ([A-Za-z_][A-Za-z0-9_]*)  # key
    \s*=\s*                 # separator
    (.*)                    # raw value (parsed below)
    $
    """,
    re.VERBOSE,
)


@dataclass
class EnvFile:
    """Parsed variables plus the keys whose values must not be expanded again.

    ``settled`` holds keys that came from single quotes (literal text) or double
    quotes (already expanded while parsing).
    """

    values: dict[str, str] = field(default_factory=dict)
    settled: set[str] = field(default_factory=set)

    def set(self, key: str, value: str, *, settled: bool = False) -> None:
        self.values[key] = value
        if settled:
            self.settled.add(key)
        else:
            self.settled.discard(key)


@dataclass
class ParseState:
    """State carried between lines while a multiline quoted value is open."""

    key: str = ""
    buffer: str = ""
    multiline: bool = False
    quote: str = ""

    def start(self, key: str, value: str, quote: str) -> None:
        self.key = key
        self.buffer = value
        self.multiline = True
        self.quote = quote

    def reset(self) -> None:
        self.key = ""
        self.buffer = ""
        self.multiline = False
        self.quote = ""


def is_comment_or_empty(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def remove_inline_comment(value: str) -> str:
    """Cut ``value`` at the first ``#`` that is not inside a quoted span."""
    result: list[str] = []
    quote = ""
    for char in value:
        if quote:
            if char == quote:
                quote = ""
        elif char in ('"', "'"):
            quote = char
        elif char == "#":
            break
        result.append(char)
    return "".join(result).strip()


def unquote(raw: str) -> tuple[str, str]:
    """Strip a closed pair of surrounding quotes from ``raw``.

    Returns ``(value, quote)`` where ``quote`` is the quote character that was
    removed, or ``""`` if the value was not quoted.  Escaped occurrences of the
    quote character are unescaped.
    """
    if len(raw) >= 2 and raw[0] in QUOTE_CHARS and raw[-1] == raw[0]:
        quote = raw[0]
        return raw[1:-1].replace("\\" + quote, quote), quote
    return raw, ""


def parse_line(line: str) -> tuple[str, str, str, bool] | None:
    """Parse one assignment line.

    Returns ``(key, value, quote, multiline)`` or ``None`` if the line is not a
    ``KEY=VALUE`` assignment.  When ``multiline`` is true, ``value`` is the text
    after the opening quote and more lines are needed to close it.
    """
    m = _LINE_RE.match(line.strip())
    if m is None:
        return None
    key = m.group(1)
    raw = remove_inline_comment(m.group(2))
    if raw and raw[0] in QUOTE_CHARS:
        value, quote = unquote(raw)
        if quote:
            return key, value, quote, False
        if raw[0] in MULTILINE_QUOTES:
            return key, raw[1:], raw[0], True
    return key, raw, "", False


def _finish_double_quoted(value: str, env: dict[str, str], expand: bool) -> str:
    if expand:
        value = expand_variables(value, env)
    return value.replace("\\n", "\n")


def _store(result: EnvFile, key: str, value: str, quote: str, expand: bool) -> None:
    if quote == '"':
        value = _finish_double_quoted(value, result.values, expand)
    result.set(key, value, settled=quote in ('"', "'"))


def parse_env_lines(lines: Iterable[str], expand: bool = True) -> EnvFile:
    """Parse an iterable of .env lines into an :class:`EnvFile`."""
    result = EnvFile()
    state = ParseState()
    for line in lines:
        line = line.rstrip("\r\n")

        if state.multiline:
            if line.lstrip().startswith("#"):
                continue
            tail = line.rstrip()
            if tail.endswith(state.quote):
                value = state.buffer + "\n" + tail[: -len(state.quote)]
                value = remove_inline_comment(value)
                value = value.replace("\\" + state.quote, state.quote)
                _store(result, state.key, value, state.quote, expand)
                state.reset()
            else:
                state.buffer += "\n" + line
            continue

        if is_comment_or_empty(line):
            continue

        parsed = parse_line(line)
        if parsed is None:
            continue
        key, value, quote, multiline = parsed
        if multiline:
            state.start(key, value, quote)
            continue
        _store(result, key, value, quote, expand)

    if state.multiline:
        log.debug("Dropping unterminated %s-quoted value for %s", state.quote, state.key)
    return result


def parse_env_file(path: str | Path, expand: bool = True) -> EnvFile:
    """Read a .env file and return its parsed variables.

    Raises ``OSError`` if the file cannot be opened or read.
    """
    with Path(path).open(encoding="utf-8") as f:
        result = parse_env_lines(f, expand=expand)
    log.debug("Parsed %d variable(s) from %s", len(result.values), path)
    return result
