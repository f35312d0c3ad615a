# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Load several .env files and fold them, plus command-line pairs, into one mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from exportenv.env_file import EnvFile, parse_env_file
from exportenv.expand import expand_env

log = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


def load_env_files(
    paths: Sequence[str | Path] = (),
    override: bool = False,
    expand: bool = True,
) -> EnvFile:
    """Parse *paths* in order and merge them.

    With ``override=False`` the first file to define a key wins; with
    ``override=True`` later files replace earlier definitions.  An empty
    *paths* means ``.env`` in the current directory.  The first unreadable
    file raises ``OSError`` and nothing is returned.
    """
    if not paths:
        paths = [DEFAULT_ENV_FILE]

    merged = EnvFile()
    for path in paths:
        parsed = parse_env_file(path, expand=expand)
        for key, value in parsed.values.items():
            if override or key not in merged.values:
                merged.set(key, value, settled=key in parsed.settled)
    log.debug("Merged %d variable(s) from %d file(s)", len(merged.values), len(paths))
    return merged


def parse_cli_vars(pairs: Iterable[str]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a dict.  ``KEY`` alone maps to ``""``."""
    result: dict[str, str] = {}
    for pair in pairs:
        key, _, value = pair.partition("=")
        if not key:
            log.debug("Ignoring variable with empty name: %r", pair)
            continue
        result[key] = value
    return result


def merge_env(env: EnvFile, overrides: Mapping[str, str]) -> None:
    """Apply *overrides* on top of *env*; they always win and are expanded later."""
    for key, value in overrides.items():
        env.set(key, value)


def resolve_env(
    paths: Sequence[str | Path] = (),
    override: bool = False,
    expand: bool = True,
    overrides: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Run the full pipeline: load files, apply overrides, expand references."""
    env = load_env_files(paths, override=override, expand=expand)
    if overrides:
        merge_env(env, overrides)
    if expand:
        expand_env(env.values, env.settled)
    return env.values
