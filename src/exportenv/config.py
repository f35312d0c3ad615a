# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".exportenv.toml configuration loading.

Searches upward from cwd for ``.exportenv.toml`` (or uses ``EXPORTENV_CONFIG``)
and merges with CLI flags.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".exportenv.toml"
CONFIG_ENV_VAR = "EXPORTENV_CONFIG"


class ConfigError(ValueError):
    """Raised when a config file is malformed."""


@dataclass
class ExportEnvConfig:
    """Resolved configuration for the current invocation."""

    env_files: list[str] = field(default_factory=list)
    override: bool = False
    expand: bool = True
    vars: dict[str, str] = field(default_factory=dict)
    config_path: Path | None = None


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.exportenv.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def _expect(value: Any, kind: type, name: str) -> Any:
    if not isinstance(value, kind):
        raise ConfigError(f"'{name}' must be a {kind.__name__}, got {type(value).__name__}")
    return value


def load_config(path: Path | None = None) -> ExportEnvConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(env_path) if env_path else find_config_file()
    if path is None:
        return ExportEnvConfig()

    try:
        raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{path}: {e}") from e
    section = _expect(raw.get("exportenv", {}), dict, "exportenv")

    env_files = _expect(section.get("env_files", []), list, "env_files")
    variables = _expect(section.get("vars", {}), dict, "vars")

    return ExportEnvConfig(
        # env_files are relative to the config file, not the cwd
        env_files=[str(path.parent / str(p)) for p in env_files],
        override=_expect(section.get("override", False), bool, "override"),
        expand=_expect(section.get("expand", True), bool, "expand"),
        vars={str(k): _expect(v, str, f"vars.{k}") for k, v in variables.items()},
        config_path=path,
    )
