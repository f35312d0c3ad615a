# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Render an env mapping as shell statements."""

from __future__ import annotations

from collections.abc import Mapping

EXPORT = "export"
UNSET = "unset"
PREVIEW = "preview"

MODES = (EXPORT, UNSET, PREVIEW)


def _double_quote(value: str) -> str:
    """Wrap in double quotes, escaping embedded ``"``.  Newlines are kept as-is."""
    return '"' + value.replace('"', '\\"') + '"'


def format_export(env: Mapping[str, str]) -> list[str]:
    return [f"export {key}={_double_quote(value)}" for key, value in sorted(env.items())]


def format_unset(env: Mapping[str, str]) -> list[str]:
    return [f"unset {key}" for key in sorted(env)]


def format_preview(env: Mapping[str, str]) -> list[str]:
    return [f"{key}={value}" for key, value in sorted(env.items())]


def format_lines(env: Mapping[str, str], mode: str = EXPORT) -> list[str]:
    """Return the statements for *mode* (``export``, ``unset`` or ``preview``), sorted by key."""
    if mode == EXPORT:
        return format_export(env)
    if mode == UNSET:
        return format_unset(env)
    if mode == PREVIEW:
        return format_preview(env)
    raise ValueError(f"Unknown output mode: {mode}. Use one of: {', '.join(MODES)}")
