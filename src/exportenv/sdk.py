# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for loading .env files into the environment (python-dotenv style)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from exportenv.merge import resolve_env


def dotenv_values(
    *paths: str | Path,
    override: bool = False,
    expand: bool = True,
    extra: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return the variables from *paths* as a dict without modifying os.environ.

    Runs the same pipeline as the CLI: files are merged in order, *extra* pairs
    win over file values, then ``${VAR}`` references are expanded.

    Parameters
    ----------
    *paths : str or Path
        .env files to read, in order. Defaults to ``.env`` in the cwd.
    override : bool, default False
        If True, later files replace keys defined by earlier ones. If False,
        the first definition wins.
    expand : bool, default True
        Expand ``${VAR}`` references.
    extra : mapping, optional
        Additional pairs applied on top of the file values (like ``--var``).

    Returns
    -------
    dict[str, str]
        Mapping of variable name to value.

    Raises
    ------
    OSError
        If any of the files cannot be read.
    """
    return resolve_env(paths, override=override, expand=expand, overrides=extra)


def load_dotenv(
    *paths: str | Path,
    override: bool = False,
    expand: bool = True,
    replace_existing: bool = True,
) -> bool:
    """Load variables from *paths* into os.environ.

    ``override`` and ``expand`` have the same meaning as in
    :func:`dotenv_values`. With ``replace_existing=False``, variables already
    present in os.environ are left alone (python-dotenv semantics).

    Returns True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from exportenv import load_dotenv
    >>> load_dotenv()  # .env in the cwd
    True
    >>> load_dotenv(".env", ".env.local", override=True)
    True
    """
    values = dotenv_values(*paths, override=override, expand=expand)
    count = 0
    for key, value in values.items():
        if key in os.environ and not replace_existing:
            continue
        os.environ[key] = value
        count += 1
    return count > 0
