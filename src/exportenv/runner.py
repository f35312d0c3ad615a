# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run a command with the resolved variables in its environment."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence

log = logging.getLogger(__name__)


def build_child_env(
    env: Mapping[str, str],
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return *base* (default ``os.environ``) with *env* laid on top."""
    child = dict(os.environ if base is None else base)
    child.update(env)
    return child


def run_command(argv: Sequence[str], env: Mapping[str, str]) -> int:
    """Run *argv* with *env* added to the inherited environment and wait for it.

    stdout and stderr are inherited.  Returns the child's exit status.  Raises
    ``OSError`` if the command cannot be started.
    """
    log.debug("Running %s with %d extra variable(s)", argv[0], len(env))
    result = subprocess.run(list(argv), env=build_child_env(env), check=False)
    return result.returncode
