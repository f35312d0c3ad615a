# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``${VAR}`` expansion against an env mapping."""

from __future__ import annotations

import re
from collections.abc import Collection, Mapping

_REF_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def expand_variables(value: str, env: Mapping[str, str]) -> str:
    """Replace each ``${NAME}`` in *value* with ``env[NAME]`` (empty if undefined).

    Substituted text is not scanned again.
    """
    return _REF_RE.sub(lambda m: env.get(m.group(1), ""), value)


def expand_env(env: dict[str, str], settled: Collection[str] = ()) -> None:
    """Expand every value of *env* in place, skipping keys in *settled*.

    References resolve against the values as they were before the pass, so the
    result does not depend on key order.
    """
    snapshot = dict(env)
    for key, value in snapshot.items():
        if key in settled:
            continue
        env[key] = expand_variables(value, snapshot)
