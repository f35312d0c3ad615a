"""Tests for running a command with the resolved environment."""

from __future__ import annotations

import sys

import pytest

from exportenv.runner import build_child_env, run_command


def test_build_child_env_overrides_base():
    child = build_child_env({"A": "new", "B": "b"}, base={"A": "old", "KEEP": "k"})
    assert child == {"A": "new", "B": "b", "KEEP": "k"}


def test_build_child_env_inherits_os_environ(monkeypatch):
    monkeypatch.setenv("EXPORTENV_TEST_INHERITED", "yes")
    child = build_child_env({"X": "1"})
    assert child["EXPORTENV_TEST_INHERITED"] == "yes"
    assert child["X"] == "1"


def test_run_command_sees_variables(tmp_path, monkeypatch):
    monkeypatch.setenv("EXPORTENV_TEST_VAR", "inherited")
    out = tmp_path / "out.txt"
    code = (
        "import os, sys; "
        "open(sys.argv[1], 'w').write(os.environ['EXPORTENV_TEST_VAR'] + '|' + os.environ['OTHER'])"
    )
    rc = run_command(
        [sys.executable, "-c", code, str(out)],
        {"EXPORTENV_TEST_VAR": "from-env-file", "OTHER": "multi\nline"},
    )
    assert rc == 0
    assert out.read_text() == "from-env-file|multi\nline"


def test_run_command_returns_exit_status():
    assert run_command([sys.executable, "-c", "raise SystemExit(3)"], {}) == 3


def test_run_command_missing_executable():
    with pytest.raises(OSError):
        run_command(["exportenv-definitely-not-a-command"], {})
