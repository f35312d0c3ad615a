"""Tests for ${VAR} expansion."""

from __future__ import annotations

from exportenv.expand import expand_env, expand_variables


def test_expand_defined():
    assert expand_variables("${A}bar", {"A": "foo"}) == "foobar"


def test_expand_undefined_is_empty():
    assert expand_variables("${UNDEFINED}x", {}) == "x"


def test_expand_multiple_references():
    assert expand_variables("${A}-${B}-${A}", {"A": "1", "B": "2"}) == "1-2-1"


def test_bare_dollar_untouched():
    """Only the braced form is a reference."""
    assert expand_variables("$A and $", {"A": "1"}) == "$A and $"


def test_invalid_names_untouched():
    assert expand_variables("${1A} ${} ${A-B}", {"1A": "x"}) == "${1A} ${} ${A-B}"


def test_expansion_is_single_pass():
    assert expand_variables("${A}", {"A": "${B}", "B": "deep"}) == "${B}"


def test_expand_env_in_place():
    env = {"A": "foo", "B": "${A}bar", "C": "${MISSING}x"}
    expand_env(env)
    assert env == {"A": "foo", "B": "foobar", "C": "x"}


def test_expand_env_uses_values_before_the_pass():
    env = {"A": "${B}", "B": "${C}", "C": "end"}
    expand_env(env)
    assert env == {"A": "${C}", "B": "end", "C": "end"}


def test_expand_env_skips_settled_keys():
    env = {"A": "foo", "LIT": "${A}", "B": "${A}"}
    expand_env(env, settled={"LIT"})
    assert env == {"A": "foo", "LIT": "${A}", "B": "foo"}
