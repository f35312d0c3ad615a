# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""exportenv CLI -- print .env files as shell statements or run a command with them.

Typical use::

    eval "$(exportenv -f .env -f .env.local)"
    eval "$(exportenv --unset)"
    exportenv -v APP_ENV=dev python manage.py runserver
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from exportenv import __version__
from exportenv.config import ConfigError, ExportEnvConfig, load_config
from exportenv.merge import parse_cli_vars, resolve_env
from exportenv.output import EXPORT, PREVIEW, UNSET, format_lines
from exportenv.runner import run_command

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    """Send ``exportenv.*`` log records to the stderr console."""
    logger = logging.getLogger("exportenv")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_time=False, show_path=False))
    logger.propagate = False


def _load_config(config_path: Path | None) -> ExportEnvConfig:
    try:
        return load_config(config_path)
    except ConfigError as e:
        raise click.UsageError(f"Invalid config: {e}")


def _output_mode(preview: bool, unset: bool) -> str:
    if preview and unset:
        raise click.UsageError("--preview and --unset cannot be used together.")
    if preview:
        return PREVIEW
    if unset:
        return UNSET
    return EXPORT


def _run(command: tuple[str, ...], env: dict[str, str]) -> None:
    """Run *command*; failures are reported but do not change our exit status."""
    display = shlex.join(command)
    try:
        returncode = run_command(command, env)
    except OSError as e:
        console.print(f"[red]Error executing command: {escape(str(e))}[/red]")
        return
    if returncode != 0:
        console.print(f"[red]Command exited with status {returncode}: {escape(display)}[/red]")


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command(
    context_settings={"allow_interspersed_args": False},
)
@click.option(
    "--env-file", "-f", "env_files",
    multiple=True,
    type=click.Path(dir_okay=False),
    help="Path to a .env file. Repeat to load several, in order (default: .env).",
)
@click.option(
    "--expand/--no-expand", default=None,
    help="Expand ${VAR} references (default: on, or 'expand' from config).",
)
@click.option(
    "--override/--no-override", "-o", default=None,
    help="Let later files replace variables from earlier ones (default: off).",
)
@click.option(
    "--var", "-v", "variables",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set a variable from the command line. Always wins over file values. Repeatable.",
)
@click.option("--preview", "-p", is_flag=True, help="Print KEY=VALUE lines instead of export statements.")
@click.option("--unset", "-u", is_flag=True, help="Print unset statements for every variable.")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to .exportenv.toml (default: EXPORTENV_CONFIG, else searched upward from cwd).",
)
@click.option("--verbose", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def cli(
    env_files: tuple[str, ...],
    expand: bool | None,
    override: bool | None,
    variables: tuple[str, ...],
    preview: bool,
    unset: bool,
    config_path: Path | None,
    verbose: bool,
    command: tuple[str, ...],
) -> None:
    """Print .env variables as shell statements, or run COMMAND with them.

    Without COMMAND, prints export statements for use with eval:
    eval "$(exportenv -f .env)". Use --unset to clear them again, or --preview
    to inspect the values. With COMMAND, runs it with the variables added to
    the current environment and prints nothing itself.
    """
    _configure_logging(verbose)
    mode = _output_mode(preview, unset)
    if command and mode != EXPORT:
        raise click.UsageError("--preview and --unset cannot be combined with a command.")

    cfg = _load_config(config_path)
    paths = list(env_files) or cfg.env_files
    overrides = {**cfg.vars, **parse_cli_vars(variables)}

    try:
        env = resolve_env(
            paths,
            override=cfg.override if override is None else override,
            expand=cfg.expand if expand is None else expand,
            overrides=overrides,
        )
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error loading env files: {escape(str(e))}[/red]")
        raise SystemExit(1)

    if command:
        _run(command, env)
        return

    for line in format_lines(env, mode):
        click.echo(line)
