"""Command line adapter for the scrubbing engine.

Purpose
-------
Scrub payloads captured from the bridge (files or stdin) the same way the
host does before logging them, and report why a payload passes through or
fails.

Contents
--------
* :func:`cli` – rich-click group with global toggles.
* Commands ``info``, ``process-params``, ``create``, ``exec-process``, ``check``.
* :func:`main` – entry point delegating to :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer only. All decisions stay in the façade
(:mod:`lib_bridge_scrub.lib_bridge_scrub`); the CLI translates
:class:`ScrubError` into a non-zero exit without printing the payload.
"""

from __future__ import annotations

import logging
import os
from typing import BinaryIO, Sequence

import lib_cli_exit_tools
import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from . import __init__conf__
from . import config as scrub_config
from .domain import ScrubError, has_keywords
from .lib_bridge_scrub import MessageKind, is_scrubbing_enabled, scrub, set_scrubbing, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_KIND_NAMES = [kind.value for kind in MessageKind]


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", handlers=[handler], force=True)


def _scrub_or_fail(kind: MessageKind, payload: bytes) -> bytes:
    try:
        return scrub(kind, payload)
    except ScrubError as exc:
        raise click.ClickException(f"{kind.value}: {type(exc).__name__}: {exc}") from exc


def _emit(kind: MessageKind, stream: BinaryIO) -> None:
    click.echo(_scrub_or_fail(kind, stream.read()), nl=False)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load environment variables from the nearest .env (default: ${scrub_config.DOTENV_ENV_VAR}).",
)
@click.option(
    "--scrub/--no-scrub",
    "scrub_enabled",
    default=None,
    help=f"Enable or disable scrubbing (default: ${scrub_config.SCRUB_ENV_VAR}, else enabled).",
)
@click.option("--debug", is_flag=True, default=False, help="Log pipeline decisions to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    use_dotenv: bool | None,
    scrub_enabled: bool | None,
    debug: bool,
) -> None:
    """Root command storing global flags and applying configuration."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    _configure_logging(debug)

    if scrub_config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(scrub_config.DOTENV_ENV_VAR)):
        scrub_config.enable_dotenv()

    if scrub_enabled is None:
        scrub_config.apply_environment(default=True)
    else:
        set_scrubbing(scrub_enabled)

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    click.echo(summary_info(), nl=False)


@cli.command("process-params", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("rb"), default="-")
def cli_process_params(source: BinaryIO) -> None:
    """Scrub a process parameters JSON document from SOURCE (default stdin)."""
    _emit(MessageKind.PROCESS_PARAMETERS, source)


@cli.command("create", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("rb"), default="-")
def cli_create(source: BinaryIO) -> None:
    """Scrub a container create bridge request from SOURCE (default stdin)."""
    _emit(MessageKind.BRIDGE_CREATE, source)


@cli.command("exec-process", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("rb"), default="-")
def cli_exec_process(source: BinaryIO) -> None:
    """Scrub an execute process bridge request from SOURCE (default stdin)."""
    _emit(MessageKind.BRIDGE_EXEC_PROCESS, source)


@cli.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--kind", type=click.Choice(_KIND_NAMES), required=True, help="Message shape of SOURCE.")
def cli_check(source: BinaryIO, kind: str) -> None:
    """Report whether SOURCE would be scrubbed, passed through, or rejected."""

    message_kind = MessageKind.from_name(kind)
    payload = source.read()
    console = Console(highlight=False, soft_wrap=True)
    console.print(f"kind: {message_kind.value}")
    console.print(f"scrubbing: {'enabled' if is_scrubbing_enabled() else 'disabled'}")
    console.print(f"keywords: {'yes' if has_keywords(payload) else 'no'}")
    result = _scrub_or_fail(message_kind, payload)
    console.print(f"result: {'unchanged' if result is payload else 'scrubbed'}")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with error handling and return the exit code.

    Parameters
    ----------
    argv:
        Optional argument list; defaults to ``sys.argv[1:]``.
    restore_traceback:
        Restore the prior ``lib_cli_exit_tools`` traceback settings afterwards.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
