"""CLI adapter for ``tally_cli`` built on ``lib_cli_exit_tools``.

Purpose
-------
Parse the command line into a :class:`~tally_cli.domain.config.CliConfig`,
optionally prove the configuration survives a TOML round trip, and run the
selected counting operation.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root group holding the global options (``-v``, ``--flag``,
  ``--args``, ``--traceback``).
* :func:`cli_increment` / :func:`cli_decrement` / :func:`cli_split` – the
  optional subcommands; each returns the selected
  :class:`~tally_cli.domain.config.Operation`.
* :func:`_run` – result callback that assembles the configuration and drives
  the round trip and the dispatcher.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. Usage problems become Click errors (exit code 2). Internal
failures such as :class:`~tally_cli.domain.errors.RoundTripMismatch` are left
to ``lib_cli_exit_tools`` which prints the diagnostic and picks the exit code.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .adapters.list_literal import parse_list_literal
from .application.operations import describe_args, describe_verbosity, run_operation
from .application.roundtrip import verify_round_trip
from .domain.config import INT32_MAX, INT32_MIN, CliConfig, Operation, OperationKind
from .domain.errors import InvalidListLiteral
from .observability import log_debug, make_event

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
# subcommands take signed numbers, so "-4" must not be read as an option
OPERATION_CONTEXT_SETTINGS = {**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

NUMBER_TYPE: Final = click.IntRange(INT32_MIN, INT32_MAX)


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("tally_cli")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _validate_args(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[tuple[str, ...]]:
    """Click callback turning the raw ``--args`` token into a tuple of strings."""

    if value is None:
        return None
    try:
        return parse_list_literal(value)
    except InvalidListLiteral as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


@click.group(
    help="Count up, count down, or halve a number",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="tally_cli",
    message="tally_cli version %(version)s",
)
@click.option("-v", "verbosity", count=True, help="Verbosity (repeat for more detail)")
@click.option("-f", "--flag", is_flag=True, default=False, help="Print the configuration as TOML and verify it reparses")
@click.option(
    "--args",
    "args",
    metavar="ARGS",
    default=None,
    callback=_validate_args,
    help="A list of args, e.g. \"['a', 'b']\"",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbosity: int,
    flag: bool,
    args: Optional[tuple[str, ...]],
    traceback: bool,
) -> None:
    """Root command storing the global options for the result callback.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("increment", context_settings=OPERATION_CONTEXT_SETTINGS)
@click.argument("number", type=NUMBER_TYPE)
def cli_increment(number: int) -> Operation:
    """Counts up from 0 to the given number."""

    return Operation(OperationKind.INCREMENT, number)


@cli.command("decrement", context_settings=OPERATION_CONTEXT_SETTINGS)
@click.argument("number", type=NUMBER_TYPE)
def cli_decrement(number: int) -> Operation:
    """Counts down from the given number to 0."""

    return Operation(OperationKind.DECREMENT, number)


@cli.command("split", context_settings=OPERATION_CONTEXT_SETTINGS)
@click.argument("number", type=NUMBER_TYPE)
def cli_split(number: int) -> Operation:
    """Divides the given number by 2 until it reaches 0."""

    return Operation(OperationKind.SPLIT, number)


@cli.result_callback()
def _run(
    operation: Optional[Operation],
    verbosity: int,
    flag: bool,
    args: Optional[tuple[str, ...]],
    traceback: bool,
) -> None:
    """Assemble the configuration, run the optional round trip, then dispatch.

    Click calls this after the subcommand (or directly when none was given)
    with the subcommand's return value and the root group's parameters.
    """

    config = CliConfig(verbosity=verbosity, flag=flag, args=args, operation=operation)
    log_debug(
        "config_parsed",
        **make_event("parse", operation.kind.value if operation else None, {"verbosity": verbosity, "flag": flag}),
    )

    click.echo(describe_verbosity(config.verbosity))
    click.echo(describe_args(config.args))
    if config.flag:
        config = verify_round_trip(config, click.echo)
    run_operation(config.operation, config.verbosity, click.echo)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="tally_cli",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
