"""Counting operations and the dispatcher that prints them.

Purpose
-------
Hold the three pure counting generators and the small runner that turns a
selected :class:`~tally_cli.domain.config.Operation` into console output.

Contents
--------
* :func:`increment` / :func:`decrement` / :func:`split` – pure generators.
* :data:`OPERATIONS` – lookup from :class:`OperationKind` to generator.
* :func:`completion_value` – number reported in the ``"<n> done!"`` line.
* :func:`describe_verbosity` / :func:`describe_args` – status lines printed
  before dispatch.
* :func:`run_operation` – prints the values (when verbose) and the completion
  line, or ``NOP`` when nothing was selected.

System Role
-----------
Called by the CLI after parsing and the optional round trip. Output goes
through an injected ``echo`` callable so the module stays free of Click.
"""

from __future__ import annotations

from typing import Callable, Final, Iterator, Mapping, Sequence

from ..domain.config import Operation, OperationKind
from ..observability import log_debug, make_event

Echo = Callable[..., None]

NOP_MESSAGE: Final[str] = "NOP"
NO_ARGS_MESSAGE: Final[str] = "No args passed"

_VERBOSITY_LABELS: Final[tuple[str, ...]] = ("Basic logging", "Detailed logging", "All logging")
_VERBOSITY_OVERFLOW: Final[str] = "You can't get crazier than this"


def increment(number: int) -> Iterator[int]:
    """Yield ``0, 1, ..., number - 1``.

    >>> list(increment(3))
    [0, 1, 2]
    >>> list(increment(-2))
    []
    """

    yield from range(number)


def decrement(number: int) -> Iterator[int]:
    """Yield ``number, number - 1, ..., 1``.

    >>> list(decrement(3))
    [3, 2, 1]
    """

    yield from range(number, 0, -1)


def split(number: int) -> Iterator[int]:
    """Yield *number* and each successive halving while the value is positive.

    >>> list(split(10))
    [10, 5, 2, 1]
    >>> list(split(0))
    []
    """

    value = number
    while value > 0:
        yield value
        value //= 2


OPERATIONS: Final[Mapping[OperationKind, Callable[[int], Iterator[int]]]] = {
    OperationKind.INCREMENT: increment,
    OperationKind.DECREMENT: decrement,
    OperationKind.SPLIT: split,
}


def completion_value(operation: Operation) -> int:
    """Return the number printed in front of ``done!`` for *operation*.

    Increment reports its target; the two countdowns always finish at zero.
    """

    if operation.kind is OperationKind.INCREMENT:
        return operation.number
    return 0


def describe_verbosity(verbosity: int) -> str:
    """Return the banner line for a verbosity level.

    >>> describe_verbosity(0), describe_verbosity(7)
    ('Basic logging', "You can't get crazier than this")
    """

    if verbosity < len(_VERBOSITY_LABELS):
        return _VERBOSITY_LABELS[verbosity]
    return _VERBOSITY_OVERFLOW


def describe_args(args: Sequence[str] | None) -> str:
    """Return the line describing the parsed ``--args`` list.

    >>> describe_args(("a", 'b"c'))
    'Arg vec: ["a", "b\\\\"c"]'
    >>> describe_args(None)
    'No args passed'
    """

    if args is None:
        return NO_ARGS_MESSAGE
    rendered = ", ".join(_quote(item) for item in args)
    return f"Arg vec: [{rendered}]"


def run_operation(operation: Operation | None, verbosity: int, echo: Echo) -> None:
    """Run *operation* and print its progress through *echo*.

    Parameters
    ----------
    operation:
        Selected operation or ``None`` for the no-op path.
    verbosity:
        Intermediate values are printed only when this is above zero.
    echo:
        ``click.echo``-compatible callable accepting ``nl=False``.
    """

    if operation is None:
        echo(NOP_MESSAGE)
        return

    log_debug("operation_started", **make_event("dispatch", operation.kind.value, {"number": operation.number}))
    emitted = 0
    for value in OPERATIONS[operation.kind](operation.number):
        emitted += 1
        if verbosity > 0:
            echo(f"{value}..", nl=False)
    echo(f"{completion_value(operation)} done!")
    log_debug("operation_finished", **make_event("dispatch", operation.kind.value, {"emitted": emitted}))


def _quote(item: str) -> str:
    escaped = item.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
