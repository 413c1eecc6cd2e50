"""Domain-level configuration value objects.

Purpose
-------
Anchor the immutable :class:`CliConfig` that carries parsed command line state
through the program. This module contains no I/O and knows nothing about
Click or TOML.

Contents
--------
* :class:`OperationKind` – the three counting behaviours.
* :class:`Operation` – an operation kind plus its integer argument.
* :class:`CliConfig` – verbosity, the round-trip flag, the optional ``--args``
  list and the optional operation.
* :data:`INT32_MIN` / :data:`INT32_MAX` – bounds for operation numbers.

System Role
-----------
The CLI builds exactly one :class:`CliConfig` per invocation. The TOML codec
serializes it and the dispatcher consumes it. Equality is structural, which
is what the round-trip check relies on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


class OperationKind(str, Enum):
    """Name of a counting operation as it appears on the command line."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    SPLIT = "split"


@dataclass(frozen=True, slots=True)
class Operation:
    """Selected counting behaviour and its argument.

    Examples
    --------
    >>> Operation(OperationKind.SPLIT, 10)
    Operation(kind=<OperationKind.SPLIT: 'split'>, number=10)
    >>> Operation("split", 10) == Operation(OperationKind.SPLIT, 10)
    True
    """

    kind: OperationKind
    number: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", OperationKind(self.kind))
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise TypeError(f"Operation number must be an int, got {type(self.number).__name__}")
        if not INT32_MIN <= self.number <= INT32_MAX:
            raise ValueError(f"Operation number {self.number} is outside the 32-bit signed range")


@dataclass(frozen=True, slots=True)
class CliConfig:
    """Immutable snapshot of everything the command line selected.

    Why
    ----
    Every later stage (round trip, dispatch) reads from one value object, so
    comparing two configurations is a plain ``==``.

    Attributes
    ----------
    verbosity:
        Number of ``-v`` occurrences. Non-negative and unbounded; consumers
        treat anything above 2 the same way.
    flag:
        Enables the TOML round-trip self-check.
    args:
        Ordered strings parsed from ``--args`` or ``None`` when absent. Lists
        are normalised to tuples to keep the object hashable.
    operation:
        Selected :class:`Operation` or ``None`` for the no-op path.

    Examples
    --------
    >>> CliConfig(verbosity=1, args=["a", "b"]).args
    ('a', 'b')
    >>> CliConfig() == CliConfig(verbosity=0, flag=False)
    True
    """

    verbosity: int = 0
    flag: bool = False
    args: tuple[str, ...] | None = None
    operation: Operation | None = None

    def __post_init__(self) -> None:
        if self.verbosity < 0:
            raise ValueError("verbosity must be non-negative")
        if self.args is not None:
            object.__setattr__(self, "args", _as_str_tuple(self.args))


def _as_str_tuple(values: Iterable[str]) -> tuple[str, ...]:
    """Return *values* as a tuple, rejecting anything that is not a string."""

    items = tuple(values)
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"args entries must be strings, got {type(item).__name__}")
    return items
