"""TOML codec for :class:`~tally_cli.domain.config.CliConfig`.

Purpose
-------
Translate the configuration value object to TOML text and back. Reading uses
``tomllib`` (``tomli`` before Python 3.11); writing uses ``tomli_w``, the
matching writer for that parser.

Contents
--------
* :func:`to_mapping` / :func:`from_mapping` – plain-dict mapping of the schema.
* :func:`dumps` – serialize a configuration to TOML.
* :func:`loads` – parse TOML back into a configuration.

Document Layout
---------------
``verbosity`` and ``flag`` are always written. ``args`` and the
``[operation]`` table (``kind`` and ``number``) appear only when set, since
TOML has no null value::

    verbosity = 1
    flag = true
    args = ["a", "b"]

    [operation]
    kind = "split"
    number = 10
"""

from __future__ import annotations

from typing import Any, Mapping

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[assignment]

import tomli_w

from ..domain.config import CliConfig, Operation, OperationKind
from ..domain.errors import InvalidFormat
from ..observability import log_debug, log_error

_TOP_LEVEL_KEYS = frozenset({"verbosity", "flag", "args", "operation"})
_OPERATION_KEYS = frozenset({"kind", "number"})


def to_mapping(config: CliConfig) -> dict[str, Any]:
    """Return the TOML-ready mapping for *config*.

    Examples
    --------
    >>> to_mapping(CliConfig(verbosity=2, operation=Operation(OperationKind.SPLIT, 4)))
    {'verbosity': 2, 'flag': False, 'operation': {'kind': 'split', 'number': 4}}
    """

    data: dict[str, Any] = {"verbosity": config.verbosity, "flag": config.flag}
    if config.args is not None:
        data["args"] = list(config.args)
    if config.operation is not None:
        data["operation"] = {
            "kind": config.operation.kind.value,
            "number": config.operation.number,
        }
    return data


def from_mapping(data: Mapping[str, Any]) -> CliConfig:
    """Rebuild a :class:`CliConfig` from a parsed mapping.

    Raises
    ------
    InvalidFormat
        When keys are unknown, missing, or carry the wrong types.
    """

    unknown = set(data) - _TOP_LEVEL_KEYS
    if unknown:
        raise InvalidFormat(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    verbosity = _require(data, "verbosity", int)
    if verbosity < 0:
        raise InvalidFormat("'verbosity' must be non-negative")
    flag = _require(data, "flag", bool)

    args = data.get("args")
    if args is not None:
        if not isinstance(args, list) or not all(isinstance(item, str) for item in args):
            raise InvalidFormat("'args' must be an array of strings")

    operation = None
    table = data.get("operation")
    if table is not None:
        operation = _operation_from_table(table)

    return CliConfig(
        verbosity=verbosity,
        flag=flag,
        args=tuple(args) if args is not None else None,
        operation=operation,
    )


def dumps(config: CliConfig) -> str:
    """Serialize *config* to TOML text.

    Examples
    --------
    >>> print(dumps(CliConfig(verbosity=1, flag=True, args=("a",))), end="")
    verbosity = 1
    flag = true
    args = [
        "a",
    ]
    """

    text = tomli_w.dumps(to_mapping(config))
    log_debug("config_serialized", size=len(text))
    return text


def loads(text: str) -> CliConfig:
    """Parse TOML *text* produced by :func:`dumps` back into a configuration."""

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:  # type: ignore[attr-defined]
        log_error("config_invalid", format="toml", error=str(exc))
        raise InvalidFormat(f"Invalid TOML configuration: {exc}") from exc
    return from_mapping(data)


def _operation_from_table(table: object) -> Operation:
    """Validate the ``[operation]`` table and build an :class:`Operation`."""

    if not isinstance(table, Mapping):
        raise InvalidFormat("'operation' must be a table")
    unknown = set(table) - _OPERATION_KEYS
    if unknown:
        raise InvalidFormat(f"Unknown operation keys: {', '.join(sorted(unknown))}")
    kind = _require(table, "kind", str)
    number = _require(table, "number", int)
    try:
        return Operation(OperationKind(kind), number)
    except ValueError as exc:
        raise InvalidFormat(f"Invalid operation: {exc}") from exc


def _require(data: Mapping[str, Any], key: str, expected: type) -> Any:
    """Return ``data[key]`` after checking presence and type."""

    if key not in data:
        raise InvalidFormat(f"Missing required key '{key}'")
    value = data[key]
    # bool is an int subclass; keep the two apart
    if expected is int and isinstance(value, bool):
        raise InvalidFormat(f"'{key}' must be an integer, got bool")
    if not isinstance(value, expected):
        raise InvalidFormat(f"'{key}' must be {expected.__name__}, got {type(value).__name__}")
    return value
