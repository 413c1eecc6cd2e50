"""Parse the ``--args`` token into an ordered list of strings.

Purpose
-------
Accept a single command line token such as ``"['a','b']"`` and turn it into
``('a', 'b')``. The token is treated as the right-hand side of a TOML
assignment, so quoting rules (single-quoted literal strings, double-quoted
basic strings with escapes) follow TOML.

Contents
--------
* :data:`PREFIX` – assignment prefix injected when the token lacks it.
* :func:`parse_list_literal` – public parser raising
  :class:`~tally_cli.domain.errors.InvalidListLiteral` on failure.
"""

from __future__ import annotations

from typing import Final

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[assignment]

from ..domain.errors import InvalidListLiteral
from ..observability import log_debug, log_error

PREFIX: Final[str] = "args="
_KEY: Final[str] = "args"


def parse_list_literal(token: str) -> tuple[str, ...]:
    """Return the strings encoded in *token*.

    Why
    ----
    Passing a whole list through one option keeps the option single-valued,
    so it never competes with subcommand names or positional numbers.

    Parameters
    ----------
    token:
        Raw option value. ``args=`` is prepended unless already present.

    Returns
    -------
    tuple[str, ...]
        Items in the order they were written.

    Raises
    ------
    InvalidListLiteral
        When the augmented text is not valid TOML or ``args`` is not an
        array of strings. The message carries the parser error and a format
        hint.

    Examples
    --------
    >>> parse_list_literal("['a','b','c']")
    ('a', 'b', 'c')
    >>> parse_list_literal("args=[\\"x\\"]")
    ('x',)
    >>> parse_list_literal("[]")
    ()
    """

    document = token if token.startswith(PREFIX) else PREFIX + token
    try:
        data = tomllib.loads(document)
    except tomllib.TOMLDecodeError as exc:  # type: ignore[attr-defined]
        log_error("args_invalid", token=token, error=str(exc))
        raise InvalidListLiteral(str(exc)) from exc

    values = data.get(_KEY)
    if not isinstance(values, list):
        log_error("args_invalid", token=token, error="not an array")
        raise InvalidListLiteral(f"'{_KEY}' must be an array, got {type(values).__name__}")
    if len(data) != 1:
        extra = sorted(key for key in data if key != _KEY)
        log_error("args_invalid", token=token, error="unexpected keys")
        raise InvalidListLiteral(f"unexpected keys after the list: {', '.join(extra)}")
    for index, value in enumerate(values):
        if not isinstance(value, str):
            log_error("args_invalid", token=token, error="non-string item")
            raise InvalidListLiteral(f"item {index} must be a string, got {type(value).__name__}")

    result = tuple(values)
    log_debug("args_parsed", count=len(result))
    return result
