"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the adapters, the application helpers and
the CLI. The hierarchy lives in the domain layer so inner modules never depend
on Click or on the exit-code helpers.

Contents
--------
* :class:`TallyError` – umbrella base class for all ``tally_cli`` failures.
* :class:`InvalidFormat` – text that could not be parsed into structured data.
* :class:`InvalidListLiteral` – the ``--args`` token is not a list of strings.
* :class:`RoundTripMismatch` – serializing and reparsing a configuration did
  not reproduce it.

System Role
-----------
Parsing problems are user errors and the CLI turns them into usage messages.
:class:`RoundTripMismatch` is an internal consistency failure; the CLI lets it
propagate so ``lib_cli_exit_tools`` prints a diagnostic and exits non-zero.
"""

from __future__ import annotations

from typing import Final

LIST_FORMAT_HINT: Final[str] = "Expected format: ['arg0', 'arg1', ... ]"
"""Hint appended to every list-literal parse failure."""


class TallyError(Exception):
    """Base type for all exceptions emitted by ``tally_cli``."""


class InvalidFormat(TallyError):
    """Raised when input text cannot be parsed into structured data.

    Typical Sources
    ---------------
    The TOML codec (:mod:`tally_cli.adapters.toml_codec`) and the list-literal
    parser behind ``--args``.
    """


class InvalidListLiteral(InvalidFormat):
    """Raised when an ``--args`` token is not a list literal of strings.

    The message always ends with :data:`LIST_FORMAT_HINT` so users see the
    accepted shape next to the parser's own complaint.

    Examples
    --------
    >>> str(InvalidListLiteral("unterminated array"))
    "unterminated array\\n  Expected format: ['arg0', 'arg1', ... ]"
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"{reason}\n  {LIST_FORMAT_HINT}")
        self.reason = reason


class RoundTripMismatch(TallyError):
    """Signals that a configuration did not survive serialization unchanged.

    Why
    ----
    The round trip is a self-consistency assertion. A failure means the
    schema mapping is broken, not that the user typed something wrong, so it
    is never reported as a usage error.
    """
