"""TOML round-trip self-check for parsed configurations.

Purpose
-------
Prove that the schema mapping in :mod:`tally_cli.adapters.toml_codec` is
lossless for the configuration at hand: serialize, print, reparse, compare.

Contents
--------
* :data:`BEGIN_MARKER` / :data:`END_MARKER` – lines framing the TOML body.
* :func:`verify_round_trip` – the check itself.
"""

from __future__ import annotations

from typing import Callable, Final

from ..adapters import toml_codec
from ..domain.config import CliConfig
from ..domain.errors import InvalidFormat, RoundTripMismatch
from ..observability import log_error, log_info

BANNER: Final[str] = "TOML flag enabled"
BEGIN_MARKER: Final[str] = "// BEGIN TOML"
END_MARKER: Final[str] = "// END TOML"


def verify_round_trip(config: CliConfig, echo: Callable[[str], None]) -> CliConfig:
    """Serialize *config*, print it, parse it back and require equality.

    Returns
    -------
    CliConfig
        The reparsed configuration (equal to *config*).

    Raises
    ------
    RoundTripMismatch
        When the reparsed value differs or the emitted text cannot be read
        back. Both mean the codec is broken, so callers must not treat this as
        a user error.
    """

    text = toml_codec.dumps(config)
    echo(BANNER)
    echo(BEGIN_MARKER)
    echo(text.rstrip("\n"))
    echo(END_MARKER)

    try:
        reparsed = toml_codec.loads(text)
    except InvalidFormat as exc:
        log_error("round_trip_mismatch", reason="unreadable", error=str(exc))
        raise RoundTripMismatch(f"Serialized configuration could not be parsed back: {exc}") from exc

    if reparsed != config:
        log_error("round_trip_mismatch", reason="unequal", original=repr(config), reparsed=repr(reparsed))
        raise RoundTripMismatch("Reparsed configuration is not equal to the original configuration")

    log_info("round_trip_verified", size=len(text))
    return reparsed
