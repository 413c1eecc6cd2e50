"""Public package surface for the counting CLI.

Exports the configuration value objects, the TOML codec entry points and the
logger accessor so ``import tally_cli`` and ``python -m tally_cli`` share the
same building blocks.
"""

from __future__ import annotations

from .adapters.list_literal import parse_list_literal
from .adapters.toml_codec import dumps, loads
from .domain.config import CliConfig, Operation, OperationKind
from .domain.errors import InvalidFormat, InvalidListLiteral, RoundTripMismatch, TallyError
from .observability import get_logger

__all__ = [
    "CliConfig",
    "InvalidFormat",
    "InvalidListLiteral",
    "Operation",
    "OperationKind",
    "RoundTripMismatch",
    "TallyError",
    "dumps",
    "get_logger",
    "loads",
    "parse_list_literal",
]
