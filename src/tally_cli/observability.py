"""Structured logging helpers for the counting CLI.

Purpose
    Keep every emission of logging data predictable and contextual without
    forcing callers to adopt a specific logging backend.

Contents
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for structured event payloads.

System Integration
    Used by the adapters, the application helpers and the CLI. The domain
    layer stays free from logging concerns.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping

_LOGGER: Final[logging.Logger] = logging.getLogger("tally_cli")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers."""

    return _LOGGER


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry."""

    _emit(logging.ERROR, message, fields)


def make_event(
    stage: str,
    operation: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for a processing stage.

    Inputs
        stage: Name of the step being observed (``"parse"``, ``"dispatch"``...).
        operation: Selected operation name, if any.
        payload: Optional mapping with extra diagnostic detail.

    Examples
    --------
    >>> make_event('dispatch', 'split', {'number': 10})
    {'stage': 'dispatch', 'operation': 'split', 'number': 10}
    """

    event: dict[str, Any] = {"stage": stage, "operation": operation}
    if payload:
        event |= dict(payload)
    return event


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": dict(fields)})
