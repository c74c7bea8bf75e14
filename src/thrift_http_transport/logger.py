"""Logging for the transport package.

Every component logs through a :class:`BoundLogger`: a stdlib logger with a
minimum level and a small key/value context (the transport URL, the session
kind) attached to each record as ``record.context``.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, Mapping

LogLevel = Literal["trace", "debug", "info", "warn", "error"]

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LOGGER_NAME = "thrift_http_transport"

LEVELS: dict[LogLevel, int] = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class BoundLogger:
    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        level: LogLevel = "info",
        context: Mapping[str, Any] | None = None,
    ) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: {level!r}")
        self._logger = logger or _default_logger()
        self._level = level
        self._context = dict(context or {})

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def trace(self, msg: str, *args: Any) -> None:
        self._log("trace", msg, args)

    def debug(self, msg: str, *args: Any) -> None:
        self._log("debug", msg, args)

    def info(self, msg: str, *args: Any) -> None:
        self._log("info", msg, args)

    def warn(self, msg: str, *args: Any) -> None:
        self._log("warn", msg, args)

    def error(self, msg: str, *args: Any) -> None:
        self._log("error", msg, args)

    def child(self, name: str) -> "BoundLogger":
        """Sub-logger ``<name>`` keeping this logger's level and context."""
        return BoundLogger(self._logger.getChild(name), level=self._level, context=self._context)

    def bind(self, **context: Any) -> "BoundLogger":
        """Return a logger whose records also carry ``context``."""
        return BoundLogger(self._logger, level=self._level, context={**self._context, **context})

    def _log(self, level: LogLevel, msg: str, args: tuple[Any, ...]) -> None:
        if LEVELS[level] < LEVELS[self._level]:
            return
        self._logger.log(LEVELS[level], msg, *args, extra={"context": dict(self._context)})


def _default_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def create_logger(
    *, logger: logging.Logger | BoundLogger | None = None, level: LogLevel = "info"
) -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "LEVELS", "LOGGER_NAME", "LogLevel", "TRACE_LEVEL", "create_logger"]
