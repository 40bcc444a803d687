"""Log sink capability for dispatch telemetry.

The dispatcher never logs through an ambient global. It is handed a
``LogSink`` and calls it through ``emit()``, which treats delivery as
best-effort: a failing sink never fails a dispatch.
"""

import logging
from typing import Protocol, runtime_checkable

LOG_PREFIX = "[assman]"

logger = logging.getLogger("assman.dispatch")


@runtime_checkable
class LogSink(Protocol):
    """Anything that accepts a ``logging`` level and a message."""

    def log(self, level: int, message: str) -> None: ...


class LoggerSink:
    """Adapt a ``logging.Logger`` to the ``LogSink`` protocol."""

    __slots__ = ("_logger",)

    def __init__(self, target: logging.Logger | None = None) -> None:
        self._logger = target or logger

    def log(self, level: int, message: str) -> None:
        self._logger.log(level, "%s %s", LOG_PREFIX, message)


class RecordingSink:
    """Keep ``(level, message)`` pairs in memory.

    Handy for tests and for the ``assman route`` command, which prints
    what a dispatch would have logged.
    """

    __slots__ = ("records",)

    def __init__(self) -> None:
        self.records: list[tuple[int, str]] = []

    def log(self, level: int, message: str) -> None:
        self.records.append((level, message))

    def messages(self, level: int | None = None) -> list[str]:
        return [msg for lvl, msg in self.records if level is None or lvl == level]


def emit(sink: LogSink | None, level: int, message: str) -> None:
    """Deliver *message* to *sink*, discarding any sink failure."""
    if sink is None:
        return
    try:
        sink.log(level, message)
    except Exception:  # noqa: BLE001 — telemetry must not break dispatch
        logger.debug("%s log sink %r failed", LOG_PREFIX, sink, exc_info=True)
