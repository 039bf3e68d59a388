"""CSV audit log of every command line the shell receives."""

from __future__ import annotations

import csv
import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import IO

from .exceptions import AuditLogError

logger = logging.getLogger(__name__)

AUDIT_LOG_PATH = "log.csv"


class AuditLog:
    """Append-only ``(unix_seconds, command_line)`` rows.

    The file is created (truncated) when the log is opened and closed when
    the context exits, which flushes any buffered rows.
    """

    def __init__(
        self,
        path: str | Path = AUDIT_LOG_PATH,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.path = Path(path)
        self.clock = clock
        self._handle: IO[str] | None = None
        self._writer = None

    @property
    def closed(self) -> bool:
        return self._handle is None

    def open(self) -> "AuditLog":
        if self._handle is not None:
            return self
        try:
            self._handle = open(self.path, "w", newline="", encoding="utf-8")
        except OSError as exc:
            raise AuditLogError(f"Unable to create audit log {self.path}: {exc}") from exc
        self._writer = csv.writer(self._handle, lineterminator="\n")
        logger.debug("Audit log opened at %s", self.path)
        return self

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle, self._writer = self._handle, None, None
        try:
            handle.close()
        except OSError as exc:
            raise AuditLogError(f"Unable to flush audit log {self.path}: {exc}") from exc

    def __enter__(self) -> "AuditLog":
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def record(self, line: str) -> None:
        if self._writer is None:
            raise AuditLogError("Audit log is not open")
        try:
            self._writer.writerow([int(self.clock()), line])
        except OSError as exc:
            raise AuditLogError(f"Unable to write audit log {self.path}: {exc}") from exc


__all__ = ["AUDIT_LOG_PATH", "AuditLog"]
