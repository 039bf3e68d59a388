"""Shared shell types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..vfs import VirtualFileSystem


class ErrorKind(Enum):
    """Failure categories, valued with the text the shell prints for them."""

    NOT_ENOUGH_ARGUMENTS = "Error: not enough arguments"
    PATH_NOT_FOUND = "Error: path not found"
    FILE_NOT_FOUND = "Error: file not found"
    UNKNOWN_COMMAND = "Unknown command"


@dataclass(slots=True, frozen=True)
class CommandResult:
    output: str = ""
    error: ErrorKind | None = None
    # Directory the session should move to once the command succeeds.
    cwd: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def fail(cls, error: ErrorKind) -> "CommandResult":
        return cls(error=error)

    def render(self) -> str:
        if self.error is not None:
            return self.error.value
        return self.output


ShellCommand = Callable[["VirtualFileSystem", str, list[str]], CommandResult]


__all__ = ["CommandResult", "ErrorKind", "ShellCommand"]
