"""Shell session package."""

from .common import CommandResult, ErrorKind
from .core import ShellSession

__all__ = ["ShellSession", "CommandResult", "ErrorKind"]
