"""Core ShellSession implementation."""

from __future__ import annotations

import logging

from ..audit import AuditLog
from ..path_utils import ROOT
from ..vfs import VirtualFileSystem
from .common import CommandResult, ErrorKind, ShellCommand
from .registry import COMMAND_REGISTRY

logger = logging.getLogger(__name__)


class ShellSession:
    """Runs command lines against a read-only VFS and audits each one."""

    def __init__(
        self,
        vfs: VirtualFileSystem,
        audit: AuditLog,
        *,
        cwd: str = ROOT,
    ) -> None:
        self.vfs = vfs
        self.audit = audit
        self.cwd = cwd
        self.commands: dict[str, ShellCommand] = {}
        self._register_builtin_commands()

    # ------------------------------------------------------------------
    # Command registration
    # ------------------------------------------------------------------
    def _register_builtin_commands(self) -> None:
        # Import command modules for their side effects (registration)
        from . import commands  # noqa: F401

        for spec in COMMAND_REGISTRY.iter_commands():
            self.commands[spec.name] = spec.handler

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    def execute(self, line: str) -> str:
        """Run one raw input line and return the text to print.

        Blank lines print nothing; every line, blank or not, is audited.
        """
        result = self._dispatch(line)
        self.audit.record(line)
        if result is None:
            return ""
        return f"{result.render()}\n"

    def _dispatch(self, line: str) -> CommandResult | None:
        tokens = line.split()
        if not tokens:
            return None
        name, *args = tokens
        handler = self.commands.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return CommandResult.fail(ErrorKind.UNKNOWN_COMMAND)
        result = handler(self.vfs, self.cwd, args)
        if result.ok and result.cwd is not None:
            logger.debug("cwd %s -> %s", self.cwd, result.cwd)
            self.cwd = result.cwd
        return result


__all__ = ["ShellSession"]
