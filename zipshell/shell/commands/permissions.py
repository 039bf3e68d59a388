"""Permission commands.

Modes are accepted but never stored: the VFS is read-only, so ``chmod`` only
confirms that the target exists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult, ErrorKind
from ..registry import COMMAND_REGISTRY

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ...vfs import VirtualFileSystem


@COMMAND_REGISTRY.command("chmod")
def chmod(vfs: "VirtualFileSystem", _: str, args: list[str]) -> CommandResult:
    if len(args) < 2:
        return CommandResult.fail(ErrorKind.NOT_ENOUGH_ARGUMENTS)
    path = args[1]
    if path not in vfs:
        return CommandResult.fail(ErrorKind.FILE_NOT_FOUND)
    return CommandResult(output=f"Changed permissions for {path}")
