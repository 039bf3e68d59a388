"""Search-oriented commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult, ErrorKind
from ..registry import COMMAND_REGISTRY

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ...vfs import VirtualFileSystem


@COMMAND_REGISTRY.command("find")
def find(vfs: "VirtualFileSystem", _: str, args: list[str]) -> CommandResult:
    if not args:
        return CommandResult.fail(ErrorKind.NOT_ENOUGH_ARGUMENTS)
    match = vfs.first_containing(args[0])
    if match is None:
        return CommandResult.fail(ErrorKind.PATH_NOT_FOUND)
    return CommandResult(output=match)
