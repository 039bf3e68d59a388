"""Session control commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult
from ..registry import COMMAND_REGISTRY

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ...vfs import VirtualFileSystem


@COMMAND_REGISTRY.command("exit")
def exit(vfs: "VirtualFileSystem", current_path: str, _: list[str]) -> CommandResult:  # noqa: A001
    return CommandResult(output="exit")


@COMMAND_REGISTRY.command("clear")
def clear(vfs: "VirtualFileSystem", current_path: str, _: list[str]) -> CommandResult:
    return CommandResult(output="clear")
