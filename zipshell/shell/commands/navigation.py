"""Navigation-oriented commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..common import CommandResult, ErrorKind
from ..registry import COMMAND_REGISTRY
from ...path_utils import (
    ROOT,
    child_candidate,
    final_segment,
    parent_path,
    trim_trailing_slash,
)

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ...vfs import VirtualFileSystem


@COMMAND_REGISTRY.command("ls")
def ls(vfs: "VirtualFileSystem", current_path: str, _: list[str]) -> CommandResult:
    # The entry after the first segment equal to the current directory's name
    # is taken as the child, so at "/" the leading empty segment matches.
    anchor = final_segment(current_path)
    names: list[str] = []
    seen: set[str] = set()
    for entry in vfs.under(current_path):
        parts = entry.split("/")
        try:
            idx = parts.index(anchor)
        except ValueError:
            continue
        if idx + 1 >= len(parts):
            continue
        name = parts[idx + 1]
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return CommandResult(output="\n".join(names))


@COMMAND_REGISTRY.command("cd")
def cd(vfs: "VirtualFileSystem", current_path: str, args: list[str]) -> CommandResult:
    if not args:
        return CommandResult.fail(ErrorKind.NOT_ENOUGH_ARGUMENTS)
    target = trim_trailing_slash(args[0]) or ROOT
    if target == "..":
        new_path = parent_path(current_path)
        return CommandResult(output=new_path, cwd=new_path)
    if target == ROOT:
        return CommandResult(output=ROOT, cwd=ROOT)
    candidate = child_candidate(current_path, target)
    if not vfs.has_prefix(candidate):
        return CommandResult.fail(ErrorKind.PATH_NOT_FOUND)
    new_path = f"{candidate}/"
    return CommandResult(output=new_path, cwd=new_path)
