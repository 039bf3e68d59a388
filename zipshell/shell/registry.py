"""Registry for shell commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Iterable

from .common import ShellCommand


@dataclass(slots=True)
class CommandSpec:
    name: str
    handler: ShellCommand


class CommandRegistry:
    """Name-to-handler table filled in by the command modules."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, name: str, handler: ShellCommand) -> ShellCommand:
        if name in self._commands:
            raise ValueError(f"Command {name!r} is already registered")
        self._commands[name] = CommandSpec(name, handler)
        return handler

    def command(self, name: str) -> Callable[[ShellCommand], ShellCommand]:
        """Decorator variant for registering shell commands."""

        def decorator(func: ShellCommand) -> ShellCommand:
            return self.register(name, func)

        return decorator

    def iter_commands(self) -> Iterable[CommandSpec]:
        return tuple(self._commands.values())


COMMAND_REGISTRY = CommandRegistry()


__all__ = ["COMMAND_REGISTRY", "CommandRegistry", "CommandSpec"]
