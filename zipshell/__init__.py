"""zipshell package: read-only shell emulator over a ZIP-backed filesystem."""

from .audit import AuditLog
from .config import ShellConfig, load_config
from .exceptions import AuditLogError, ConfigError, VFSError, ZipShellError
from .shell import CommandResult, ErrorKind, ShellSession
from .vfs import DEFAULT_ENTRIES, VirtualFileSystem, load_vfs

__all__ = [
    "VirtualFileSystem",
    "ShellSession",
    "CommandResult",
    "ErrorKind",
    "AuditLog",
    "ShellConfig",
    "load_config",
    "load_vfs",
    "DEFAULT_ENTRIES",
    "ZipShellError",
    "ConfigError",
    "AuditLogError",
    "VFSError",
]
