"""Exception hierarchy for zipshell startup failures."""

from __future__ import annotations


class ZipShellError(Exception):
    """Base class for errors that abort the emulator."""


class ConfigError(ZipShellError):
    """Configuration file is missing or unreadable."""


class AuditLogError(ZipShellError):
    """Audit log could not be opened or written."""


class VFSError(ZipShellError):
    """Virtual filesystem was built from invalid entries."""


__all__ = ["ZipShellError", "ConfigError", "AuditLogError", "VFSError"]
