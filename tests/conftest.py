import pytest

from zipshell import AuditLog, ShellSession, VirtualFileSystem


@pytest.fixture
def vfs() -> VirtualFileSystem:
    return VirtualFileSystem.default()


@pytest.fixture
def audit(tmp_path):
    with AuditLog(tmp_path / "log.csv", clock=lambda: 1700000000.75) as log:
        yield log


@pytest.fixture
def session(vfs, audit) -> ShellSession:
    return ShellSession(vfs, audit)
