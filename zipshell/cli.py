"""Command-line interface for zipshell."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .audit import AUDIT_LOG_PATH, AuditLog
from .config import DEFAULT_CONFIG_PATH, load_config
from .exceptions import ZipShellError
from .shell import ShellSession
from .vfs import load_vfs

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "ZIPSHELL_LOG_LEVEL"


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _run_repl(session: ShellSession) -> int:
    try:
        while True:
            line = input()
            sys.stdout.write(session.execute(line))
            sys.stdout.flush()
    except (EOFError, KeyboardInterrupt):
        return 0


def _run_shell(_: argparse.Namespace) -> int:
    config = load_config(DEFAULT_CONFIG_PATH)
    logger.info(
        "Starting shell for host %r (log_path=%r, startup_script=%r)",
        config.hostname,
        config.log_path,
        config.startup_script,
    )
    vfs = load_vfs(config.filesystem_path)
    with AuditLog(AUDIT_LOG_PATH) as audit:
        session = ShellSession(vfs, audit)
        return _run_repl(session)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="zipshell",
        description=(
            f"Read-only shell over a ZIP-backed virtual filesystem. "
            f"Reads {DEFAULT_CONFIG_PATH} and audits commands to {AUDIT_LOG_PATH}."
        ),
    )
    parser.set_defaults(func=_run_shell)
    args = parser.parse_args(argv)
    _configure_logging()
    try:
        exit_code = args.func(args)
    except ZipShellError as exc:
        sys.stderr.write(f"zipshell: {exc}\n")
        raise SystemExit(1) from exc
    raise SystemExit(exit_code)


__all__ = ["main"]
