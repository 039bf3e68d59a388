"""Key/value configuration file reader."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.csv"


@dataclass
class ShellConfig:
    """Settings read from ``config.csv``.

    Only ``filesystem_path`` affects behaviour; the other keys are kept for
    display and diagnostics.
    """

    hostname: str = ""
    filesystem_path: str = ""
    log_path: str = ""
    startup_script: str = ""


_KNOWN_KEYS = frozenset(f.name for f in fields(ShellConfig))


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> ShellConfig:
    config = ShellConfig()
    try:
        with open(path, newline="", encoding="utf-8") as handle:
            rows = list(csv.reader(handle))
    except OSError as exc:
        raise ConfigError(f"Unable to open config file {path}: {exc}") from exc

    for lineno, row in enumerate(rows, start=1):
        if not row or not any(cell.strip() for cell in row):
            continue
        if len(row) < 2:
            logger.warning("Skipping malformed config line %d in %s: %r", lineno, path, row)
            continue
        key, value = row[0].strip(), row[1].strip()
        if key not in _KNOWN_KEYS:
            logger.debug("Ignoring unknown config key %r", key)
            continue
        setattr(config, key, value)
    return config


__all__ = ["DEFAULT_CONFIG_PATH", "ShellConfig", "load_config"]
