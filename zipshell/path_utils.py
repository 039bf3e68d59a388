"""Helpers for interpreting path tokens against the current directory.

Paths are handled as plain strings: no normalization happens, so ``.`` and
repeated slashes are matched literally against VFS entries.
"""

from __future__ import annotations

ROOT = "/"


def trim_trailing_slash(path: str) -> str:
    return path.rstrip("/")


def split_segments(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def final_segment(path: str) -> str:
    """Return the last non-empty segment of ``path`` (``""`` at the root)."""
    segments = split_segments(path)
    return segments[-1] if segments else ""


def parent_path(path: str) -> str:
    """Parent directory as ``cd ..`` reports it (no trailing slash)."""
    segments = split_segments(path)
    if len(segments) <= 1:
        return ROOT
    return ROOT + "/".join(segments[:-1])


def child_candidate(current: str, token: str) -> str:
    return f"{trim_trailing_slash(current)}/{token}"


__all__ = [
    "ROOT",
    "child_candidate",
    "final_segment",
    "parent_path",
    "split_segments",
    "trim_trailing_slash",
]
