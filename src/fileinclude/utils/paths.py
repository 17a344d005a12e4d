# src/fileinclude/utils/paths.py
"""
paths – Small, centralized path helpers for fileinclude.

Directive paths and discovered filenames are handled as POSIX-style
strings ('/'-separated), so these helpers split on '/' only.

Provides:
  • last_segment(str)      – final path segment ('a/b/c.html' -> 'c.html')
  • parent_segments(str)   – everything but the final segment ('a/b/c.html' -> 'a/b')
  • join_path(*parts)      – posix join that ignores empty parts
  • is_hidden_path(Path)   – dot-segment detection
"""

from __future__ import annotations

import posixpath
from pathlib import Path


def last_segment(path: str) -> str:
    return path.split("/")[-1]


def parent_segments(path: str) -> str:
    parts = path.split("/")
    parts.pop()
    return "/".join(parts)


def join_path(*parts: str) -> str:
    """Join non-empty parts with '/'. An absolute later part wins, as in posixpath."""
    kept = [p for p in parts if p]
    if not kept:
        return ""
    return posixpath.join(*kept)


def is_hidden_path(p: Path) -> bool:
    """Return True if *p* has any hidden segment (leading-dot component)."""
    return any(part.startswith(".") and part not in (".", "..") for part in p.parts)
