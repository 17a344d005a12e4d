from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

DEFAULT_PATTERNS: tuple = ("**/*.html",)
DEFAULT_DESTINATION: str = "build"

NOT_FOUND_TEMPLATE: str = "File not found: {filename}"
CYCLIC_TEMPLATE: str = "Cyclic include: {filename}"
SUMMARY_TEMPLATE: str = "Files written: {written}, File errors: {errors}"
DEPTH_TEMPLATE: str = "Include depth exceeded: {filename}"

# Nesting limit for recursive includes; each level costs three Python frames.
DEFAULT_MAX_DEPTH: int = 100
