# fileinclude/parsing/parser.py
from __future__ import annotations

import argparse
import re
from typing import List

from fileinclude.constants import DEFAULT_DESTINATION, DEFAULT_MAX_DEPTH, DEFAULT_PATTERNS

_LIST_SPLIT_RE = re.compile(r"[,\s]+")


def split_list(value: str) -> List[str]:
    """Split a comma and/or whitespace separated CLI value into items."""
    return [item for item in _LIST_SPLIT_RE.split(value or "") if item]


def to_bool(value: str) -> bool:
    """Only the literal 'true' (any case) is truthy, anything else is False."""
    return (value or "").strip().lower() == "true"


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - `-i` and `-s` accept several values per occurrence, separated by
          commas or spaces, and may be repeated.
        - `-o` and `-r` take an explicit 'true'/'false' value.
    """
    from fileinclude import __version__

    p = argparse.ArgumentParser(
        prog="fileinclude",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "fileinclude – resolve @@include('path') directives into flattened files\n"
            "Files that are included by another discovered file are treated as "
            "fragments and are not written on their own."
        ),
    )

    g_loc = p.add_argument_group("Discovery")
    g_out = p.add_argument_group("Resolution & output")
    g_log = p.add_argument_group("Logging")

    # -----------------------
    # Discovery
    # -----------------------
    g_loc.add_argument(
        "-i",
        "--include",
        metavar="GLOB",
        action="extend",
        nargs="+",
        dest="include",
        help=(
            f"Glob pattern(s) of files to parse, relative to each source directory "
            f"(default: {', '.join(DEFAULT_PATTERNS)}). '**' matches recursively."
        ),
    )
    g_loc.add_argument(
        "-s",
        "--source",
        metavar="DIR",
        action="extend",
        nargs="+",
        dest="source",
        help="Source directory (or directories) to scan. Required.",
    )

    # -----------------------
    # Resolution & output
    # -----------------------
    g_out.add_argument(
        "-d",
        "--destination",
        metavar="DIR",
        dest="destination",
        default=DEFAULT_DESTINATION,
        help=f"Destination directory (default: {DEFAULT_DESTINATION}).",
    )
    g_out.add_argument(
        "-o",
        "--omit-source-parent",
        metavar="BOOL",
        type=to_bool,
        dest="omit_source_parent",
        default=True,
        help="Drop the source directory from output paths (default: true).",
    )
    g_out.add_argument(
        "-r",
        "--include-recursive",
        metavar="BOOL",
        type=to_bool,
        dest="include_recursive",
        default=True,
        help=(
            "Expand directives inside included files as well (default: true). "
            "With 'false' only one level is inlined."
        ),
    )
    g_out.add_argument(
        "--no-placeholder",
        action="store_false",
        dest="insert_not_found_placeholder",
        help="Keep the literal directive instead of 'File not found: <path>' on missing includes.",
    )
    g_out.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        dest="max_depth",
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum nesting of recursive includes (default: {DEFAULT_MAX_DEPTH}).",
    )
    g_out.add_argument(
        "--copy-plain",
        action="store_true",
        dest="copy_plain",
        help="Also write discovered files without any directive (unless they are fragments).",
    )
    g_out.add_argument(
        "--strict",
        action="store_true",
        dest="strict",
        help="Exit with status 1 when any file error was counted.",
    )
    g_out.add_argument(
        "--report",
        metavar="FILE",
        dest="report_path",
        help="Write the JSON run report to FILE.",
    )

    # -----------------------
    # Logging
    # -----------------------
    g_log.add_argument("--verbose", action="store_true", dest="verbose", help="Verbose output.")
    g_log.add_argument(
        "--extra-verbose",
        action="store_true",
        dest="extra_verbose",
        help="Even more verbose output (or: show everything).",
    )
    g_log.add_argument("--silent", action="store_true", dest="silent", help="No output.")
    g_log.add_argument("--json-logs", action="store_true", dest="json_logs", help="Emit logs as JSON lines.")

    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p
