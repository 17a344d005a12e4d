from __future__ import annotations

"""
IncludeResolver – recursive substitution of include directives.

For a file, the resolver reads its content, finds the directives and
replaces each one, by position, with the content of the referenced file.
Referenced paths are relative to the *including* file's directory.

Behavior:
    - include_recursive=True: included fragments are expanded in turn, to
      at most max_depth levels. The chain of files being resolved is threaded through the
      recursion, and a directive pointing back into that chain is reported
      as a CyclicInclude instead of recursing forever.
      Deeper nesting is reported as IncludeTooDeep.
    - include_recursive=False: the fragment's raw content is inlined and
      its own directives are left untouched.
    - A missing or unreadable fragment, including a path the OS rejects
      (e.g. an embedded NUL), is logged at ERROR level and counted in the
      RunSummary. With the placeholder enabled the directive becomes
      'File not found: <path>', otherwise the literal directive is kept.

Edits are spliced by span, one per directive, so two identical
directives each consume their own occurrence.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from fileinclude.constants import CYCLIC_TEMPLATE, DEFAULT_MAX_DEPTH, DEPTH_TEMPLATE, NOT_FOUND_TEMPLATE
from fileinclude.core.errors import CyclicInclude, IncludeTooDeep, MissingInclude
from fileinclude.core.interfaces.walker import DirectiveMatcherProtocol
from fileinclude.core.models import DirectiveMatch, SourceFile
from fileinclude.core.report import RunSummary
from fileinclude.logging.helpers import get_logger
from fileinclude.parsing.directives import DirectiveMatcher
from fileinclude.utils.paths import join_path, parent_segments

Chain = Tuple[Path, ...]


class IncludeResolver:
    def __init__(
        self,
        *,
        include_recursive: bool = True,
        summary: Optional[RunSummary] = None,
        matcher: Optional[DirectiveMatcherProtocol] = None,
        logger: Optional[logging.Logger] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        encoding: str = "utf-8",
    ) -> None:
        self._recursive = bool(include_recursive)
        self._max_depth = int(max_depth)
        self._summary = summary if summary is not None else RunSummary()
        self._matcher = matcher or DirectiveMatcher()
        self._log = logger or get_logger("resolver")
        self._encoding = encoding

    @property
    def summary(self) -> RunSummary:
        return self._summary

    # -------- public API --------

    def resolve(self, file: SourceFile, insert_not_found_placeholder: bool = True) -> str:
        """Return *file*'s content with every directive substituted.

        A root that cannot be read resolves to an empty string; the failure
        is logged and counted like a missing include.
        """
        try:
            content = self._read(file.path, file.filename)
            chain = (self._key(file.path, file.filename),)
        except MissingInclude as exc:
            self._report(NOT_FOUND_TEMPLATE.format(filename=exc.filename))
            return ""
        return self._expand(file, content, insert_not_found_placeholder, chain)

    # -------- internals --------

    @staticmethod
    def _key(path: Path, filename: str) -> Path:
        try:
            return path.resolve()
        except (OSError, ValueError) as exc:
            raise MissingInclude(path, filename) from exc

    def _read(self, path: Path, filename: str) -> str:
        try:
            return path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            self._log.debug("read failed for %s: %s", path, exc)
            raise MissingInclude(path, filename) from exc

    def _report(self, message: str) -> None:
        self._log.error(message)
        self._summary.record_error(message)

    def _expand(self, file: SourceFile, content: str, insert: bool, chain: Chain) -> str:
        matches = self._matcher.match(content)
        if not matches:
            return content

        # Directives resolve against the including file's own directory.
        base_dir = join_path(file.directory, parent_segments(file.filename)) or "."

        pieces: List[str] = []
        cursor = 0
        for match in matches:
            match = match.with_directory(base_dir)
            pieces.append(content[cursor:match.start])
            pieces.append(self._substitute(match, insert, chain))
            cursor = match.end
        pieces.append(content[cursor:])
        return "".join(pieces)

    def _substitute(self, match: DirectiveMatch, insert: bool, chain: Chain) -> str:
        fragment = SourceFile.from_match(match)
        try:
            return self._load_fragment(fragment, insert, chain)
        except IncludeTooDeep as exc:
            self._report(str(exc))
            return DEPTH_TEMPLATE.format(filename=exc.filename) if insert else match.literal_text
        except CyclicInclude as exc:
            self._report(str(exc))
            return CYCLIC_TEMPLATE.format(filename=exc.filename) if insert else match.literal_text
        except MissingInclude as exc:
            self._report(NOT_FOUND_TEMPLATE.format(filename=exc.filename))
            return NOT_FOUND_TEMPLATE.format(filename=exc.filename) if insert else match.literal_text

    def _load_fragment(self, fragment: SourceFile, insert: bool, chain: Chain) -> str:
        key = self._key(fragment.path, fragment.filename)
        if self._recursive and key in chain:
            raise CyclicInclude((*chain, key), fragment.filename)
        if self._recursive and len(chain) > self._max_depth:
            raise IncludeTooDeep(self._max_depth, fragment.filename)

        raw = self._read(fragment.path, fragment.filename)
        self._log.debug("included %s", fragment.path)
        if not self._recursive:
            return raw
        return self._expand(fragment, raw, insert, (*chain, key))
