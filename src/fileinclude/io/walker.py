from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from fileinclude.core.errors import UnreadableSource
from fileinclude.core.interfaces.walker import DirectiveMatcherProtocol, SourceWalkerProtocol
from fileinclude.core.models import FoundFile, SourceFile
from fileinclude.core.report import RunSummary
from fileinclude.logging.helpers import TRACE, get_logger, trace
from fileinclude.parsing.directives import DirectiveMatcher


class SourceWalker(SourceWalkerProtocol):
    """Reads discovered files and keeps the ones carrying include directives.

    Plain files (no directive) are dropped unless `keep_plain` is set.
    Reading a directory stops the whole batch; other read failures only
    skip the offending file. Both are counted in the summary.
    """

    def __init__(
        self,
        *,
        summary: RunSummary,
        matcher: Optional[DirectiveMatcherProtocol] = None,
        keep_plain: bool = False,
        logger: Optional[logging.Logger] = None,
        encoding: str = "utf-8",
    ) -> None:
        self._summary = summary
        self._matcher = matcher or DirectiveMatcher()
        self._keep_plain = bool(keep_plain)
        self._log = logger or get_logger("io.walker")
        self._encoding = encoding

    def _read(self, found: FoundFile) -> str:
        try:
            return found.path.read_text(encoding=self._encoding)
        except IsADirectoryError as exc:
            raise UnreadableSource(found.path, is_directory=True) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise UnreadableSource(found.path) from exc

    def scan(self, found: Sequence[FoundFile]) -> List[SourceFile]:
        scanned: List[SourceFile] = []

        for item in found:
            try:
                content = self._read(item)
            except UnreadableSource as exc:
                if exc.is_directory:
                    self._log.error("Cannot read the source directory")
                    self._summary.record_error(f"Cannot read the source directory: {exc.path}")
                    break
                self._log.error("Cannot read file: %s", exc.path)
                self._summary.record_error(f"Cannot read file: {exc.path}")
                continue

            matches = self._matcher.match(content)
            if matches or self._keep_plain:
                scanned.append(SourceFile(directory=item.directory, filename=item.filename, matches=matches))

        if self._log.isEnabledFor(TRACE):
            lines = []
            for src in scanned:
                if not src.matches:
                    continue
                lines.append(f" ∙ {src.filename}\n")
                lines.extend(f"   - {m.referenced_path}\n" for m in src.matches)
            trace(self._log, "Files with includes:\n%s", "".join(lines))
        return scanned
