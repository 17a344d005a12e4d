from __future__ import annotations

"""
File discovery.

Expands glob patterns (``**`` is recursive) under each source directory
and returns the hits as FoundFile(directory, filename) pairs, where
`directory` is the source directory as given and `filename` the POSIX
path relative to it.

Order is source directories first, then patterns, then sorted hits per
glob. A file hit by several patterns is kept once. Hidden segments are
skipped. Directories that match a pattern are returned as well: reading
them later is what triggers the early abort of a scan batch.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Set

from fileinclude.core.interfaces.fs import FileFinderProtocol
from fileinclude.core.models import FoundFile
from fileinclude.logging.helpers import TRACE, get_logger, trace
from fileinclude.utils.paths import is_hidden_path


@dataclass
class FileDiscovery(FileFinderProtocol):
    """Glob-based file finder over one or more source directories."""

    logger: Optional[logging.Logger] = None

    @property
    def _log(self) -> logging.Logger:
        return self.logger or get_logger("discovery")

    def find(self, sources: Sequence[str], patterns: Sequence[str]) -> List[FoundFile]:
        found: List[FoundFile] = []
        seen: Set[Path] = set()

        for directory in sources:
            root = Path(directory)
            if not root.exists():
                self._log.warning("⚠  %s does not exist – skipped", directory)
                continue
            for pattern in patterns:
                for hit in sorted(root.glob(pattern), key=str):
                    rel = hit.relative_to(root)
                    if is_hidden_path(rel):
                        continue
                    key = hit.resolve()
                    if key in seen:
                        continue
                    seen.add(key)
                    found.append(FoundFile(directory=directory.rstrip("/") or "/", filename=rel.as_posix()))

        if self._log.isEnabledFor(TRACE):
            listing = "\n".join(f" ∙ {f.path.as_posix()}" for f in found)
            trace(self._log, "Found files:\n%s", listing)
        return found
