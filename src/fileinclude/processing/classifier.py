from __future__ import annotations

"""
FragmentClassifier – splits scanned files into roots and fragments.

A fragment is any scanned file whose filename (last path segment) equals
the last path segment of some directive's referenced path, anywhere in
the scanned set. Fragments are never written on their own. Directory
prefixes are deliberately ignored: `partials/nav.html` and `other/nav.html`
share an identity, so both are excluded as soon as one `nav.html` is
included by anyone.
"""

import logging
from typing import List, Optional, Sequence, Set

from fileinclude.core.models import RootFile, SourceFile
from fileinclude.logging.helpers import TRACE, get_logger, trace


class FragmentClassifier:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger("classifier")

    @staticmethod
    def referenced_names(files: Sequence[SourceFile]) -> Set[str]:
        return {m.referenced_name for f in files for m in f.matches}

    def classify(self, files: Sequence[SourceFile]) -> List[RootFile]:
        referenced = self.referenced_names(files)
        roots = [f for f in files if f.name not in referenced]

        if self._log.isEnabledFor(TRACE):
            listing = "".join(f" ∙ {f.filename}\n" for f in roots)
            trace(self._log, "Files to parse:\n%s", listing)
        return roots
