from __future__ import annotations

"""Public surface for fileinclude.core.

Data model, error kinds and the run summary live here so downstream code
has a single import location:

    from fileinclude.core import SourceFile, RunSummary, MissingInclude
"""

from fileinclude.core.errors import (
    CyclicInclude,
    IncludeError,
    IncludeTooDeep,
    MissingInclude,
    UnreadableSource,
    WriteFailure,
)
from fileinclude.core.models import DirectiveMatch, FoundFile, RootFile, SourceFile
from fileinclude.core.report import RunSummary, StageTimer

__all__ = [
    "CyclicInclude",
    "DirectiveMatch",
    "FoundFile",
    "IncludeError",
    "IncludeTooDeep",
    "MissingInclude",
    "RootFile",
    "RunSummary",
    "SourceFile",
    "StageTimer",
    "UnreadableSource",
    "WriteFailure",
]
