from __future__ import annotations

"""Error kinds raised inside the include pipeline.

None of these reach the CLI caller: the runner and resolver catch them,
log them and count them in the RunSummary.
"""

from pathlib import Path
from typing import Sequence


class IncludeError(Exception):
    """Base class for every recoverable include-pipeline failure."""


class MissingInclude(IncludeError):
    """A file referenced by a directive could not be read."""

    def __init__(self, path: Path, filename: str) -> None:
        super().__init__(f"cannot read include {path}")
        self.path = path
        self.filename = filename


class UnreadableSource(IncludeError):
    """A discovered candidate could not be read as a text file."""

    def __init__(self, path: Path, *, is_directory: bool = False) -> None:
        super().__init__(f"cannot read source {path}")
        self.path = path
        self.is_directory = is_directory


class WriteFailure(IncludeError):
    """The destination file or one of its parent directories could not be written."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"cannot write {path}")
        self.path = path


class CyclicInclude(IncludeError):
    """A directive points back at a file that is still being resolved."""

    def __init__(self, chain: Sequence[Path], filename: str) -> None:
        self.chain = list(chain)
        self.filename = filename
        super().__init__("Cyclic include: " + " -> ".join(str(p) for p in self.chain))


class IncludeTooDeep(IncludeError):
    """Nested includes go deeper than the configured maximum depth."""

    def __init__(self, max_depth: int, filename: str) -> None:
        self.max_depth = max_depth
        self.filename = filename
        super().__init__(f"Include depth exceeded ({max_depth}): {filename}")
