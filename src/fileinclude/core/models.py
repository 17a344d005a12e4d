from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

from fileinclude.utils.paths import join_path, last_segment


@dataclass(frozen=True)
class DirectiveMatch:
    """One `@@include('...')` occurrence inside a text blob.

    `start`/`end` delimit `literal_text` in the scanned content so the
    resolver can splice replacements positionally. `resolved_directory` is
    filled in by the resolver once the including file is known.
    """

    literal_text: str
    referenced_path: str
    start: int = 0
    end: int = 0
    resolved_directory: Optional[str] = None

    @property
    def referenced_name(self) -> str:
        """Last path segment of the referenced path (fragment identity)."""
        return last_segment(self.referenced_path)

    def with_directory(self, directory: str) -> "DirectiveMatch":
        return replace(self, resolved_directory=directory)


@dataclass(frozen=True)
class FoundFile:
    """A path produced by the file finder, split into source dir and relative name."""

    directory: str
    filename: str

    @property
    def path(self) -> Path:
        return Path(join_path(self.directory, self.filename))


@dataclass
class SourceFile:
    """A discovered (or synthetic, for includes) file plus its directives."""

    directory: str
    filename: str
    matches: List[DirectiveMatch] = field(default_factory=list)

    @property
    def path(self) -> Path:
        return Path(join_path(self.directory, self.filename))

    @property
    def name(self) -> str:
        return last_segment(self.filename)

    @classmethod
    def from_match(cls, match: DirectiveMatch) -> "SourceFile":
        """Build the synthetic file a resolved directive points at."""
        return cls(directory=match.resolved_directory or ".", filename=match.referenced_path)


# A root is a SourceFile that survived fragment classification.
RootFile = SourceFile
