from __future__ import annotations
from typing import List, Protocol, Sequence, runtime_checkable

from fileinclude.core.models import DirectiveMatch, FoundFile, RootFile, SourceFile


@runtime_checkable
class DirectiveMatcherProtocol(Protocol):
    def match(self, content: str) -> List[DirectiveMatch]:
        """Return every directive in *content*, left to right."""
        ...


@runtime_checkable
class SourceWalkerProtocol(Protocol):
    """Reads discovered files and attaches their directive matches."""

    def scan(self, found: Sequence[FoundFile]) -> List[SourceFile]:
        ...


@runtime_checkable
class FragmentClassifierProtocol(Protocol):
    def classify(self, files: Sequence[SourceFile]) -> List[RootFile]:
        ...


@runtime_checkable
class ResolverProtocol(Protocol):
    def resolve(self, file: SourceFile, insert_not_found_placeholder: bool = True) -> str:
        ...
