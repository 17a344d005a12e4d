from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from fileinclude.core.models import FoundFile, RootFile


@runtime_checkable
class FileFinderProtocol(Protocol):
    def find(self, sources: Sequence[str], patterns: Sequence[str]) -> list[FoundFile]:
        ...


@runtime_checkable
class OutputPathBuilderProtocol(Protocol):
    def output_path(self, file: RootFile, omit_source_parent: bool = True) -> str:
        ...


@runtime_checkable
class OutputSinkProtocol(Protocol):
    def write(self, destination: str, relpath: str, content: str) -> str:
        """Persist *content* under destination/relpath and return the written path."""
        ...
