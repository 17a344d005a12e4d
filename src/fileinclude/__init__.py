from __future__ import annotations

from fileinclude.cli import FileInclude
from fileinclude.core import (
    CyclicInclude,
    DirectiveMatch,
    IncludeError,
    IncludeTooDeep,
    MissingInclude,
    RootFile,
    RunSummary,
    SourceFile,
    UnreadableSource,
    WriteFailure,
)
from fileinclude.discovery.file_discovery import FileDiscovery
from fileinclude.parsing.directives import DirectiveMatcher
from fileinclude.processing.classifier import FragmentClassifier
from fileinclude.processing.resolver import IncludeResolver
from fileinclude.rendering.path_resolver import OutputPathBuilder
from fileinclude.runtime.container import RunConfig
from fileinclude.runtime.runner import IncludeRunner

__version__ = '1.0.0'

__all__ = [
    'CyclicInclude',
    'DirectiveMatch',
    'DirectiveMatcher',
    'FileDiscovery',
    'FileInclude',
    'FragmentClassifier',
    'IncludeError',
    'IncludeResolver',
    'IncludeRunner',
    'IncludeTooDeep',
    'MissingInclude',
    'OutputPathBuilder',
    'RootFile',
    'RunConfig',
    'RunSummary',
    'SourceFile',
    'UnreadableSource',
    'WriteFailure',
]
