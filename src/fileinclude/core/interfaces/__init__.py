from .fs import FileFinderProtocol, OutputPathBuilderProtocol, OutputSinkProtocol
from .logging import LoggerLikeProtocol
from .walker import (
    DirectiveMatcherProtocol,
    FragmentClassifierProtocol,
    ResolverProtocol,
    SourceWalkerProtocol,
)

__all__ = [
    'DirectiveMatcherProtocol',
    'FileFinderProtocol',
    'FragmentClassifierProtocol',
    'LoggerLikeProtocol',
    'OutputPathBuilderProtocol',
    'OutputSinkProtocol',
    'ResolverProtocol',
    'SourceWalkerProtocol',
]
