from fileinclude.parsing.directives import INCLUDE_RE, DirectiveMatcher

__all__ = ["INCLUDE_RE", "DirectiveMatcher"]
