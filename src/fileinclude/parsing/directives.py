from __future__ import annotations

"""
DirectiveMatcher – recognizes `@@include('<relative-path>')` directives.

Grammar:
    the literal token `@@include(`, a single-quoted path, then `)`.
    The path is captured verbatim; it cannot contain a quote or a line
    break, and no escape sequences exist. No whitespace is tolerated
    around the quotes.

Matches are global, non-overlapping and returned left to right together
with their character span, so callers can splice replacements by
position instead of re-searching the text.
"""

import re
from typing import List

from fileinclude.core.models import DirectiveMatch

INCLUDE_RE = re.compile(r"@@include\('(?P<path>[^'\r\n]*)'\)")


class DirectiveMatcher:
    def __init__(self, pattern: re.Pattern[str] = INCLUDE_RE) -> None:
        self._pattern = pattern

    def match(self, content: str) -> List[DirectiveMatch]:
        return [
            DirectiveMatch(
                literal_text=m.group(0),
                referenced_path=m.group("path"),
                start=m.start(),
                end=m.end(),
            )
            for m in self._pattern.finditer(content)
        ]
