"""Text scanning helpers for locating cues by pattern."""

import re
from collections.abc import Iterator

from subedit.core.patterns import PatternSet

_LEADING_WHITESPACE = re.compile(r"\s*")


def follows_separator(text: str, pos: int) -> bool:
    """Return True if ``pos`` starts a line after a blank line or only whitespace."""
    if _LEADING_WHITESPACE.match(text).end() >= pos:
        return True
    if text[pos - 1] != "\n":
        return False
    prev_start = text.rfind("\n", 0, pos - 1) + 1
    return not text[prev_start : pos - 1].strip()


def iter_cues(text: str, patterns: PatternSet, pos: int = 0) -> Iterator[re.Match[str]]:
    """Yield cue-start matches in document order, starting at ``pos``."""
    for match in patterns.cue.finditer(text, pos):
        if not patterns.requires_separator or follows_separator(text, match.start()):
            yield match
