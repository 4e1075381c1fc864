"""Per-format grammar bundle consulted by every engine operation."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PatternSet:
    """Compiled grammars describing one subtitle format.

    Attributes:
        timestamp: Lenient timestamp grammar with groups
            (hours, minutes, seconds, fraction); used with ``fullmatch``
        cue: Start of a cue, compiled with ``re.MULTILINE``.  Named groups:
            ``anchor`` (where the cue identifier position is), ``id`` (the
            identifier token) and ``start`` (start timestamp).  An optional
            ``label`` group holds a free-form cue label line.
        transition: Matched right after the ``start`` group; group ``stop``
            is the stop timestamp
        text_prefix: Matched at the start of the line holding the start
            timestamp; its end is where the cue text begins
        text_end: Searched from just before the text start; its start is
            where the cue text ends
        separator: Canonical text between the end of one cue's text and the
            start of the next cue
        line_break: Inserted between two texts when cues are merged
        requires_separator: Whether a cue must follow a blank line (or the
            start of the document) to be recognised
        region: Optional ``str.format`` template (``hours``, ``minutes``)
            for a line-anchored regex that jumps near a time
    """

    timestamp: re.Pattern[str]
    cue: re.Pattern[str]
    transition: re.Pattern[str]
    text_prefix: re.Pattern[str]
    text_end: re.Pattern[str]
    separator: str
    line_break: str = "\n"
    requires_separator: bool = True
    region: str | None = None

    def region_pattern(self, ms: int) -> re.Pattern[str] | None:
        """Build the regex locating the hour/minute region of ``ms``."""
        if self.region is None:
            return None
        hours, rest = divmod(ms, 3_600_000)
        return re.compile(
            self.region.format(hours=hours, minutes=rest // 60_000), re.MULTILINE
        )
