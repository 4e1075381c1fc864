"""SubRip format: cues identified by a sequential index line."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from subedit.core.errors import ValidationError, ValidationErrorKind
from subedit.core.navigator import Navigator
from subedit.core.patterns import PatternSet
from subedit.core.sanitizer import (
    collapse_blank_lines,
    finish_document,
    normalize_arrows,
    strip_line_whitespace,
)
from subedit.core.timecode import split_ms, to_ms
from subedit.core.validator import check_timing_line

if TYPE_CHECKING:
    from subedit.core.document import Document

logger = structlog.get_logger()

_TS = r"\d+:\d+:\d+,\d+"

PATTERNS = PatternSet(
    timestamp=re.compile(r"(\d+):(\d+):(\d+),(\d+)"),
    cue=re.compile(
        rf"^(?P<anchor>(?P<id>\d+))[ \t]*\n(?P<start>{_TS})", re.MULTILINE
    ),
    transition=re.compile(rf"[ \t]*-->[ \t]*(?P<stop>{_TS})"),
    text_prefix=re.compile(r"[^\n]*(?:\n|\Z)"),
    text_end=re.compile(r"\n[ \t]*\n|\s*\Z"),
    separator="\n\n",
    region="^{hours:02d}:{minutes:02d}:",
)

_STRICT = r"\d{2}:\d{2}:\d{2},\d{3}"
_STRICT_START = re.compile(rf"{_STRICT}(?![\d,:])")
_STRICT_STOP = re.compile(_STRICT)
_STRICT_ID = re.compile(r"\d+")
_BLOCK = re.compile(r"^(?:[ \t]*\S[^\n]*(?:\n|\Z))+", re.MULTILINE)


class SrtFormat:
    """SubRip cues: index line, timing line, text, then one blank line."""

    tag = "srt"
    extensions = (".srt",)
    patterns = PATTERNS

    def __init__(self) -> None:
        self._nav = Navigator(self)

    def timestamp_to_ms(self, text: str) -> int | None:
        match = self.patterns.timestamp.fullmatch(text.strip())
        if match is None:
            return None
        hours, minutes, seconds, fraction = match.groups()
        return to_ms(int(hours), int(minutes), int(seconds), fraction)

    def ms_to_timestamp(self, ms: int) -> str:
        hours, minutes, seconds, millis = split_ms(ms)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"

    def make_cue(self, start: int, stop: int, text: str) -> str:
        """Synthesize a cue with placeholder index 0.

        The index is fixed by after_edit once the cue is in the document.
        """
        return (
            f"0\n{self.ms_to_timestamp(start)} --> {self.ms_to_timestamp(stop)}\n"
            f"{text}\n"
        )

    def after_edit(self, doc: Document, pos: int) -> int:
        return self.regenerate_ids(doc, pos)

    def regenerate_ids(self, doc: Document, pos: int = 0) -> int:
        """Renumber all cues sequentially from 1.

        Returns:
            ``pos`` shifted by the length change of the indices before it
        """
        shift = 0
        cues = list(enumerate(self._nav.iter_cues(doc), start=1))
        for number, cue in reversed(cues):
            new_id = str(number)
            if cue.group("id") == new_id:
                continue
            start, end = cue.span("id")
            doc.replace(start, end, new_id)
            if end <= pos:
                shift += len(new_id) - (end - start)
        logger.debug("srt_ids_regenerated", count=len(cues))
        return pos + shift

    def sanitize(self, doc: Document) -> None:
        strip_line_whitespace(doc)
        collapse_blank_lines(doc)
        arrows = normalize_arrows(doc, self._nav)
        self.regenerate_ids(doc)
        finish_document(doc, self._nav)
        logger.debug("srt_sanitized", arrows_fixed=arrows)

    def validate(self, doc: Document) -> None:
        """Check that every block is an index line followed by a timing line."""
        for block in _BLOCK.finditer(doc.text):
            lines = block.group().splitlines()
            if not _STRICT_ID.fullmatch(lines[0]):
                raise ValidationError(ValidationErrorKind.IDENTIFIER, lines[0])
            timing = lines[1] if len(lines) > 1 else ""
            check_timing_line(timing, _STRICT_START, _STRICT_STOP)
