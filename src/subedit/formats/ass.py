"""Advanced SubStation Alpha format: one cue per Dialogue line."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from subedit.core.errors import ValidationError, ValidationErrorKind
from subedit.core.patterns import PatternSet
from subedit.core.sanitizer import collapse_blank_lines, strip_line_whitespace
from subedit.core.timecode import split_ms, to_ms
from subedit.core.validator import check_timing_line
from subedit.utils.config import get_settings

if TYPE_CHECKING:
    from subedit.core.document import Document

logger = structlog.get_logger()

_TS = r"\d+:\d+:\d+(?:\.\d+)?"

PATTERNS = PatternSet(
    timestamp=re.compile(r"(\d+):(\d+):(\d+)(?:\.(\d+))?"),
    cue=re.compile(
        rf"^(?P<anchor>Dialogue:[ \t]*[^,\n]*,)(?P<id>(?P<start>{_TS}))",
        re.MULTILINE,
    ),
    transition=re.compile(rf",(?P<stop>{_TS})"),
    # Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect
    text_prefix=re.compile(r"(?:[^,\n]*,){9}"),
    text_end=re.compile(r"\n|\Z"),
    separator="\n",
    line_break="\\N",
    requires_separator=False,
)

_STRICT = r"\d:\d{2}:\d{2}\.\d{2}"
_STRICT_START = re.compile(rf"{_STRICT}(?![\d.:])")
_STRICT_STOP = re.compile(rf"{_STRICT},[^\n]*")
_DIALOGUE_LINE = re.compile(r"^Dialogue:[^\n]*", re.MULTILINE)
_DIALOGUE_KEYWORD = re.compile(r"^Dialogue:[ \t]*", re.MULTILINE)
_DIALOGUE_GAPS = re.compile(
    r"^(Dialogue:[^\n]*\n)(?:[ \t]*\n)+(?=Dialogue:)", re.MULTILINE
)
_TRAILING_NEWLINES = re.compile(r"\n+\Z")


class AssFormat:
    """ASS/SSA events; the cue text is the tenth field of a Dialogue line."""

    tag = "ass"
    extensions = (".ass", ".ssa")
    patterns = PATTERNS

    def timestamp_to_ms(self, text: str) -> int | None:
        match = self.patterns.timestamp.fullmatch(text.strip())
        if match is None:
            return None
        hours, minutes, seconds, fraction = match.groups()
        return to_ms(int(hours), int(minutes), int(seconds), fraction)

    def ms_to_timestamp(self, ms: int) -> str:
        """Format as H:MM:SS.cc; milliseconds are truncated to centiseconds."""
        hours, minutes, seconds, millis = split_ms(ms)
        return f"{hours}:{minutes:02d}:{seconds:02d}.{millis // 10:02d}"

    def make_cue(self, start: int, stop: int, text: str) -> str:
        style = get_settings().ass_default_style
        text = text.replace("\n", self.patterns.line_break)
        return (
            f"Dialogue: 0,{self.ms_to_timestamp(start)},"
            f"{self.ms_to_timestamp(stop)},{style},,0,0,0,,{text}\n"
        )

    def after_edit(self, doc: Document, pos: int) -> int:
        return pos

    def sanitize(self, doc: Document) -> None:
        strip_line_whitespace(doc)
        collapse_blank_lines(doc)
        doc.substitute(_DIALOGUE_KEYWORD, "Dialogue: ")
        gaps = doc.substitute(_DIALOGUE_GAPS, r"\1")
        doc.substitute(_TRAILING_NEWLINES, "")
        if doc.text:
            doc.insert(len(doc), "\n")
        logger.debug("ass_sanitized", gaps_removed=gaps)

    def validate(self, doc: Document) -> None:
        """Check start, stop and field count of every Dialogue line."""
        for found in _DIALOGUE_LINE.finditer(doc.text):
            line = found.group()
            layer_end = line.find(",") + 1
            if not layer_end:
                raise ValidationError(ValidationErrorKind.FIELDS, line)
            check_timing_line(
                line, _STRICT_START, _STRICT_STOP, arrow=",", pos=layer_end
            )
            if line.count(",") < 9:
                raise ValidationError(ValidationErrorKind.FIELDS, line)
