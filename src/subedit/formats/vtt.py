"""WebVTT format: cues identified by their start timestamp."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

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

# [[HH:]MM:]SS[.mmm], any number of digits per field
_TS = r"(?:\d+:)?\d+:\d+(?:\.\d+)?"

# Blocks that may sit between cues and must never be read as a cue label
_RESERVED = r"(?:NOTE|STYLE|REGION|WEBVTT)(?:[ \t]|$)"

PATTERNS = PatternSet(
    timestamp=re.compile(r"(?:(\d+):)?(\d+):(\d+)(?:\.(\d+))?"),
    cue=re.compile(
        rf"^(?:(?P<label>(?!{_RESERVED})(?![ \t]*$)(?:(?!-->)[^\n])+)\n)?"
        rf"(?P<anchor>(?P<id>(?P<start>{_TS})))",
        re.MULTILINE,
    ),
    transition=re.compile(rf"[ \t]*-->[ \t]*(?P<stop>{_TS})"),
    text_prefix=re.compile(r"[^\n]*(?:\n|\Z)"),
    text_end=re.compile(r"\n[ \t]*\n|\s*\Z"),
    separator="\n\n",
    region="^{hours:02d}:{minutes:02d}:",
)

# NOTE, STYLE and REGION blocks opening a paragraph, up to the next blank line
_METADATA_BLOCK = re.compile(
    r"^(?<![^\n]\n)(?:NOTE|STYLE|REGION)(?:[ \t]|$)[^\n]*(?:\n[ \t]*\S[^\n]*)*",
    re.MULTILINE,
)
_TIMING_LINE = re.compile(rf"^{_TS}[^\n]*", re.MULTILINE)

# Stricter than the editing grammar: two-digit fields, at most three decimals
_STRICT = r"\d{2}(?::\d{2})?:\d{2}(?:\.\d{0,3})?"
_STRICT_START = re.compile(rf"{_STRICT}(?![\d.:])")
_STRICT_STOP = re.compile(rf"{_STRICT}(?:[ \t]+\S[^\n]*)?")


class VttFormat:
    """WebVTT cues, optionally labelled, separated by one blank line."""

    tag = "vtt"
    extensions = (".vtt",)
    patterns = PATTERNS

    def __init__(self) -> None:
        self._nav = Navigator(self)

    def timestamp_to_ms(self, text: str) -> int | None:
        match = self.patterns.timestamp.fullmatch(text.strip())
        if match is None:
            return None
        hours, minutes, seconds, fraction = match.groups()
        return to_ms(int(hours or 0), int(minutes), int(seconds), fraction)

    def ms_to_timestamp(self, ms: int) -> str:
        hours, minutes, seconds, millis = split_ms(ms)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"

    def make_cue(self, start: int, stop: int, text: str) -> str:
        return (
            f"{self.ms_to_timestamp(start)} --> {self.ms_to_timestamp(stop)}\n"
            f"{text}\n"
        )

    def after_edit(self, doc: Document, pos: int) -> int:
        return pos

    def sanitize(self, doc: Document) -> None:
        strip_line_whitespace(doc, keep=_METADATA_BLOCK)
        collapse_blank_lines(doc)
        arrows = normalize_arrows(doc, self._nav)
        finish_document(doc, self._nav)
        logger.debug("vtt_sanitized", arrows_fixed=arrows)

    def validate(self, doc: Document) -> None:
        """Check every line starting with a timestamp against the strict grammar.

        Lines inside NOTE, STYLE and REGION blocks are skipped.  Cue
        settings after the stop time are allowed.
        """
        text = doc.text
        skipped = [block.span() for block in _METADATA_BLOCK.finditer(text)]
        for line in _TIMING_LINE.finditer(text):
            if any(start <= line.start() < end for start, end in skipped):
                continue
            check_timing_line(line.group(), _STRICT_START, _STRICT_STOP)
