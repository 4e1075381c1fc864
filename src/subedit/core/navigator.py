"""Locate cue boundaries in document text relative to a position."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subedit.core.scanning import iter_cues

if TYPE_CHECKING:
    from subedit.core.document import Document
    from subedit.formats.base import SubtitleFormat


class Navigator:
    """Format-independent cue navigation.

    Every method takes the document and a position and returns a new
    position, or None when the requested element does not exist.  Nothing
    here modifies the document.
    """

    def __init__(self, fmt: SubtitleFormat) -> None:
        self.fmt = fmt
        self.patterns = fmt.patterns

    # Cue matches

    def iter_cues(self, doc: Document, pos: int = 0) -> list[re.Match[str]]:
        return list(iter_cues(doc.text, self.patterns, pos))

    def cue_at(self, doc: Document, pos: int) -> re.Match[str] | None:
        """Return the cue enclosing ``pos``.

        A position inside the blank lines or comment blocks after a cue
        belongs to that cue; a position before the first cue has none.
        """
        current = None
        for match in iter_cues(doc.text, self.patterns):
            if match.start() > pos:
                break
            current = match
        return current

    def cue_by_id(self, doc: Document, sub_id: str) -> re.Match[str] | None:
        for match in iter_cues(doc.text, self.patterns):
            if match.group("id") == sub_id:
                return match
        return None

    def resolve(
        self, doc: Document, pos: int, sub_id: str | None = None
    ) -> re.Match[str] | None:
        if sub_id is not None:
            return self.cue_by_id(doc, sub_id)
        return self.cue_at(doc, pos)

    def cue_after(self, doc: Document, pos: int) -> re.Match[str] | None:
        """Return the first cue starting after ``pos``."""
        return next(iter_cues(doc.text, self.patterns, pos + 1), None)

    def cue_before(self, doc: Document, pos: int) -> re.Match[str] | None:
        """Return the cue preceding the one enclosing ``pos``."""
        previous = current = None
        for match in iter_cues(doc.text, self.patterns):
            if match.start() > pos:
                break
            previous, current = current, match
        return previous

    # Positions within a cue

    def stop_match(self, doc: Document, cue: re.Match[str]) -> re.Match[str] | None:
        return self.patterns.transition.match(doc.text, cue.end("start"))

    def text_start(self, doc: Document, cue: re.Match[str]) -> int:
        line_start = doc.line_start(cue.start("start"))
        prefix = self.patterns.text_prefix.match(doc.text, line_start)
        if prefix is None:
            return doc.line_end(line_start)
        return prefix.end()

    def text_end(self, doc: Document, cue: re.Match[str]) -> int:
        start = self.text_start(doc, cue)
        found = self.patterns.text_end.search(doc.text, max(start - 1, 0))
        if found is None:
            return len(doc)
        # An empty text shares its newline with the separator
        return max(found.start(), start)

    # Collaborator-facing navigation

    def locate_cue_identifier(
        self, doc: Document, pos: int, sub_id: str | None = None
    ) -> int | None:
        cue = self.resolve(doc, pos, sub_id)
        return None if cue is None else cue.start("anchor")

    def next_cue_identifier(self, doc: Document, pos: int) -> int | None:
        current = self.cue_at(doc, pos)
        cue = self.cue_after(doc, pos if current is None else current.start())
        return None if cue is None else cue.start("anchor")

    def previous_cue_identifier(self, doc: Document, pos: int) -> int | None:
        cue = self.cue_before(doc, pos)
        return None if cue is None else cue.start("anchor")

    def locate_start_time(
        self, doc: Document, pos: int, sub_id: str | None = None
    ) -> int | None:
        cue = self.resolve(doc, pos, sub_id)
        return None if cue is None else cue.start("start")

    def locate_stop_time(
        self, doc: Document, pos: int, sub_id: str | None = None
    ) -> int | None:
        cue = self.resolve(doc, pos, sub_id)
        stop = None if cue is None else self.stop_match(doc, cue)
        return None if stop is None else stop.start("stop")

    def locate_text_start(
        self, doc: Document, pos: int, sub_id: str | None = None
    ) -> int | None:
        cue = self.resolve(doc, pos, sub_id)
        return None if cue is None else self.text_start(doc, cue)

    def locate_text_end(
        self, doc: Document, pos: int, sub_id: str | None = None
    ) -> int | None:
        cue = self.resolve(doc, pos, sub_id)
        return None if cue is None else self.text_end(doc, cue)

    # Cue properties

    def start_ms(self, cue: re.Match[str]) -> int | None:
        return self.fmt.timestamp_to_ms(cue.group("start"))

    def stop_ms(self, doc: Document, cue: re.Match[str]) -> int | None:
        stop = self.stop_match(doc, cue)
        return None if stop is None else self.fmt.timestamp_to_ms(stop.group("stop"))

    def cue_at_time(self, doc: Document, ms: int) -> str | None:
        """Return the id of the first cue covering ``ms``.

        Jumps to the first cue whose start timestamp begins with the hour and
        minute of ``ms`` (stepping back one cue so a cue spanning the minute
        boundary is not skipped), then scans forward while cues start at or
        before ``ms``.
        """
        origin = 0
        region = self.patterns.region_pattern(ms)
        if region is not None:
            for hit in region.finditer(doc.text):
                cue = self.cue_at(doc, hit.start())
                if cue is not None and cue.start("start") == hit.start():
                    previous = self.cue_before(doc, cue.start())
                    origin = (previous or cue).start()
                    break

        for cue in iter_cues(doc.text, self.patterns, origin):
            start = self.start_ms(cue)
            if start is not None and start > ms:
                return None
            stop = self.stop_ms(doc, cue)
            if stop is not None and stop >= ms:
                return cue.group("id")
        return None
