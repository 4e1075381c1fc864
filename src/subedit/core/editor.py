"""Insert, merge and delete cues by splicing synthesized text."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from subedit.core.errors import PreconditionError

if TYPE_CHECKING:
    from subedit.core.document import Document
    from subedit.core.navigator import Navigator

logger = structlog.get_logger()


class StructuralEditor:
    """Format-independent structural edits.

    Positions come from the navigator.  Callers are expected to run each
    public method inside a document transaction.
    """

    def __init__(self, navigator: Navigator) -> None:
        self.nav = navigator
        self.separator = navigator.patterns.separator

    def prepend_cue(
        self, doc: Document, pos: int, cue_text: str, before_id: str | None = None
    ) -> int:
        """Insert ``cue_text`` before a cue and return the new text start.

        Raises:
            PreconditionError: If ``before_id`` does not name a cue
        """
        target = self.nav.resolve(doc, pos, before_id)
        if target is None:
            if before_id is not None:
                raise PreconditionError(f"Subtitle {before_id} not found")
            target = self.nav.cue_after(doc, pos)
            if target is None:
                return self._insert_after(doc, self._content_end(doc), cue_text)

        at = target.start()
        end = doc.insert(at, cue_text)
        self._close_gap(doc, end)
        logger.debug("cue_prepended", position=at)
        return self._text_start_at(doc, at)

    def append_cue(
        self, doc: Document, pos: int, cue_text: str, after_id: str | None = None
    ) -> int:
        """Insert ``cue_text`` after a cue and return the new text start.

        Raises:
            PreconditionError: If ``after_id`` does not name a cue
        """
        current = self.nav.resolve(doc, pos, after_id)
        if current is None and after_id is not None:
            raise PreconditionError(f"Subtitle {after_id} not found")

        following = self.nav.cue_after(doc, pos if current is None else current.start())
        if following is not None:
            return self.prepend_cue(doc, following.start(), cue_text)

        if current is None:
            end = self._content_end(doc)
        else:
            end = self.nav.text_end(doc, current)
        return self._insert_after(doc, end, cue_text)

    def merge_with_next(self, doc: Document, pos: int) -> int:
        """Join the current cue with the next one.

        The merged cue keeps the current start time, takes the next cue's
        stop time, and its text is both texts joined by one line break.

        Returns:
            Identifier position of the merged cue

        Raises:
            PreconditionError: If there is no next cue to merge into
        """
        current = self.nav.cue_at(doc, pos)
        following = None
        if current is not None:
            following = self.nav.cue_after(doc, current.start())
        stop_ms = None if following is None else self.nav.stop_ms(doc, following)
        if current is None or following is None or stop_ms is None:
            raise PreconditionError("No subtitle to merge into")

        text_start = self.nav.text_start(doc, current)
        text_end = self.nav.text_end(doc, current)
        next_text_start = self.nav.text_start(doc, following)
        joint = self.nav.patterns.line_break if text_end > text_start else ""
        doc.replace(text_end, next_text_start, joint)

        self._set_timestamp(doc, current, "stop", stop_ms)
        logger.debug("cue_merged", position=current.start("anchor"), stop_ms=stop_ms)
        return current.start("anchor")

    def delete_cue(self, doc: Document, pos: int) -> int | None:
        """Remove the current cue and return the position of a neighbour."""
        current = self.nav.cue_at(doc, pos)
        if current is None:
            return None

        following = self.nav.cue_after(doc, current.start())
        if following is not None:
            doc.delete(current.start(), following.start())
            return self.nav.locate_cue_identifier(doc, current.start())

        previous = self.nav.cue_before(doc, current.start())
        end = self.nav.text_end(doc, current)
        if previous is not None:
            doc.delete(self.nav.text_end(doc, previous), end)
            return previous.start("anchor")

        end += self._leading_separator_width(doc, end)
        doc.delete(current.start(), end)
        return current.start()

    def set_start(self, doc: Document, cue: re.Match[str], ms: int) -> None:
        self._set_timestamp(doc, cue, "start", ms)

    def set_stop(self, doc: Document, cue: re.Match[str], ms: int) -> None:
        self._set_timestamp(doc, cue, "stop", ms)

    def _set_timestamp(
        self, doc: Document, cue: re.Match[str], which: str, ms: int
    ) -> None:
        if which == "start":
            span = cue.span("start")
        else:
            stop = self.nav.stop_match(doc, cue)
            if stop is None:
                raise PreconditionError(
                    f"Subtitle {cue.group('id')} has no stop time: "
                    f"{doc.line_at(cue.start('start'))!r}"
                )
            span = stop.span("stop")
        doc.replace(*span, self.nav.fmt.ms_to_timestamp(ms))

    def _insert_after(self, doc: Document, end: int, cue_text: str) -> int:
        """Insert a cue after content ending at ``end``, padding the separator."""
        if end == 0:
            at = 0
        else:
            present = self._leading_separator_width(doc, end)
            doc.insert(end + present, self.separator[present:])
            at = end + len(self.separator)
        cue_end = doc.insert(at, cue_text)
        if doc.text[cue_end:].strip():
            self._close_gap(doc, cue_end)
        logger.debug("cue_appended", position=at)
        return self._text_start_at(doc, at)

    def _close_gap(self, doc: Document, end: int) -> None:
        """Complete the separator between inserted text ending at ``end`` and what follows."""
        text = doc.text
        for width in range(len(self.separator), -1, -1):
            if text.endswith(self.separator[:width], 0, end):
                doc.insert(end, self.separator[width:])
                return

    def _leading_separator_width(self, doc: Document, pos: int) -> int:
        """Count how much of the canonical separator already starts at ``pos``."""
        width = 0
        while width < len(self.separator) and doc.text.startswith(
            self.separator[width], pos + width
        ):
            width += 1
        return width

    def _content_end(self, doc: Document) -> int:
        return len(doc.text.rstrip())

    def _text_start_at(self, doc: Document, pos: int) -> int:
        cue = self.nav.cue_at(doc, pos)
        if cue is None:
            raise PreconditionError(f"Inserted subtitle not recognised at {pos}")
        return self.nav.text_start(doc, cue)
