"""Editing session: one document bound to one subtitle format."""

from __future__ import annotations

import structlog

from subedit.core.document import Document
from subedit.core.editor import StructuralEditor
from subedit.core.errors import PreconditionError
from subedit.core.navigator import Navigator
from subedit.formats import SubtitleFormat, get_format
from subedit.utils.config import get_settings

logger = structlog.get_logger()


class SubtitleEditor:
    """The operation contract consumed by a host editor.

    Every method takes and returns explicit positions; navigation returns
    None when the requested cue or boundary does not exist.  Edits run as a
    single transaction: on failure the document is left as it was.
    """

    def __init__(self, document: Document, fmt: SubtitleFormat) -> None:
        self.document = document
        self.format = fmt
        self.navigator = Navigator(fmt)
        self.editor = StructuralEditor(self.navigator)

    @property
    def text(self) -> str:
        return self.document.text

    # Timestamp codec

    def timestamp_to_ms(self, text: str) -> int | None:
        return self.format.timestamp_to_ms(text)

    def ms_to_timestamp(self, ms: int) -> str:
        return self.format.ms_to_timestamp(ms)

    # Navigation

    def locate_cue_identifier(self, pos: int, sub_id: str | None = None) -> int | None:
        return self.navigator.locate_cue_identifier(self.document, pos, sub_id)

    def next_cue_identifier(self, pos: int) -> int | None:
        return self.navigator.next_cue_identifier(self.document, pos)

    def previous_cue_identifier(self, pos: int) -> int | None:
        return self.navigator.previous_cue_identifier(self.document, pos)

    def locate_start_time(self, pos: int, sub_id: str | None = None) -> int | None:
        return self.navigator.locate_start_time(self.document, pos, sub_id)

    def locate_stop_time(self, pos: int, sub_id: str | None = None) -> int | None:
        return self.navigator.locate_stop_time(self.document, pos, sub_id)

    def locate_text_start(self, pos: int, sub_id: str | None = None) -> int | None:
        return self.navigator.locate_text_start(self.document, pos, sub_id)

    def locate_text_end(self, pos: int, sub_id: str | None = None) -> int | None:
        return self.navigator.locate_text_end(self.document, pos, sub_id)

    def cue_at_time(self, ms: int) -> str | None:
        return self.navigator.cue_at_time(self.document, ms)

    # Cue properties

    def cue_count(self) -> int:
        return len(self.navigator.iter_cues(self.document))

    def cue_id(self, pos: int) -> str | None:
        cue = self.navigator.cue_at(self.document, pos)
        return None if cue is None else cue.group("id")

    def cue_start_ms(self, pos: int, sub_id: str | None = None) -> int | None:
        cue = self.navigator.resolve(self.document, pos, sub_id)
        return None if cue is None else self.navigator.start_ms(cue)

    def cue_stop_ms(self, pos: int, sub_id: str | None = None) -> int | None:
        cue = self.navigator.resolve(self.document, pos, sub_id)
        return None if cue is None else self.navigator.stop_ms(self.document, cue)

    def cue_text(self, pos: int, sub_id: str | None = None) -> str | None:
        cue = self.navigator.resolve(self.document, pos, sub_id)
        if cue is None:
            return None
        start = self.navigator.text_start(self.document, cue)
        return self.text[start : self.navigator.text_end(self.document, cue)]

    # Structural edits

    def make_cue(
        self, start: int | None = None, stop: int | None = None, text: str = ""
    ) -> str:
        """Synthesize cue text.

        ``start`` defaults to 0 and ``stop`` to ``start`` plus the configured
        default cue length.
        """
        if start is None:
            start = 0
        if stop is None:
            stop = start + get_settings().default_cue_length_ms
        return self.format.make_cue(start, stop, text)

    def prepend_cue(
        self,
        pos: int,
        before_id: str | None = None,
        *,
        start: int | None = None,
        stop: int | None = None,
        text: str = "",
    ) -> int:
        """Insert a new cue before the current (or named) cue.

        Returns:
            Text start of the new cue

        Raises:
            PreconditionError: If ``before_id`` does not name a cue
            TransactionError: If the edit fails, e.g. on a negative time
        """
        with self.document.transaction():
            cue_text = self.make_cue(start, stop, text)
            pos = self.editor.prepend_cue(self.document, pos, cue_text, before_id)
            return self.format.after_edit(self.document, pos)

    def append_cue(
        self,
        pos: int,
        after_id: str | None = None,
        *,
        start: int | None = None,
        stop: int | None = None,
        text: str = "",
    ) -> int:
        """Insert a new cue after the current (or named) cue.

        Returns:
            Text start of the new cue

        Raises:
            PreconditionError: If ``after_id`` does not name a cue
            TransactionError: If the edit fails, e.g. on a negative time
        """
        with self.document.transaction():
            cue_text = self.make_cue(start, stop, text)
            pos = self.editor.append_cue(self.document, pos, cue_text, after_id)
            return self.format.after_edit(self.document, pos)

    def merge_with_next(self, pos: int) -> int:
        """Merge the current cue with the following one.

        Returns:
            Identifier position of the merged cue

        Raises:
            PreconditionError: If there is no subtitle to merge into
        """
        with self.document.transaction():
            pos = self.editor.merge_with_next(self.document, pos)
            return self.format.after_edit(self.document, pos)

    def delete_cue(self, pos: int) -> int | None:
        """Delete the current cue, returning where the cursor should go."""
        with self.document.transaction():
            pos = self.editor.delete_cue(self.document, pos)
            if pos is None:
                return None
            return self.format.after_edit(self.document, pos)

    def set_cue_start(self, pos: int, ms: int, sub_id: str | None = None) -> None:
        self._set_time(pos, ms, sub_id, stop=False)

    def set_cue_stop(self, pos: int, ms: int, sub_id: str | None = None) -> None:
        self._set_time(pos, ms, sub_id, stop=True)

    def _set_time(self, pos: int, ms: int, sub_id: str | None, *, stop: bool) -> None:
        with self.document.transaction():
            cue = self.navigator.resolve(self.document, pos, sub_id)
            if cue is None:
                raise PreconditionError("No subtitle at point")
            if stop:
                self.editor.set_stop(self.document, cue, ms)
            else:
                self.editor.set_start(self.document, cue, ms)

    # Canonical form

    def sanitize(self) -> None:
        """Normalize whitespace and separators; atomic and idempotent."""
        with self.document.transaction():
            self.format.sanitize(self.document)
        logger.debug("document_sanitized", format=self.format.tag)

    def validate(self) -> None:
        """Check the document grammar.

        Raises:
            ValidationError: For the first malformed line
        """
        if not self.text:
            return
        self.format.validate(self.document)


def open_document(text: str = "", fmt: str | SubtitleFormat | None = None) -> SubtitleEditor:
    """Bind document text to a subtitle format.

    Args:
        text: Document text
        fmt: Format tag or implementation; defaults to the configured format

    Raises:
        UnknownFormatError: If the format tag is not known
    """
    if fmt is None:
        fmt = get_settings().default_format
    if isinstance(fmt, str):
        fmt = get_format(fmt)
    return SubtitleEditor(Document(text), fmt)
