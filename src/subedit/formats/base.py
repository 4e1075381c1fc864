"""Contract every subtitle format implements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from subedit.core.document import Document
    from subedit.core.patterns import PatternSet


class SubtitleFormat(Protocol):
    """Format-specific half of the editing engine.

    Navigation and structural edits are shared; a format supplies its
    grammar, its timestamp codec, cue synthesis, and its own sanitize and
    validate passes.
    """

    tag: str
    extensions: tuple[str, ...]
    patterns: PatternSet

    def timestamp_to_ms(self, text: str) -> int | None:
        """Parse a timestamp, returning None if it is not one."""
        ...

    def ms_to_timestamp(self, ms: int) -> str:
        """Format milliseconds in the canonical fixed-width form."""
        ...

    def make_cue(self, start: int, stop: int, text: str) -> str:
        """Synthesize the text of one cue, ending with a newline."""
        ...

    def after_edit(self, doc: Document, pos: int) -> int:
        """Restore format invariants after a structural edit.

        Returns:
            ``pos`` adjusted for any text the fix-up changed before it
        """
        ...

    def sanitize(self, doc: Document) -> None:
        """Normalize whitespace and separators in place."""
        ...

    def validate(self, doc: Document) -> None:
        """Raise ValidationError for the first malformed cue."""
        ...
