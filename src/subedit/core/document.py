"""Mutable subtitle document text with atomic change groups."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager

import structlog

from subedit.core.errors import SubeditError, TransactionError

logger = structlog.get_logger()


class Document:
    """The document text, edited in place by offset.

    There is no structured model behind it: every caller derives cues from
    the raw text on demand.  Positions are zero-based offsets.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._depth = 0

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def insert(self, pos: int, text: str) -> int:
        """Insert ``text`` at ``pos`` and return the position after it."""
        self._check(pos)
        self._text = self._text[:pos] + text + self._text[pos:]
        return pos + len(text)

    def delete(self, start: int, end: int) -> str:
        """Delete ``[start, end)`` and return the removed text."""
        self._check(start)
        self._check(end)
        if end < start:
            start, end = end, start
        removed = self._text[start:end]
        self._text = self._text[:start] + self._text[end:]
        return removed

    def replace(self, start: int, end: int, text: str) -> int:
        """Replace ``[start, end)`` with ``text`` and return the end of it."""
        self.delete(start, end)
        return self.insert(min(start, end), text)

    def substitute(
        self,
        pattern: re.Pattern[str],
        repl: str | Callable[[re.Match[str]], str],
    ) -> int:
        """Apply a regex substitution to the whole text.

        Returns:
            Number of replacements made
        """
        self._text, count = pattern.subn(repl, self._text)
        return count

    def line_start(self, pos: int) -> int:
        return self._text.rfind("\n", 0, pos) + 1

    def line_end(self, pos: int) -> int:
        end = self._text.find("\n", pos)
        return len(self._text) if end == -1 else end

    def line_at(self, pos: int) -> str:
        """Return the line containing ``pos`` without its newline."""
        return self._text[self.line_start(pos) : self.line_end(pos)]

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Group edits so that a failure leaves the text untouched.

        Nested transactions join the outermost one.

        Raises:
            SubeditError: Re-raised unchanged after rollback
            TransactionError: Wrapping any other exception, after rollback
        """
        snapshot = self._text
        self._depth += 1
        try:
            yield self
        except SubeditError:
            self._text = snapshot
            if self._depth == 1:
                logger.debug("transaction_rolled_back")
            raise
        except Exception as e:
            self._text = snapshot
            if self._depth > 1:
                raise
            logger.warning("transaction_failed", error=str(e))
            raise TransactionError(f"Edit failed and was rolled back: {e}") from e
        finally:
            self._depth -= 1

    def _check(self, pos: int) -> None:
        if not 0 <= pos <= len(self._text):
            raise IndexError(
                f"Position {pos} outside document of length {len(self._text)}"
            )
