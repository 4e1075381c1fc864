"""Whitespace normalization passes shared by the format sanitizers."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subedit.core.document import Document
    from subedit.core.navigator import Navigator

_TRAILING_BLANKS = re.compile(r"[ \t]+$", re.MULTILINE)
_LEADING_BLANKS = re.compile(r"^[ \t]+", re.MULTILINE)
_LEADING_NEWLINES = re.compile(r"\A\n+")
_BLANK_LINE_RUNS = re.compile(r"\n{3,}")
_TRAILING_NEWLINES = re.compile(r"\n+\Z")
_ARROW = re.compile(r"[ \t]*-+>[ \t]*")


def strip_line_whitespace(
    doc: Document,
    *,
    indentation: bool = True,
    keep: re.Pattern[str] | None = None,
) -> None:
    """Remove trailing blanks from every line, and indentation if asked.

    Lines inside a match of ``keep`` keep their indentation.
    """
    doc.substitute(_TRAILING_BLANKS, "")
    if not indentation:
        return
    if keep is None:
        doc.substitute(_LEADING_BLANKS, "")
        return
    blocks = re.compile(
        rf"(?P<keep>{keep.pattern})|{_LEADING_BLANKS.pattern}", keep.flags
    )
    doc.substitute(blocks, lambda m: m.group("keep") or "")


def collapse_blank_lines(doc: Document) -> None:
    """Drop blank lines at the top and squeeze runs to a single blank line."""
    doc.substitute(_LEADING_NEWLINES, "")
    doc.substitute(_BLANK_LINE_RUNS, "\n\n")


def normalize_arrows(doc: Document, nav: Navigator, arrow: str = " --> ") -> int:
    """Rewrite the start/stop arrow of every cue timing line to ``arrow``.

    Returns:
        Number of timing lines changed
    """
    changed = 0
    for cue in reversed(nav.iter_cues(doc)):
        found = _ARROW.match(doc.text, cue.end("start"))
        if found is None or found.group() == arrow:
            continue
        # Only between two timestamps
        if not nav.patterns.timestamp.match(doc.text, found.end()):
            continue
        doc.replace(found.start(), found.end(), arrow)
        changed += 1
    return changed


def finish_document(doc: Document, nav: Navigator) -> None:
    """End the document with one newline, or two after an empty last cue."""
    doc.substitute(_TRAILING_NEWLINES, "")
    if not doc.text:
        return
    cues = nav.iter_cues(doc)
    if cues and nav.text_start(doc, cues[-1]) >= len(doc):
        doc.insert(len(doc), "\n\n")
    else:
        doc.insert(len(doc), "\n")
