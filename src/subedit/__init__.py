"""In-place subtitle document editing engine."""

from subedit.core.document import Document
from subedit.core.errors import (
    PreconditionError,
    SubeditError,
    TransactionError,
    UnknownFormatError,
    ValidationError,
    ValidationErrorKind,
)
from subedit.formats import SubtitleFormatTag, format_for_filename, get_format
from subedit.session import SubtitleEditor, open_document

__all__ = [
    "Document",
    "PreconditionError",
    "SubeditError",
    "SubtitleEditor",
    "SubtitleFormatTag",
    "TransactionError",
    "UnknownFormatError",
    "ValidationError",
    "ValidationErrorKind",
    "format_for_filename",
    "get_format",
    "open_document",
]
