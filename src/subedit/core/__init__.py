"""Format-independent editing engine."""

from subedit.core.document import Document
from subedit.core.editor import StructuralEditor
from subedit.core.navigator import Navigator
from subedit.core.patterns import PatternSet

__all__ = [
    "Document",
    "Navigator",
    "PatternSet",
    "StructuralEditor",
]
