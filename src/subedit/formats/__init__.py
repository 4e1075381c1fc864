"""Subtitle format registry."""

from enum import StrEnum
from pathlib import PurePath

from subedit.core.errors import UnknownFormatError
from subedit.formats.ass import AssFormat
from subedit.formats.base import SubtitleFormat
from subedit.formats.srt import SrtFormat
from subedit.formats.vtt import VttFormat


class SubtitleFormatTag(StrEnum):
    """Tag a document is bound to when it is opened."""

    VTT = "vtt"
    SRT = "srt"
    ASS = "ass"


_FORMATS: dict[SubtitleFormatTag, SubtitleFormat] = {
    SubtitleFormatTag.VTT: VttFormat(),
    SubtitleFormatTag.SRT: SrtFormat(),
    SubtitleFormatTag.ASS: AssFormat(),
}


def get_format(tag: str) -> SubtitleFormat:
    """Return the format implementation for a tag.

    Raises:
        UnknownFormatError: If no format has this tag
    """
    try:
        return _FORMATS[SubtitleFormatTag(tag.lower())]
    except ValueError as e:
        raise UnknownFormatError(tag) from e


def format_for_filename(filename: str) -> SubtitleFormat:
    """Return the format whose extensions include the file's suffix.

    Raises:
        UnknownFormatError: If the suffix is not a known subtitle extension
    """
    suffix = PurePath(filename).suffix.lower()
    for fmt in _FORMATS.values():
        if suffix in fmt.extensions:
            return fmt
    raise UnknownFormatError(filename)


__all__ = [
    "AssFormat",
    "SrtFormat",
    "SubtitleFormat",
    "SubtitleFormatTag",
    "VttFormat",
    "format_for_filename",
    "get_format",
]
