"""Tests for format lookup."""

import pytest

from subedit.core.errors import UnknownFormatError
from subedit.formats import (
    AssFormat,
    SrtFormat,
    SubtitleFormatTag,
    VttFormat,
    format_for_filename,
    get_format,
)


@pytest.mark.unit
class TestGetFormat:
    """Test lookup by tag."""

    @pytest.mark.parametrize(
        ("tag", "cls"),
        [("vtt", VttFormat), ("SRT", SrtFormat), (SubtitleFormatTag.ASS, AssFormat)],
    )
    def test_known_tags(self, tag, cls):
        """Test each tag maps to its implementation."""
        assert isinstance(get_format(tag), cls)

    def test_same_instance(self):
        """Test formats are shared, read-only singletons."""
        assert get_format("vtt") is get_format("vtt")

    def test_unknown_tag_raises_error(self):
        """Test an unknown tag."""
        with pytest.raises(UnknownFormatError, match="Unknown subtitle format: sub"):
            get_format("sub")


@pytest.mark.unit
class TestFormatForFilename:
    """Test lookup by file extension."""

    @pytest.mark.parametrize(
        ("filename", "tag"),
        [
            ("movie.vtt", "vtt"),
            ("/tmp/Movie.SRT", "srt"),
            ("episode.ass", "ass"),
            ("legacy.ssa", "ass"),
        ],
    )
    def test_known_extensions(self, filename, tag):
        """Test extensions select the right format."""
        assert format_for_filename(filename).tag == tag

    def test_unknown_extension_raises_error(self):
        """Test an unsupported extension."""
        with pytest.raises(UnknownFormatError) as exc_info:
            format_for_filename("notes.txt")

        assert exc_info.value.code == "unknown_format"
