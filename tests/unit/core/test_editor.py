"""Tests for structural cue edits."""

import pytest

from subedit.core.document import Document
from subedit.core.editor import StructuralEditor
from subedit.core.errors import PreconditionError
from subedit.core.navigator import Navigator
from subedit.formats import get_format

NEW_CUE = "00:00:05.000 --> 00:00:06.000\nNew\n"


@pytest.fixture
def editor() -> StructuralEditor:
    return StructuralEditor(Navigator(get_format("vtt")))


@pytest.mark.unit
class TestPrependCue:
    """Test inserting before a cue."""

    def test_prepend_before_second_cue(self, editor, sample_vtt_content):
        """Test the new cue gets its own blank-line separator."""
        doc = Document(sample_vtt_content)
        pos = sample_vtt_content.index("World")

        text_start = editor.prepend_cue(doc, pos, NEW_CUE)

        assert doc.text == (
            "00:00:01.000 --> 00:00:02.000\nHello\n\n"
            "00:00:05.000 --> 00:00:06.000\nNew\n\n"
            "00:00:03.000 --> 00:00:04.000\nWorld\n"
        )
        assert doc.text[text_start:].startswith("New\n")

    def test_prepend_empty_cue_adds_no_extra_blank_line(
        self, editor, sample_vtt_content
    ):
        """Test an empty text already ends in a blank line."""
        doc = Document(sample_vtt_content)

        editor.prepend_cue(doc, 0, "00:00:00.000 --> 00:00:00.500\n\n")

        assert doc.text.startswith(
            "00:00:00.000 --> 00:00:00.500\n\n00:00:01.000 --> 00:00:02.000\n"
        )

    def test_prepend_before_labelled_cue_keeps_label(self, editor):
        """Test insertion happens before the label line."""
        doc = Document("intro\n00:00:01.000 --> 00:00:02.000\nHello\n")

        editor.prepend_cue(doc, 10, NEW_CUE)

        assert doc.text == (
            "00:00:05.000 --> 00:00:06.000\nNew\n\n"
            "intro\n00:00:01.000 --> 00:00:02.000\nHello\n"
        )

    def test_prepend_unknown_id_raises_error(self, editor, sample_vtt_content):
        """Test an id that is not in the document fails."""
        doc = Document(sample_vtt_content)

        with pytest.raises(PreconditionError, match="not found"):
            editor.prepend_cue(doc, 0, NEW_CUE, before_id="00:09:00.000")

        assert doc.text == sample_vtt_content


@pytest.mark.unit
class TestAppendCue:
    """Test inserting after a cue."""

    def test_append_after_last_cue(self, editor, sample_vtt_content):
        """Test exactly one blank line and one trailing newline."""
        doc = Document(sample_vtt_content)

        text_start = editor.append_cue(doc, len(sample_vtt_content) - 2, NEW_CUE)

        assert doc.text == sample_vtt_content + "\n" + NEW_CUE
        assert doc.text[text_start:] == "New\n"

    def test_append_after_first_cue_goes_before_second(
        self, editor, sample_vtt_content
    ):
        """Test appending in the middle delegates to prepend."""
        doc = Document(sample_vtt_content)

        editor.append_cue(doc, 0, NEW_CUE)

        assert doc.text.index("New") < doc.text.index("World")
        assert "\n\n00:00:05.000" in doc.text
        assert "New\n\n00:00:03.000" in doc.text

    def test_append_to_document_without_trailing_newline(self, editor):
        """Test missing newlines are added, never more than needed."""
        doc = Document("00:00:01.000 --> 00:00:02.000\nHello")

        editor.append_cue(doc, 0, NEW_CUE)

        assert doc.text == "00:00:01.000 --> 00:00:02.000\nHello\n\n" + NEW_CUE

    def test_append_keeps_existing_blank_lines(self, editor):
        """Test an existing blank line is reused."""
        doc = Document("00:00:01.000 --> 00:00:02.000\nHello\n\n")

        editor.append_cue(doc, 0, NEW_CUE)

        assert doc.text == "00:00:01.000 --> 00:00:02.000\nHello\n\n" + NEW_CUE

    def test_append_to_empty_document(self, editor):
        """Test the first cue goes at the very start."""
        doc = Document("")

        text_start = editor.append_cue(doc, 0, NEW_CUE)

        assert doc.text == NEW_CUE
        assert text_start == NEW_CUE.index("New")

    def test_append_after_header(self, editor):
        """Test a header-only document gets a separator before the cue."""
        doc = Document("WEBVTT\n")

        editor.append_cue(doc, 0, NEW_CUE)

        assert doc.text == "WEBVTT\n\n" + NEW_CUE


@pytest.mark.unit
class TestMergeWithNext:
    """Test merging adjacent cues."""

    def test_merge_two_cues(self, editor, sample_vtt_content):
        """Test start of first, stop of second, texts on two lines."""
        doc = Document(sample_vtt_content)

        pos = editor.merge_with_next(doc, 0)

        assert doc.text == "00:00:01.000 --> 00:00:04.000\nHello\nWorld\n"
        assert pos == 0

    def test_merge_without_next_raises_error(self, editor, sample_vtt_content):
        """Test merging the last cue is refused."""
        doc = Document(sample_vtt_content)

        with pytest.raises(PreconditionError, match="No subtitle to merge into"):
            editor.merge_with_next(doc, sample_vtt_content.index("World"))

    def test_merge_into_empty_text(self, editor):
        """Test an empty current text does not get a leading blank line."""
        doc = Document(
            "00:00:01.000 --> 00:00:02.000\n\n00:00:03.000 --> 00:00:04.000\nB\n"
        )

        editor.merge_with_next(doc, 0)

        assert doc.text == "00:00:01.000 --> 00:00:04.000\nB\n"


@pytest.mark.unit
class TestDeleteCue:
    """Test removing cues."""

    def test_delete_first_cue(self, editor, sample_vtt_content):
        """Test the following cue moves up."""
        doc = Document(sample_vtt_content)

        pos = editor.delete_cue(doc, 0)

        assert doc.text == "00:00:03.000 --> 00:00:04.000\nWorld\n"
        assert pos == 0

    def test_delete_last_cue(self, editor, sample_vtt_content):
        """Test the previous cue keeps its trailing newline."""
        doc = Document(sample_vtt_content)

        pos = editor.delete_cue(doc, sample_vtt_content.index("World"))

        assert doc.text == "00:00:01.000 --> 00:00:02.000\nHello\n"
        assert pos == 0

    def test_delete_only_cue(self, editor):
        """Test deleting the only cue empties the document."""
        doc = Document("00:00:01.000 --> 00:00:02.000\nHello\n")

        editor.delete_cue(doc, 0)

        assert doc.text == ""

    def test_delete_outside_cue(self, editor):
        """Test nothing happens before the first cue."""
        doc = Document("WEBVTT\n")

        assert editor.delete_cue(doc, 0) is None
        assert doc.text == "WEBVTT\n"
