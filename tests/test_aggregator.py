"""Tests for corpus aggregation."""

import pytest

from rfp_assistant.models.documents import ExtractedDocument
from rfp_assistant.processing.aggregator import aggregate, format_block, truncate_text


def _doc(name: str, text: str) -> ExtractedDocument:
    return ExtractedDocument(original_name=name, text=text)


class TestTruncateText:
    """Tests for truncate_text."""

    def test_short_text_unchanged(self):
        """Test text within the budget is returned as is."""
        assert truncate_text("abc", 3) == ("abc", False)

    def test_long_text_clipped_with_marker(self):
        """Test clipping keeps exactly max_length characters plus the marker."""
        text, truncated = truncate_text("abcdefghij", 4)

        assert text == "abcd..."
        assert truncated is True

    def test_idempotent(self):
        """Test re-truncating with the same budget does not change the text."""
        once, _ = truncate_text("x" * 50, 10)
        twice, _ = truncate_text(once, 10)

        assert twice == once

    @pytest.mark.parametrize("max_length", [0, -5])
    def test_rejects_non_positive_budget(self, max_length):
        """Test a non-positive budget is rejected."""
        with pytest.raises(ValueError):
            truncate_text("abc", max_length)


class TestAggregate:
    """Tests for aggregate."""

    def test_blocks_labeled_in_order(self):
        """Test each document gets a header and input order is kept."""
        corpus = aggregate([_doc("a.pdf", "alpha"), _doc("b.pdf", "beta")], 1000)

        assert corpus.text == "=== DOCUMENT: a.pdf ===\nalpha\n\n=== DOCUMENT: b.pdf ===\nbeta"
        assert corpus.source_order == ["a.pdf", "b.pdf"]
        assert corpus.truncated is False

    def test_truncates_tail_only(self):
        """Test truncation keeps the first block intact and clips the tail."""
        docs = [_doc("a.pdf", "A" * 30), _doc("b.pdf", "B" * 30)]
        first_block = format_block(docs[0])

        corpus = aggregate(docs, len(first_block) + 5)

        assert corpus.truncated is True
        assert corpus.text.startswith(first_block)
        assert corpus.text.endswith("...")
        assert len(corpus.text) == len(first_block) + 5 + len("...")

    def test_length_bound(self):
        """Test the corpus never exceeds the budget plus the marker."""
        docs = [_doc(f"{i}.pdf", "word " * 100) for i in range(5)]

        corpus = aggregate(docs, 200)

        assert len(corpus.text) <= 200 + len("...")
        assert corpus.source_order == [f"{i}.pdf" for i in range(5)]

    def test_placeholder_text_included(self):
        """Test failed extractions still appear as labeled blocks."""
        failed = ExtractedDocument.placeholder("bad.pdf", "PDF file is empty")

        corpus = aggregate([failed], 1000)

        assert "=== DOCUMENT: bad.pdf ===" in corpus.text
        assert "[Error: Could not parse this PDF file]" in corpus.text
