"""Tests for content loaders and the extractor."""

import pytest

from rfp_assistant.errors import ParseError
from rfp_assistant.loaders.extractor import ContentExtractor
from rfp_assistant.loaders.pdf_loader import PDFLoader, extract_pdf_text
from rfp_assistant.models.documents import PARSE_FAILURE_PLACEHOLDER, UploadedDocument


class TestExtractPdfText:
    """Tests for extract_pdf_text."""

    def test_pages_marked(self, make_pdf):
        """Test every page is extracted with a page marker."""
        text = extract_pdf_text(make_pdf("First page", "Second page"))

        assert "[Page 1]" in text
        assert "[Page 2]" in text
        assert text.index("First page") < text.index("Second page")

    def test_empty_bytes(self):
        """Test an empty upload cannot be parsed."""
        with pytest.raises(ParseError):
            extract_pdf_text(b"", filename="empty.pdf")


class TestPDFLoader:
    """Tests for PDFLoader."""

    def test_recognised_by_header(self, sample_pdf):
        """Test a PDF without an extension is still recognised."""
        assert PDFLoader().can_load(UploadedDocument(original_name="upload", content=sample_pdf))

    def test_failure_becomes_placeholder(self):
        """Test loading never raises on unreadable content."""
        extracted = PDFLoader().load(UploadedDocument(original_name="bad.pdf", content=b""))

        assert extracted.failed
        assert extracted.text == PARSE_FAILURE_PLACEHOLDER


class TestContentExtractor:
    """Tests for ContentExtractor."""

    def test_batch_keeps_order_and_isolates_failures(self, make_pdf):
        """Test one corrupt file does not affect its neighbours."""
        documents = [
            UploadedDocument(original_name="a.pdf", content=make_pdf("Alpha")),
            UploadedDocument(original_name="b.pdf", content=b""),
            UploadedDocument(original_name="c.pdf", content=make_pdf("Gamma")),
        ]

        results = ContentExtractor(max_workers=1).extract_all(documents)

        assert [r.original_name for r in results] == ["a.pdf", "b.pdf", "c.pdf"]
        assert "Alpha" in results[0].text
        assert results[1].text == PARSE_FAILURE_PLACEHOLDER
        assert results[1].extraction_error
        assert "Gamma" in results[2].text
        assert not results[0].failed and not results[2].failed

    def test_parallel_batch_keeps_order_and_isolates_failures(self, make_pdf):
        """Test worker processes return results in upload order."""
        documents = [
            UploadedDocument(original_name="a.pdf", content=make_pdf("Alpha")),
            UploadedDocument(original_name="b.pdf", content=b"garbage"),
            UploadedDocument(original_name="c.pdf", content=make_pdf("Gamma")),
        ]

        results = ContentExtractor(max_workers=2).extract_all(documents)

        assert [r.original_name for r in results] == ["a.pdf", "b.pdf", "c.pdf"]
        assert results[0].text == "[Page 1]\nAlpha"
        assert results[1].failed
        assert results[1].text == PARSE_FAILURE_PLACEHOLDER
        assert results[2].text == "[Page 1]\nGamma"
        assert not results[0].failed and not results[2].failed

    def test_empty_batch(self):
        """Test an empty batch gives no results."""
        assert ContentExtractor(max_workers=1).extract_all([]) == []

    def test_text_and_html_uploads(self):
        """Test text and HTML files are routed to their loaders."""
        extractor = ContentExtractor(max_workers=1)

        notes = extractor.extract(UploadedDocument(original_name="notes.TXT", content=b"Due June 1"))
        page = extractor.extract(
            UploadedDocument(
                original_name="rfp.html",
                content=b"<html><body><nav>Menu</nav><p>Scope of work</p></body></html>",
            )
        )

        assert notes.text == "Due June 1"
        assert page.text == "Scope of work"

    def test_unknown_type_parsed_as_pdf(self, sample_pdf):
        """Test uploads with an unrecognised extension fall back to PDF parsing."""
        extracted = ContentExtractor(max_workers=1).extract(
            UploadedDocument(original_name="rfp.bin", content=sample_pdf)
        )

        assert "Budget" in extracted.text

    def test_strict_raises(self):
        """Test strict extraction fails on unreadable content."""
        with pytest.raises(ParseError) as exc_info:
            ContentExtractor(max_workers=1).extract_strict(
                UploadedDocument(original_name="bad.pdf", content=b"")
            )

        assert exc_info.value.filename == "bad.pdf"
