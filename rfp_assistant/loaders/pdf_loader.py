"""PDF text extraction using PyMuPDF."""

import fitz  # PyMuPDF

from rfp_assistant.errors import ParseError
from rfp_assistant.loaders.base import BaseContentLoader
from rfp_assistant.models.documents import UploadedDocument


def extract_pdf_text(content: bytes, filename: str | None = None) -> str:
    """Extract the text of every page of an in-memory PDF.

    Args:
        content: Raw PDF bytes.
        filename: Name used in error messages.

    Returns:
        Page texts, each preceded by a ``[Page N]`` marker.

    Raises:
        ParseError: If the bytes are empty, corrupt or encrypted.
    """
    if not content:
        raise ParseError("PDF file is empty", filename=filename)

    try:
        doc = fitz.open(stream=content, filetype="pdf")
    except Exception as e:
        raise ParseError(f"Could not open PDF: {e}", filename=filename) from e

    try:
        if doc.needs_pass:
            raise ParseError("PDF is password protected", filename=filename)

        text_parts = []
        for page_num, page in enumerate(doc):
            text = page.get_text("text")
            text_parts.append(f"[Page {page_num + 1}]\n{text}")
        return "\n\n".join(text_parts)

    except ParseError:
        raise
    except Exception as e:
        raise ParseError(f"Could not read PDF text: {e}", filename=filename) from e
    finally:
        doc.close()


class PDFLoader(BaseContentLoader):
    """PDF loader working on in-memory uploads."""

    supported_extensions = (".pdf",)

    def can_load(self, document: UploadedDocument) -> bool:
        """PDFs are recognised by extension or by their magic header."""
        return super().can_load(document) or document.content[:5] == b"%PDF-"

    def extract_text(self, document: UploadedDocument) -> str:
        """Extract text from the PDF bytes."""
        self.log_debug(
            "Parsing PDF",
            filename=document.original_name,
            size_bytes=document.size_bytes,
        )
        return extract_pdf_text(document.content, filename=document.original_name)
