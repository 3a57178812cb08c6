"""Document loader modules."""

from rfp_assistant.loaders.base import BaseContentLoader
from rfp_assistant.loaders.extractor import ContentExtractor
from rfp_assistant.loaders.pdf_loader import PDFLoader, extract_pdf_text
from rfp_assistant.loaders.text_loader import PlainTextLoader
from rfp_assistant.loaders.web_loader import HTMLFileLoader, WebPageLoader, clean_html

__all__ = [
    "BaseContentLoader",
    "ContentExtractor",
    "PDFLoader",
    "extract_pdf_text",
    "PlainTextLoader",
    "HTMLFileLoader",
    "WebPageLoader",
    "clean_html",
]
