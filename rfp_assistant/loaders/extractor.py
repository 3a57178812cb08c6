"""Content extraction over single uploads and batches."""

import multiprocessing
from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor

from rfp_assistant.config import get_settings
from rfp_assistant.errors import ParseError
from rfp_assistant.loaders.base import BaseContentLoader
from rfp_assistant.loaders.pdf_loader import PDFLoader
from rfp_assistant.loaders.text_loader import PlainTextLoader
from rfp_assistant.loaders.web_loader import HTMLFileLoader
from rfp_assistant.models.documents import ExtractedDocument, UploadedDocument
from rfp_assistant.utils.logging import LoggerMixin


class ContentExtractor(LoggerMixin):
    """Turn uploaded documents into plain text.

    Uploads are routed to a loader by type. Anything unrecognised is treated
    as a PDF, which is what the upload forms accept.
    """

    def __init__(
        self,
        loaders: list[BaseContentLoader] | None = None,
        max_workers: int | None = None,
    ):
        """Initialize the extractor.

        Args:
            loaders: Loaders to try in order. Defaults to PDF, text and HTML.
            max_workers: Worker processes for batch extraction. 1 means
                sequential.
        """
        self._fallback = PDFLoader()
        self._loaders = loaders or [self._fallback, PlainTextLoader(), HTMLFileLoader()]
        self.max_workers = max_workers or get_settings().extraction_workers

    def _select_loader(self, document: UploadedDocument) -> BaseContentLoader:
        for loader in self._loaders:
            if loader.can_load(document):
                return loader
        return self._fallback

    def extract(self, document: UploadedDocument) -> ExtractedDocument:
        """Extract one document. Never raises on unreadable content."""
        return self._select_loader(document).load(document)

    def extract_strict(self, document: UploadedDocument) -> ExtractedDocument:
        """Extract one document that has nothing to fall back on.

        Raises:
            ParseError: If the document could not be parsed.
        """
        extracted = self.extract(document)
        if extracted.failed:
            raise ParseError(extracted.extraction_error or "unknown error", document.original_name)
        return extracted

    def extract_all(self, documents: Iterable[UploadedDocument]) -> list[ExtractedDocument]:
        """Extract a batch, one result per input, in upload order.

        Args:
            documents: Uploaded documents.

        Returns:
            Extracted documents in the same order as the input.
        """
        documents = list(documents)
        workers = min(self.max_workers, len(documents))

        if workers <= 1:
            results = [self.extract(doc) for doc in documents]
        else:
            # PyMuPDF is not thread-safe; use processes. map() keeps input order.
            context = multiprocessing.get_context("spawn")
            with ProcessPoolExecutor(max_workers=workers, mp_context=context) as executor:
                results = list(executor.map(self.extract, documents))

        self.log_info(
            "Documents extracted",
            documents=len(results),
            failed=sum(1 for r in results if r.failed),
            workers=max(workers, 1),
        )
        return results
