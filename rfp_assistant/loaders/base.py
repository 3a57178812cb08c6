"""Base content loader abstract class."""

from abc import ABC, abstractmethod

from rfp_assistant.errors import ParseError
from rfp_assistant.models.documents import ExtractedDocument, UploadedDocument
from rfp_assistant.utils.logging import LoggerMixin


class BaseContentLoader(ABC, LoggerMixin):
    """Abstract base class for loaders that turn an upload into plain text."""

    supported_extensions: tuple[str, ...] = ()

    def can_load(self, document: UploadedDocument) -> bool:
        """Check whether this loader handles the document's file type."""
        return document.suffix in self.supported_extensions

    @abstractmethod
    def extract_text(self, document: UploadedDocument) -> str:
        """Extract plain text from the document.

        Raises:
            ParseError: If the document cannot be read.
        """

    def load(self, document: UploadedDocument) -> ExtractedDocument:
        """Load a document without raising.

        A document that cannot be parsed is replaced by a placeholder so
        that one bad file never blocks the rest of a batch.

        Args:
            document: The uploaded document.

        Returns:
            The extracted document, or its placeholder.
        """
        try:
            text = self.extract_text(document)
        except ParseError as e:
            self.log_warning(
                "Could not extract document text",
                filename=document.original_name,
                error=str(e),
            )
            return ExtractedDocument.placeholder(document.original_name, str(e))

        return ExtractedDocument(original_name=document.original_name, text=text)
