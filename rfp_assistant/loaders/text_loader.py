"""Plain text loader."""

from rfp_assistant.errors import ParseError
from rfp_assistant.loaders.base import BaseContentLoader
from rfp_assistant.models.documents import UploadedDocument


class PlainTextLoader(BaseContentLoader):
    """Loader for .txt and .md uploads."""

    supported_extensions = (".txt", ".md")

    def extract_text(self, document: UploadedDocument) -> str:
        """Decode the upload as UTF-8, replacing undecodable bytes."""
        if b"\x00" in document.content:
            raise ParseError("File looks binary, not text", filename=document.original_name)
        return document.content.decode("utf-8", errors="replace")
