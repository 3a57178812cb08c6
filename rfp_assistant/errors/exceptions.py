"""Exception hierarchy for the ingestion and analysis pipeline."""

from enum import Enum


class RFPAssistantError(Exception):
    """Base class for all errors raised by the pipeline."""


class MissingInputError(RFPAssistantError):
    """No document, file or URL was supplied.

    The message is written for the end user and is returned verbatim.
    """


class UploadRejectedError(RFPAssistantError):
    """An upload broke the per-file size or per-batch count limit."""

    def __init__(self, message: str, too_large: bool = False):
        super().__init__(message)
        self.too_large = too_large


class ConfigurationError(RFPAssistantError):
    """A required provider credential is absent."""

    def __init__(self, provider: str):
        super().__init__(f"{provider} API key not configured")
        self.provider = provider


class ParseError(RFPAssistantError):
    """A document could not be turned into text."""

    def __init__(self, message: str, filename: str | None = None):
        super().__init__(message)
        self.filename = filename


class FetchFailure(str, Enum):
    """Why fetching a web page failed."""

    UNREACHABLE = "unreachable"
    RESTRICTED = "restricted"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"


class FetchError(RFPAssistantError):
    """Fetching a URL failed."""

    def __init__(
        self,
        message: str,
        kind: FetchFailure,
        url: str,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.url = url
        self.status_code = status_code


class ProviderError(RFPAssistantError):
    """The text-generation capability failed.

    Carries the upstream message for classification and logging only.
    """

    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider
