"""Error taxonomy and classification."""

from rfp_assistant.errors.classifier import ClassifiedError, ErrorCategory, classify
from rfp_assistant.errors.exceptions import (
    ConfigurationError,
    FetchError,
    FetchFailure,
    MissingInputError,
    ParseError,
    ProviderError,
    RFPAssistantError,
    UploadRejectedError,
)

__all__ = [
    "ClassifiedError",
    "ErrorCategory",
    "classify",
    "ConfigurationError",
    "FetchError",
    "FetchFailure",
    "MissingInputError",
    "ParseError",
    "ProviderError",
    "RFPAssistantError",
    "UploadRejectedError",
]
