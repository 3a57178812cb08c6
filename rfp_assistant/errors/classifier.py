"""Map pipeline failures onto a small set of user-facing error categories."""

from enum import Enum

from pydantic import BaseModel, Field

from rfp_assistant.errors.exceptions import (
    ConfigurationError,
    FetchError,
    FetchFailure,
    MissingInputError,
    ParseError,
    ProviderError,
    UploadRejectedError,
)


DEFAULT_FAILURE_MESSAGE = "Failed to process the request. Please try again later."

UNREACHABLE_MESSAGE = "Invalid URL or website is not accessible."
RESTRICTED_MESSAGE = (
    "Unable to access the website. The site may be restricted or the URL may be incorrect."
)
INVALID_DOCUMENT_MESSAGE = "Invalid PDF file or corrupted document."

# Substrings (lower-case) that mark a provider failure as an auth or billing problem
PROVIDER_CONFIGURATION_MARKERS = (
    "api key",
    "api_key",
    "apikey",
    "quota",
    "billing",
    "authentication",
    "unauthorized",
)


class ErrorCategory(str, Enum):
    """Stable error categories exposed to the transport layer."""

    MISSING_INPUT = "missing_input"
    UPLOAD_REJECTED = "upload_rejected"
    CONFIGURATION = "configuration"
    UNREACHABLE_SOURCE = "unreachable_source"
    ACCESS_RESTRICTED = "access_restricted"
    PROVIDER_CONFIGURATION = "provider_configuration"
    INVALID_DOCUMENT = "invalid_document"
    INTERNAL = "internal"


class ClassifiedError(BaseModel):
    """An error ready to be rendered by the transport."""

    http_status: int = Field(..., ge=400, le=599)
    message: str = Field(..., description="Short, actionable message for the end user")
    category: ErrorCategory

    model_config = {"frozen": True}


def is_provider_configuration_error(err: ProviderError) -> bool:
    """Check whether a provider failure mentions an auth or quota condition."""
    text = str(err).lower()
    return any(marker in text for marker in PROVIDER_CONFIGURATION_MARKERS)


def classify(err: BaseException, fallback_message: str | None = None) -> ClassifiedError:
    """Classify an exception. The first matching rule wins.

    Args:
        err: The exception raised while handling a request.
        fallback_message: Message for unclassified failures.

    Returns:
        Status code, message and category for the response.
    """
    if isinstance(err, MissingInputError):
        return ClassifiedError(
            http_status=400, message=str(err), category=ErrorCategory.MISSING_INPUT
        )

    if isinstance(err, UploadRejectedError):
        return ClassifiedError(
            http_status=413 if err.too_large else 400,
            message=str(err),
            category=ErrorCategory.UPLOAD_REJECTED,
        )

    if isinstance(err, ConfigurationError):
        return ClassifiedError(
            http_status=500,
            message=f"{err.provider} API key not configured",
            category=ErrorCategory.CONFIGURATION,
        )

    if isinstance(err, FetchError) and err.kind == FetchFailure.UNREACHABLE:
        return ClassifiedError(
            http_status=400,
            message=UNREACHABLE_MESSAGE,
            category=ErrorCategory.UNREACHABLE_SOURCE,
        )

    if isinstance(err, FetchError) and err.kind == FetchFailure.RESTRICTED:
        return ClassifiedError(
            http_status=400,
            message=RESTRICTED_MESSAGE,
            category=ErrorCategory.ACCESS_RESTRICTED,
        )

    if isinstance(err, ProviderError) and is_provider_configuration_error(err):
        return ClassifiedError(
            http_status=500,
            message=(
                f"{err.provider} API configuration error. "
                "Please check your API key and billing."
            ),
            category=ErrorCategory.PROVIDER_CONFIGURATION,
        )

    if isinstance(err, ParseError):
        return ClassifiedError(
            http_status=400,
            message=INVALID_DOCUMENT_MESSAGE,
            category=ErrorCategory.INVALID_DOCUMENT,
        )

    return ClassifiedError(
        http_status=500,
        message=fallback_message or DEFAULT_FAILURE_MESSAGE,
        category=ErrorCategory.INTERNAL,
    )
