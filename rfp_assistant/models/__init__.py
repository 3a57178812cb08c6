"""Data models for RFP Assistant."""

from rfp_assistant.models.documents import (
    PARSE_FAILURE_PLACEHOLDER,
    TRUNCATION_MARKER,
    AggregatedCorpus,
    ExtractedDocument,
    FieldType,
    FormFieldDefinition,
    FormFieldResponse,
    UploadedDocument,
)
from rfp_assistant.models.requests import UrlAnalysisRequest
from rfp_assistant.models.responses import (
    AnalysisResult,
    DraftResponseResponse,
    ErrorResponse,
    FileAnalysisResponse,
    FilledFormField,
    FormFieldCatalogResponse,
    GeneratedRFPResponse,
    MultiFileAnalysisResponse,
    UrlAnalysisResponse,
)

__all__ = [
    "PARSE_FAILURE_PLACEHOLDER",
    "TRUNCATION_MARKER",
    "AggregatedCorpus",
    "ExtractedDocument",
    "FieldType",
    "FormFieldDefinition",
    "FormFieldResponse",
    "UploadedDocument",
    "UrlAnalysisRequest",
    "AnalysisResult",
    "DraftResponseResponse",
    "ErrorResponse",
    "FileAnalysisResponse",
    "FilledFormField",
    "FormFieldCatalogResponse",
    "GeneratedRFPResponse",
    "MultiFileAnalysisResponse",
    "UrlAnalysisResponse",
]
