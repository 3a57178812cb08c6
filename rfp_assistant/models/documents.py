"""Document-related Pydantic models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


PARSE_FAILURE_PLACEHOLDER = "[Error: Could not parse this PDF file]"
TRUNCATION_MARKER = "..."


class UploadedDocument(BaseModel):
    """A raw upload, held in memory for the lifetime of one request."""

    original_name: str = Field(..., description="Filename as supplied by the client")
    content: bytes = Field(..., repr=False, description="Raw file bytes")

    @property
    def size_bytes(self) -> int:
        """Size of the upload in bytes."""
        return len(self.content)

    @property
    def suffix(self) -> str:
        """Lower-cased file extension, including the dot."""
        return Path(self.original_name).suffix.lower()

    @classmethod
    def from_file(cls, file_path: Path) -> "UploadedDocument":
        """Read a document from disk."""
        file_path = Path(file_path)
        return cls(original_name=file_path.name, content=file_path.read_bytes())

    model_config = {"frozen": True}


class ExtractedDocument(BaseModel):
    """Plain text extracted from one uploaded document."""

    original_name: str = Field(..., description="Name of the source document")
    text: str = Field(default="", description="Extracted plain text")
    extraction_error: str | None = Field(
        default=None,
        description="Reason extraction failed, if it did",
    )

    @property
    def failed(self) -> bool:
        """Whether extraction failed and the text is a placeholder."""
        return self.extraction_error is not None

    @classmethod
    def placeholder(cls, original_name: str, reason: str) -> "ExtractedDocument":
        """Build the stand-in for a document that could not be parsed."""
        return cls(
            original_name=original_name,
            text=PARSE_FAILURE_PLACEHOLDER,
            extraction_error=reason,
        )

    model_config = {"frozen": True}


class AggregatedCorpus(BaseModel):
    """Labeled, length-bounded text built from one or more documents."""

    text: str = Field(..., description="Concatenated labeled document blocks")
    truncated: bool = Field(default=False, description="Whether the tail was clipped")
    source_order: list[str] = Field(
        default_factory=list,
        description="Document names in the order their blocks appear",
    )

    model_config = {"frozen": True}


class FieldType(str, Enum):
    """Kinds of response a form field expects."""

    TEXT = "text"
    DATE = "date"
    SIGNATURE = "signature"
    YESNO = "yesno"
    CHECKBOX = "checkbox"
    NUMBER = "number"


class FormFieldResponse(BaseModel):
    """A user's answer to one form field."""

    name: str = Field(..., description="Field label as declared by the user")
    value: str = Field(..., description="User-supplied value")
    type: FieldType = Field(default=FieldType.TEXT)

    @property
    def normalized_name(self) -> str:
        """Lookup key for this field."""
        return self.name.strip().lower()

    model_config = {"frozen": True}


class FormFieldDefinition(BaseModel):
    """One row of the form-field catalog."""

    key: str = Field(..., min_length=1, description="Stable identifier")
    name: str = Field(..., min_length=1, description="Label as printed on the form")
    description: str = Field(default="", description="Guidance shown to the user")
    type: FieldType = Field(default=FieldType.TEXT)

    model_config = {"frozen": True}
