"""Response models for RFP Assistant."""

from pydantic import BaseModel, Field

from rfp_assistant.models.documents import FieldType, FormFieldDefinition


class AnalysisResult(BaseModel):
    """Raw model output for one successful run."""

    text: str = Field(..., description="Text returned by the generation capability")
    source_files: list[str] = Field(
        default_factory=list,
        description="Names of the documents the text was generated from, in order",
    )

    model_config = {"frozen": True}


class _APIModel(BaseModel):
    """Base for transport models serialized with camelCase aliases."""

    model_config = {"populate_by_name": True}


class ErrorResponse(_APIModel):
    """Body of every failed request."""

    error: str


class UrlAnalysisResponse(_APIModel):
    """Response for a web-page analysis."""

    success: bool = True
    analysis: str
    url: str


class FileAnalysisResponse(_APIModel):
    """Response for a single PDF analysis."""

    success: bool = True
    analysis: str
    filename: str


class MultiFileAnalysisResponse(_APIModel):
    """Response for analyses over a batch of files."""

    success: bool = True
    analysis: str
    files: list[str] = Field(default_factory=list)
    file_count: int = Field(default=0, alias="fileCount")


class FilledFormField(_APIModel):
    """A merged form field echoed back to the client."""

    value: str
    type: FieldType
    original_name: str = Field(..., alias="originalName")


class GeneratedRFPResponse(_APIModel):
    """Response for the fill-and-reformat task."""

    success: bool = True
    converted_text: str = Field(..., alias="convertedText")
    processed_files: list[str] = Field(default_factory=list, alias="processedFiles")
    form_field_responses: dict[str, FilledFormField] = Field(
        default_factory=dict, alias="formFieldResponses"
    )


class DraftResponseResponse(_APIModel):
    """Response for the draft-response task."""

    success: bool = True
    draft_response: str = Field(..., alias="draftResponse")
    processed_files: list[str] = Field(default_factory=list, alias="processedFiles")


class FormFieldCatalogResponse(_APIModel):
    """The configured form-field catalog."""

    fields: list[FormFieldDefinition] = Field(default_factory=list)
