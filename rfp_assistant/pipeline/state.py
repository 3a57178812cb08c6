"""Graph state for the analysis pipeline."""

from pydantic import BaseModel, Field

from rfp_assistant.llm.prompts import TaskType
from rfp_assistant.models.documents import (
    AggregatedCorpus,
    ExtractedDocument,
    FormFieldResponse,
    UploadedDocument,
)
from rfp_assistant.models.responses import AnalysisResult


class PipelineState(BaseModel):
    """State passed between the nodes of one pipeline run."""

    # Input
    task_type: TaskType = Field(..., description="Task to run")
    url: str | None = Field(default=None, description="Web page to analyze")
    documents: list[UploadedDocument] = Field(
        default_factory=list,
        description="Uploaded documents, in upload order",
    )
    field_responses: list[FormFieldResponse] = Field(
        default_factory=list,
        description="Form field responses as supplied",
    )
    strict: bool = Field(
        default=False,
        description="Fail the run when a single document cannot be parsed",
    )

    # Extraction
    extracted: list[ExtractedDocument] = Field(default_factory=list)

    # Prompt assembly
    merged_fields: dict[str, FormFieldResponse] = Field(default_factory=dict)
    corpus: AggregatedCorpus | None = Field(default=None)
    prompt: str = Field(default="")

    # Generation
    result: AnalysisResult | None = Field(default=None)

    # Workflow control
    error: Exception | None = Field(
        default=None,
        description="Failure that stopped the run, re-raised to the caller",
    )
    current_step: str = Field(default="start")

    model_config = {"arbitrary_types_allowed": True}
