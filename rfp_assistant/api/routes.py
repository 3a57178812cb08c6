"""API routes for RFP Assistant."""

from collections.abc import Callable
from typing import Any, TypeVar

from fastapi import APIRouter, File, Request, UploadFile
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from rfp_assistant import __version__
from rfp_assistant.api.dependencies import CatalogDep, PipelineDep, SettingsDep
from rfp_assistant.api.errors import APIError
from rfp_assistant.api.uploads import read_upload, read_uploads
from rfp_assistant.errors import classify
from rfp_assistant.llm.prompts import PromptTemplates, TaskType
from rfp_assistant.models.requests import UrlAnalysisRequest
from rfp_assistant.models.responses import (
    DraftResponseResponse,
    FileAnalysisResponse,
    FilledFormField,
    FormFieldCatalogResponse,
    GeneratedRFPResponse,
    MultiFileAnalysisResponse,
    UrlAnalysisResponse,
)
from rfp_assistant.processing.field_merger import parse_field_responses
from rfp_assistant.utils.logging import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["RFP Analysis"])

T = TypeVar("T")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str = __version__


def _to_api_error(err: Exception, task_type: TaskType) -> APIError:
    """Classify a failure and log its raw cause."""
    template = PromptTemplates.get_template(task_type)
    classified = classify(err, template.failure_message)

    log = logger.error if classified.http_status >= 500 else logger.warning
    log(
        "Request failed",
        task=task_type.value,
        category=classified.category.value,
        status=classified.http_status,
        error_type=type(err).__name__,
        error=str(err),
    )
    return APIError(classified.http_status, classified.message)


async def _run(task_type: TaskType, func: Callable[..., T], *args: Any) -> T:
    """Run a blocking pipeline call off the event loop."""
    try:
        return await run_in_threadpool(func, *args)
    except Exception as e:
        raise _to_api_error(e, task_type) from e


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


@router.get("/form-fields", response_model=FormFieldCatalogResponse)
async def list_form_fields(catalog: CatalogDep) -> FormFieldCatalogResponse:
    """List the form fields users are commonly asked to fill in."""
    return FormFieldCatalogResponse(fields=catalog.fields)


@router.post("/analyze-rfp", response_model=UrlAnalysisResponse)
async def analyze_rfp(
    pipeline: PipelineDep,
    request: UrlAnalysisRequest | None = None,
) -> UrlAnalysisResponse:
    """Summarize an RFP published as a web page.

    Args:
        pipeline: Injected analysis pipeline.
        request: Body holding the page URL. A missing body is missing input.

    Returns:
        The summary and the analyzed URL.
    """
    url = request.url if request is not None else None
    result = await _run(TaskType.ANALYZE_SINGLE_RFP, pipeline.analyze_url, url)
    return UrlAnalysisResponse(analysis=result.text, url=url)


@router.post("/analyze-pdf", response_model=FileAnalysisResponse)
async def analyze_pdf(
    pipeline: PipelineDep,
    settings: SettingsDep,
    pdf: UploadFile | None = File(default=None),
) -> FileAnalysisResponse:
    """Analyze a single uploaded PDF.

    Args:
        pipeline: Injected analysis pipeline.
        settings: Application settings.
        pdf: The uploaded PDF.

    Returns:
        The analysis and the file name.
    """
    task = TaskType.ANALYZE_MULTI_RFP
    try:
        document = await read_upload(pdf, settings.max_upload_bytes) if pdf else None
    except Exception as e:
        raise _to_api_error(e, task) from e

    result = await _run(task, pipeline.analyze_pdf, document)
    return FileAnalysisResponse(analysis=result.text, filename=document.original_name)


@router.post("/analyze-rfp-multiple", response_model=MultiFileAnalysisResponse)
async def analyze_rfp_multiple(
    pipeline: PipelineDep,
    settings: SettingsDep,
    rfp_files: list[UploadFile] | None = File(default=None, alias="rfpFiles"),
) -> MultiFileAnalysisResponse:
    """Strategic analysis across a batch of RFP files."""
    task = TaskType.ANALYZE_MULTI_RFP_STRATEGIC
    try:
        documents = await read_uploads(
            rfp_files, settings.max_upload_files, settings.max_upload_bytes
        )
    except Exception as e:
        raise _to_api_error(e, task) from e

    result = await _run(task, pipeline.analyze_rfp_files, documents)
    return MultiFileAnalysisResponse(
        analysis=result.text,
        files=result.source_files,
        file_count=len(result.source_files),
    )


@router.post("/analyze-attachments", response_model=MultiFileAnalysisResponse)
async def analyze_attachments(
    pipeline: PipelineDep,
    settings: SettingsDep,
    attachments: list[UploadFile] | None = File(default=None),
) -> MultiFileAnalysisResponse:
    """List every item the bidder must complete across the attachments."""
    task = TaskType.LIST_FILLABLE_FIELDS
    try:
        documents = await read_uploads(
            attachments, settings.max_upload_files, settings.max_upload_bytes
        )
    except Exception as e:
        raise _to_api_error(e, task) from e

    result = await _run(task, pipeline.analyze_attachments, documents)
    return MultiFileAnalysisResponse(
        analysis=result.text,
        files=result.source_files,
        file_count=len(result.source_files),
    )


@router.post("/generate-rfp", response_model=GeneratedRFPResponse)
async def generate_rfp(
    request: Request,
    pipeline: PipelineDep,
    settings: SettingsDep,
    attachments: list[UploadFile] | None = File(default=None),
) -> GeneratedRFPResponse:
    """Convert attachments to text with the submitted field responses filled in.

    Field responses arrive as form values ``formFieldsCount``,
    ``field_<i>_name``, ``field_<i>`` and ``field_<i>_type``.

    Args:
        request: Incoming request, read for the indexed form values.
        pipeline: Injected analysis pipeline.
        settings: Application settings.
        attachments: Uploaded attachment files.

    Returns:
        The filled text, the processed files and the merged field responses.
    """
    task = TaskType.FILL_AND_REFORMAT
    try:
        documents = await read_uploads(
            attachments, settings.max_upload_files, settings.max_upload_bytes
        )
        form = await request.form()
        values = {key: value for key, value in form.multi_items() if isinstance(value, str)}
        responses = parse_field_responses(values)
    except Exception as e:
        raise _to_api_error(e, task) from e

    result, merged = await _run(task, pipeline.generate_filled_rfp, documents, responses)
    return GeneratedRFPResponse(
        converted_text=result.text,
        processed_files=result.source_files,
        form_field_responses={
            key: FilledFormField(value=field.value, type=field.type, original_name=field.name)
            for key, field in merged.items()
        },
    )


@router.post("/generate-draft-response", response_model=DraftResponseResponse)
async def generate_draft_response(
    pipeline: PipelineDep,
    settings: SettingsDep,
    rfp_files: list[UploadFile] | None = File(default=None, alias="rfpFiles"),
) -> DraftResponseResponse:
    """Draft a proposal response from the RFP files."""
    task = TaskType.DRAFT_RESPONSE
    try:
        documents = await read_uploads(
            rfp_files, settings.max_upload_files, settings.max_upload_bytes
        )
    except Exception as e:
        raise _to_api_error(e, task) from e

    result = await _run(task, pipeline.generate_draft_response, documents)
    return DraftResponseResponse(
        draft_response=result.text,
        processed_files=result.source_files,
    )
