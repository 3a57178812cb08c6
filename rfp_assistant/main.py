"""Main entry point for RFP Assistant."""

import argparse
import sys
from pathlib import Path

from rfp_assistant.api.dependencies import get_form_field_catalog, get_pipeline
from rfp_assistant.catalog import FormFieldCatalog
from rfp_assistant.config import get_settings
from rfp_assistant.errors import classify
from rfp_assistant.llm.prompts import PromptTemplates, TaskType
from rfp_assistant.models.documents import FormFieldResponse, UploadedDocument
from rfp_assistant.utils.logging import get_logger, setup_logging


logger = get_logger(__name__)

# CLI task names for the document tasks
DOCUMENT_TASKS = {
    "pdf": TaskType.ANALYZE_MULTI_RFP,
    "rfp-files": TaskType.ANALYZE_MULTI_RFP_STRATEGIC,
    "attachments": TaskType.LIST_FILLABLE_FIELDS,
    "fill": TaskType.FILL_AND_REFORMAT,
    "draft": TaskType.DRAFT_RESPONSE,
}


def _print_result(title: str, text: str, sources: list[str]) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)
    if sources:
        print(f"\nSources ({len(sources)}):")
        for source in sources:
            print(f"  - {source}")
    print(f"\n{text}")
    print("\n" + "=" * 60)


def _fail(err: Exception, task_type: TaskType) -> int:
    classified = classify(err, PromptTemplates.get_template(task_type).failure_message)
    logger.error("Command failed", error_type=type(err).__name__, error=str(err))
    print(f"Error: {classified.message}", file=sys.stderr)
    return 1


def analyze_files(task: str, files: list[Path], fields: list[list[str]] | None = None) -> int:
    """Run a document task over local files.

    Args:
        task: CLI task name, one of ``DOCUMENT_TASKS``.
        files: Paths of the documents, in order.
        fields: ``[name, value]`` pairs for the fill task.

    Returns:
        Process exit code.
    """
    task_type = DOCUMENT_TASKS[task]
    pipeline = get_pipeline()

    try:
        documents = [UploadedDocument.from_file(path) for path in files]
        if task_type == TaskType.ANALYZE_MULTI_RFP:
            result = pipeline.analyze_pdf(documents[0] if documents else None)
        elif task_type == TaskType.ANALYZE_MULTI_RFP_STRATEGIC:
            result = pipeline.analyze_rfp_files(documents)
        elif task_type == TaskType.LIST_FILLABLE_FIELDS:
            result = pipeline.analyze_attachments(documents)
        elif task_type == TaskType.FILL_AND_REFORMAT:
            responses = [FormFieldResponse(name=name, value=value) for name, value in fields or []]
            result, _ = pipeline.generate_filled_rfp(documents, responses)
        else:
            result = pipeline.generate_draft_response(documents)
    except Exception as e:
        return _fail(e, task_type)

    _print_result(f"{task_type.value.upper()} RESULT", result.text, result.source_files)
    return 0


def analyze_url(url: str) -> int:
    """Summarize an RFP web page."""
    try:
        result = get_pipeline().analyze_url(url)
    except Exception as e:
        return _fail(e, TaskType.ANALYZE_SINGLE_RFP)

    _print_result("RFP SUMMARY", result.text, result.source_files)
    return 0


def list_fields(catalog_path: Path | None = None) -> int:
    """Print the form field catalog."""
    if catalog_path is not None:
        catalog = FormFieldCatalog.load(catalog_path)
    else:
        catalog = get_form_field_catalog()

    for field in catalog:
        print(f"{field.key} [{field.type.value}]")
        print(f"    {field.name}")
        if field.description:
            print(f"    {field.description}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="RFP Assistant - LLM analysis of RFP documents")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze local documents")
    analyze_parser.add_argument("--task", choices=sorted(DOCUMENT_TASKS), required=True)
    analyze_parser.add_argument("--files", type=Path, nargs="+", required=True, help="Documents")
    analyze_parser.add_argument(
        "--field",
        nargs=2,
        action="append",
        metavar=("NAME", "VALUE"),
        help="Form field response for the fill task",
    )

    # URL command
    url_parser = subparsers.add_parser("analyze-url", help="Summarize an RFP web page")
    url_parser.add_argument("url", type=str, help="Page URL")

    # Fields command
    fields_parser = subparsers.add_parser("fields", help="List the form field catalog")
    fields_parser.add_argument("--catalog", type=Path, default=None, help="Catalog JSON file")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start API server")
    server_parser.add_argument("--host", default="0.0.0.0", help="Host")
    server_parser.add_argument("--port", type=int, default=8000, help="Port")
    server_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, json_format=settings.log_json)

    if args.command == "analyze":
        return analyze_files(args.task, args.files, args.field)
    elif args.command == "analyze-url":
        return analyze_url(args.url)
    elif args.command == "fields":
        return list_fields(args.catalog)
    elif args.command == "serve":
        import uvicorn
        uvicorn.run("rfp_assistant.api.app:app", host=args.host, port=args.port, reload=args.reload)
        return 0
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
