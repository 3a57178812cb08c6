"""LangGraph workflow for RFP ingestion and analysis."""

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from langgraph.graph import END, StateGraph
from langsmith import traceable

from rfp_assistant.llm.dispatcher import AnalysisDispatcher
from rfp_assistant.llm.prompts import ProviderKind, TaskType
from rfp_assistant.loaders.extractor import ContentExtractor
from rfp_assistant.loaders.web_loader import WebPageLoader
from rfp_assistant.models.documents import FormFieldResponse, UploadedDocument
from rfp_assistant.models.responses import AnalysisResult
from rfp_assistant.pipeline.nodes import PipelineNodes
from rfp_assistant.pipeline.state import PipelineState
from rfp_assistant.utils.logging import LoggerMixin


class RFPPipeline(LoggerMixin):
    """Run each use case as input check, extraction, prompt assembly and generation.

    The first failing step stops the run and its exception is raised to the
    caller unchanged, so the transport can classify it.
    """

    def __init__(
        self,
        extractor: ContentExtractor,
        web_loader: WebPageLoader,
        dispatchers: Mapping[ProviderKind, AnalysisDispatcher | None],
    ):
        """Initialize the pipeline.

        Args:
            extractor: Extractor for uploaded documents.
            web_loader: Loader for URL analyses.
            dispatchers: Dispatcher per provider, None where no credential
                is configured.
        """
        self._nodes = PipelineNodes(
            extractor=extractor,
            web_loader=web_loader,
            dispatchers=dict(dispatchers),
        )
        self._graph = self._build_graph()

    def _build_graph(self):
        graph = StateGraph(PipelineState)

        graph.add_node("validate_input", self._nodes.validate_input)
        graph.add_node("extract_content", self._nodes.extract_content)
        graph.add_node("assemble_prompt", self._nodes.assemble_prompt)
        graph.add_node("generate", self._nodes.generate)
        graph.add_node("handle_error", self._nodes.handle_error)

        graph.set_entry_point("validate_input")

        graph.add_conditional_edges(
            "validate_input",
            self._route_on_error,
            {"continue": "extract_content", "error": "handle_error"},
        )
        graph.add_conditional_edges(
            "extract_content",
            self._route_on_error,
            {"continue": "assemble_prompt", "error": "handle_error"},
        )
        graph.add_conditional_edges(
            "assemble_prompt",
            self._route_on_error,
            {"continue": "generate", "error": "handle_error"},
        )
        graph.add_conditional_edges(
            "generate",
            self._route_on_error,
            {"continue": END, "error": "handle_error"},
        )
        graph.add_edge("handle_error", END)

        return graph.compile()

    def _route_on_error(self, state: PipelineState) -> Literal["continue", "error"]:
        return "error" if state.error is not None else "continue"

    @traceable(name="run_pipeline")
    def run(self, initial_state: PipelineState) -> PipelineState:
        """Run the graph to completion.

        Args:
            initial_state: Task and inputs.

        Returns:
            The final state.

        Raises:
            RFPAssistantError: The failure that stopped the run.
        """
        self.log_info(
            "Starting pipeline",
            task=initial_state.task_type.value,
            documents=len(initial_state.documents),
        )

        final_state = self._graph.invoke(initial_state)
        if isinstance(final_state, dict):
            final_state = PipelineState(**final_state)

        if final_state.error is not None:
            raise final_state.error

        self.log_info(
            "Pipeline complete",
            task=final_state.task_type.value,
            truncated=final_state.corpus.truncated if final_state.corpus else False,
        )
        return final_state

    def _run_documents(
        self,
        task_type: TaskType,
        documents: Sequence[UploadedDocument],
        **inputs: Any,
    ) -> PipelineState:
        return self.run(
            PipelineState(task_type=task_type, documents=list(documents), **inputs)
        )

    def analyze_url(self, url: str | None) -> AnalysisResult:
        """Summarize an RFP published as a web page."""
        state = self.run(PipelineState(task_type=TaskType.ANALYZE_SINGLE_RFP, url=url))
        return state.result

    def analyze_pdf(self, document: UploadedDocument | None) -> AnalysisResult:
        """Analyze one uploaded PDF. An unreadable file fails the request."""
        documents = [document] if document is not None else []
        return self._run_documents(TaskType.ANALYZE_MULTI_RFP, documents, strict=True).result

    def analyze_rfp_files(self, documents: Sequence[UploadedDocument]) -> AnalysisResult:
        """Strategic analysis across a batch of RFP files."""
        return self._run_documents(TaskType.ANALYZE_MULTI_RFP_STRATEGIC, documents).result

    def analyze_attachments(self, documents: Sequence[UploadedDocument]) -> AnalysisResult:
        """List the items a bidder must fill in across the attachments."""
        return self._run_documents(TaskType.LIST_FILLABLE_FIELDS, documents).result

    def generate_filled_rfp(
        self,
        documents: Sequence[UploadedDocument],
        field_responses: Sequence[FormFieldResponse] = (),
    ) -> tuple[AnalysisResult, dict[str, FormFieldResponse]]:
        """Convert attachments to text with the user's answers filled in.

        Returns:
            The generated text and the merged field responses it used.
        """
        state = self._run_documents(
            TaskType.FILL_AND_REFORMAT,
            documents,
            field_responses=list(field_responses),
        )
        return state.result, state.merged_fields

    def generate_draft_response(self, documents: Sequence[UploadedDocument]) -> AnalysisResult:
        """Draft a proposal response from the RFP files."""
        return self._run_documents(TaskType.DRAFT_RESPONSE, documents).result
