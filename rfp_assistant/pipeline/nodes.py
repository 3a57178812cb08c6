"""Graph nodes for the analysis pipeline."""

from typing import Any

from langsmith import traceable

from rfp_assistant.errors import ConfigurationError, MissingInputError
from rfp_assistant.llm.dispatcher import AnalysisDispatcher
from rfp_assistant.llm.prompt_builder import build_prompt
from rfp_assistant.llm.prompts import PromptTemplates, ProviderKind, TaskType
from rfp_assistant.loaders.extractor import ContentExtractor
from rfp_assistant.loaders.web_loader import WebPageLoader
from rfp_assistant.pipeline.state import PipelineState
from rfp_assistant.processing.aggregator import aggregate
from rfp_assistant.processing.field_merger import merge_fields
from rfp_assistant.utils.logging import LoggerMixin


URL_TASKS = frozenset({TaskType.ANALYZE_SINGLE_RFP})


class PipelineNodes(LoggerMixin):
    """Collection of nodes for the analysis graph.

    Each node returns the state fields it updates. A node that fails records
    the exception under ``error`` so the graph can route to ``handle_error``.
    """

    def __init__(
        self,
        extractor: ContentExtractor,
        web_loader: WebPageLoader,
        dispatchers: dict[ProviderKind, AnalysisDispatcher | None],
    ):
        """Initialize pipeline nodes.

        Args:
            extractor: Extractor for uploaded documents.
            web_loader: Loader for URL analyses.
            dispatchers: Dispatcher per provider. None marks a provider
                without credentials.
        """
        self._extractor = extractor
        self._web_loader = web_loader
        self._dispatchers = dispatchers

    @traceable(name="validate_input")
    def validate_input(self, state: PipelineState) -> dict[str, Any]:
        """Check that input and credentials are present, in that order."""
        template = PromptTemplates.get_template(state.task_type)

        if state.task_type in URL_TASKS:
            has_input = bool(state.url and state.url.strip())
        else:
            has_input = bool(state.documents)

        if not has_input:
            self.log_warning("Request has no input", task=state.task_type.value)
            return {
                "error": MissingInputError(template.missing_input_message),
                "current_step": "error",
            }

        if self._dispatchers.get(template.provider) is None:
            self.log_error("Provider not configured", provider=template.provider.value)
            return {
                "error": ConfigurationError(template.provider.display_name),
                "current_step": "error",
            }

        return {"current_step": "input_validated"}

    @traceable(name="extract_content")
    def extract_content(self, state: PipelineState) -> dict[str, Any]:
        """Fetch the URL or extract every uploaded document."""
        try:
            if state.task_type in URL_TASKS:
                extracted = [self._web_loader.load(state.url.strip())]
            elif state.strict:
                extracted = [self._extractor.extract_strict(doc) for doc in state.documents]
            else:
                extracted = self._extractor.extract_all(state.documents)

            return {"extracted": extracted, "current_step": "content_extracted"}

        except Exception as e:
            self.log_error("Content extraction failed", error=str(e))
            return {"error": e, "current_step": "error"}

    @traceable(name="assemble_prompt")
    def assemble_prompt(self, state: PipelineState) -> dict[str, Any]:
        """Aggregate the corpus, merge form fields and render the prompt."""
        template = PromptTemplates.get_template(state.task_type)

        try:
            corpus = aggregate(state.extracted, template.max_corpus_length)
            merged = merge_fields(state.field_responses) if template.uses_fields else {}
            prompt = build_prompt(template, corpus, merged)

            return {
                "corpus": corpus,
                "merged_fields": merged,
                "prompt": prompt,
                "current_step": "prompt_assembled",
            }

        except Exception as e:
            self.log_error("Prompt assembly failed", error=str(e))
            return {"error": e, "current_step": "error"}

    @traceable(name="generate")
    def generate(self, state: PipelineState) -> dict[str, Any]:
        """Send the prompt to the task's provider."""
        template = PromptTemplates.get_template(state.task_type)
        dispatcher = self._dispatchers[template.provider]

        try:
            result = dispatcher.dispatch(
                state.prompt,
                template.max_output_tokens,
                system_prompt=template.system_prompt,
                source_files=state.corpus.source_order if state.corpus else [],
            )
            return {"result": result, "current_step": "complete"}

        except Exception as e:
            self.log_error("Generation failed", error=str(e))
            return {"error": e, "current_step": "error"}

    def handle_error(self, state: PipelineState) -> dict[str, Any]:
        """Record where the run stopped."""
        self.log_warning(
            "Pipeline stopped",
            task=state.task_type.value,
            error_type=type(state.error).__name__,
        )
        return {"current_step": "failed"}
