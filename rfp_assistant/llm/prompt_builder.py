"""Render task templates against a corpus and merged form fields."""

from collections.abc import Mapping

from langchain_core.prompts import PromptTemplate

from rfp_assistant.llm.prompts import TaskTemplate
from rfp_assistant.models.documents import AggregatedCorpus, FormFieldResponse


NO_FIELDS_PROVIDED = "(none provided)"


def format_field_responses(fields: Mapping[str, FormFieldResponse] | None) -> str:
    """Render one ``- <name>: <value>`` line per merged field."""
    if not fields:
        return NO_FIELDS_PROVIDED
    return "\n".join(f"- {field.name}: {field.value}" for field in fields.values())


def build_prompt(
    template: TaskTemplate,
    corpus: AggregatedCorpus,
    fields: Mapping[str, FormFieldResponse] | None = None,
) -> str:
    """Render the user prompt for a task.

    String assembly only: the same template, corpus and fields always give
    the same text.

    Args:
        template: Task to render.
        corpus: Aggregated document text.
        fields: Merged form field responses, keyed by normalized name.

    Returns:
        The rendered instruction text.
    """
    prompt = PromptTemplate.from_template(template.body)

    values = {
        "corpus": corpus.text,
        "field_responses": format_field_responses(fields),
    }
    return prompt.format(**{name: values[name] for name in prompt.input_variables})
