"""LLM integration modules."""

from rfp_assistant.llm.dispatcher import AnalysisDispatcher
from rfp_assistant.llm.prompt_builder import build_prompt
from rfp_assistant.llm.prompts import (
    TASK_TEMPLATES,
    PromptTemplates,
    ProviderKind,
    TaskTemplate,
    TaskType,
)
from rfp_assistant.llm.providers import (
    ChatModelGenerator,
    TextGenerator,
    build_gemini_generator,
    build_openai_generator,
)

__all__ = [
    "AnalysisDispatcher",
    "build_prompt",
    "TASK_TEMPLATES",
    "PromptTemplates",
    "ProviderKind",
    "TaskTemplate",
    "TaskType",
    "ChatModelGenerator",
    "TextGenerator",
    "build_gemini_generator",
    "build_openai_generator",
]
