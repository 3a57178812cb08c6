"""Text-generation capabilities backed by LangChain chat models."""

from typing import Protocol

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from rfp_assistant.config import Settings
from rfp_assistant.llm.prompts import ProviderKind
from rfp_assistant.utils.logging import LoggerMixin


class TextGenerator(Protocol):
    """Anything that turns a prompt into text."""

    provider: ProviderKind

    def generate(
        self,
        prompt: str,
        *,
        system_prompt: str | None,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Generate text for a prompt."""
        ...


class ChatModelGenerator(LoggerMixin):
    """Adapter from a LangChain chat model to :class:`TextGenerator`.

    Token ceiling and temperature are applied per call on a shallow copy of
    the model, so one configured client serves every task.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        provider: ProviderKind,
        token_limit_field: str = "max_tokens",
    ):
        """Initialize the generator.

        Args:
            llm: Configured chat model.
            provider: Which provider the model belongs to.
            token_limit_field: Name of the model attribute holding the
                output token ceiling.
        """
        self._llm = llm
        self.provider = provider
        self._token_limit_field = token_limit_field

    def _messages(self, prompt: str, system_prompt: str | None) -> list[BaseMessage]:
        messages: list[BaseMessage] = []
        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))
        messages.append(HumanMessage(content=prompt))
        return messages

    def generate(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """Invoke the chat model once and return its text."""
        llm = self._llm.model_copy(
            update={self._token_limit_field: max_tokens, "temperature": temperature}
        )
        response = llm.invoke(self._messages(prompt, system_prompt))

        content = response.content
        if isinstance(content, list):
            # Some providers return content blocks
            content = "".join(
                block if isinstance(block, str) else block.get("text", "")
                for block in content
            )
        return content


def build_openai_generator(settings: Settings) -> ChatModelGenerator | None:
    """Create the OpenAI generator, or None if no key is configured."""
    if settings.openai_api_key is None:
        return None

    llm = ChatOpenAI(
        model=settings.openai_model,
        temperature=settings.temperature,
        openai_api_key=settings.openai_api_key.get_secret_value(),
        max_retries=0,
    )
    return ChatModelGenerator(llm, provider=ProviderKind.OPENAI, token_limit_field="max_tokens")


def build_gemini_generator(settings: Settings) -> ChatModelGenerator | None:
    """Create the Gemini generator, or None if no key is configured."""
    if settings.gemini_api_key is None:
        return None

    llm = ChatGoogleGenerativeAI(
        model=settings.gemini_model,
        temperature=settings.temperature,
        google_api_key=settings.gemini_api_key.get_secret_value(),
        max_retries=0,
    )
    return ChatModelGenerator(
        llm, provider=ProviderKind.GEMINI, token_limit_field="max_output_tokens"
    )
