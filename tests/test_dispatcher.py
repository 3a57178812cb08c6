"""Tests for the analysis dispatcher and chat model adapter."""

from unittest.mock import MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from rfp_assistant.config import Settings
from rfp_assistant.errors import ProviderError
from rfp_assistant.llm.dispatcher import AnalysisDispatcher
from rfp_assistant.llm.prompts import ProviderKind
from rfp_assistant.llm.providers import (
    ChatModelGenerator,
    build_gemini_generator,
    build_openai_generator,
)

from conftest import FakeGenerator


class TestAnalysisDispatcher:
    """Tests for AnalysisDispatcher."""

    def test_single_call_with_settings(self):
        """Test one call is made with the ceiling and temperature."""
        generator = FakeGenerator(reply="Summary")
        dispatcher = AnalysisDispatcher(generator, temperature=0.3)

        result = dispatcher.dispatch(
            "Analyze this", 1500, system_prompt="Be brief", source_files=["a.pdf"]
        )

        assert result.text == "Summary"
        assert result.source_files == ["a.pdf"]
        assert generator.calls == [
            {
                "prompt": "Analyze this",
                "system_prompt": "Be brief",
                "max_tokens": 1500,
                "temperature": 0.3,
            }
        ]

    def test_upstream_error_wrapped(self):
        """Test vendor failures become ProviderError with the upstream text."""
        generator = FakeGenerator(error=RuntimeError("Incorrect API key provided"))
        dispatcher = AnalysisDispatcher(generator)

        with pytest.raises(ProviderError) as exc_info:
            dispatcher.dispatch("prompt", 500)

        assert exc_info.value.provider == "OpenAI"
        assert "Incorrect API key" in str(exc_info.value)
        assert len(generator.calls) == 1

    def test_empty_output_is_error(self):
        """Test a blank response is treated as a provider failure."""
        dispatcher = AnalysisDispatcher(FakeGenerator(ProviderKind.GEMINI, reply="  \n"))

        with pytest.raises(ProviderError) as exc_info:
            dispatcher.dispatch("prompt", 500)

        assert exc_info.value.provider == "Gemini"

    @pytest.mark.parametrize("ceiling", [0, -1])
    def test_rejects_non_positive_ceiling(self, ceiling):
        """Test the output ceiling must be positive."""
        generator = FakeGenerator()

        with pytest.raises(ValueError):
            AnalysisDispatcher(generator).dispatch("prompt", ceiling)

        assert generator.calls == []


class TestChatModelGenerator:
    """Tests for ChatModelGenerator."""

    def test_applies_per_call_limits(self):
        """Test token ceiling and temperature are set on a model copy."""
        llm = MagicMock()
        copy = llm.model_copy.return_value
        copy.invoke.return_value = AIMessage(content="result")
        generator = ChatModelGenerator(llm, ProviderKind.GEMINI, token_limit_field="max_output_tokens")

        text = generator.generate("prompt", system_prompt="system", max_tokens=4000, temperature=0.3)

        assert text == "result"
        llm.model_copy.assert_called_once_with(
            update={"max_output_tokens": 4000, "temperature": 0.3}
        )
        messages = copy.invoke.call_args.args[0]
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert messages[1].content == "prompt"

    def test_no_system_message_when_absent(self):
        """Test only the user message is sent without a system prompt."""
        llm = MagicMock()
        llm.model_copy.return_value.invoke.return_value = AIMessage(content="ok")

        ChatModelGenerator(llm, ProviderKind.OPENAI).generate(
            "prompt", system_prompt=None, max_tokens=10, temperature=0.3
        )

        messages = llm.model_copy.return_value.invoke.call_args.args[0]
        assert len(messages) == 1

    def test_joins_content_blocks(self):
        """Test list-style content is flattened to text."""
        llm = MagicMock()
        llm.model_copy.return_value.invoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Hello "}, "world"]
        )

        text = ChatModelGenerator(llm, ProviderKind.GEMINI).generate(
            "prompt", max_tokens=10, temperature=0.3
        )

        assert text == "Hello world"


class TestGeneratorFactories:
    """Tests for provider factories."""

    def test_missing_keys_give_none(self):
        """Test factories return None without credentials."""
        settings = Settings(openai_api_key="", gemini_api_key=" ")

        assert build_openai_generator(settings) is None
        assert build_gemini_generator(settings) is None

    def test_openai_generator_built(self):
        """Test an OpenAI generator is built when a key is present."""
        generator = build_openai_generator(Settings(openai_api_key="sk-test"))

        assert generator is not None
        assert generator.provider == ProviderKind.OPENAI
