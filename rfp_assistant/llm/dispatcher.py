"""Send rendered prompts to a text-generation capability."""

from collections.abc import Sequence

from langsmith import traceable

from rfp_assistant.errors import ProviderError
from rfp_assistant.llm.providers import TextGenerator
from rfp_assistant.models.responses import AnalysisResult
from rfp_assistant.utils.logging import LoggerMixin


DEFAULT_TEMPERATURE = 0.3


class AnalysisDispatcher(LoggerMixin):
    """Single-attempt dispatch of a prompt to one generation capability."""

    def __init__(self, generator: TextGenerator, temperature: float = DEFAULT_TEMPERATURE):
        """Initialize the dispatcher.

        Args:
            generator: Text-generation capability.
            temperature: Sampling temperature for every call.
        """
        self._generator = generator
        self.temperature = temperature

    @property
    def provider_name(self) -> str:
        """Display name of the underlying provider."""
        return self._generator.provider.display_name

    @traceable(name="dispatch_prompt")
    def dispatch(
        self,
        prompt: str,
        output_ceiling: int,
        *,
        system_prompt: str | None = None,
        source_files: Sequence[str] = (),
    ) -> AnalysisResult:
        """Generate text for a prompt.

        Args:
            prompt: Rendered user prompt.
            output_ceiling: Maximum output tokens for the task.
            system_prompt: Optional system instruction.
            source_files: Documents the prompt was built from.

        Returns:
            The raw model output.

        Raises:
            ProviderError: If the call fails or returns no text.
        """
        if output_ceiling <= 0:
            raise ValueError(f"output_ceiling must be positive, got {output_ceiling}")

        self.log_info(
            "Dispatching prompt",
            provider=self.provider_name,
            prompt_chars=len(prompt),
            max_tokens=output_ceiling,
        )

        try:
            text = self._generator.generate(
                prompt,
                system_prompt=system_prompt,
                max_tokens=output_ceiling,
                temperature=self.temperature,
            )
        except Exception as e:
            self.log_error("Generation failed", provider=self.provider_name, error=str(e))
            raise ProviderError(self.provider_name, str(e)) from e

        if not text or not text.strip():
            self.log_error("Generation returned no text", provider=self.provider_name)
            raise ProviderError(self.provider_name, "Empty response from model")

        self.log_info("Generation complete", provider=self.provider_name, output_chars=len(text))
        return AnalysisResult(text=text, source_files=list(source_files))
