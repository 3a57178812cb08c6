"""Pytest configuration and fixtures."""

import os
import socket
from unittest.mock import MagicMock

import fitz
import pytest

# Set test environment variables before importing modules
os.environ["OPENAI_API_KEY"] = "test-api-key"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["LANGCHAIN_TRACING_V2"] = "false"
os.environ["ENVIRONMENT"] = "test"

from rfp_assistant.llm.dispatcher import AnalysisDispatcher  # noqa: E402
from rfp_assistant.llm.prompts import ProviderKind  # noqa: E402
from rfp_assistant.loaders.extractor import ContentExtractor  # noqa: E402
from rfp_assistant.loaders.web_loader import WebPageLoader  # noqa: E402
from rfp_assistant.models.documents import ExtractedDocument, UploadedDocument  # noqa: E402
from rfp_assistant.pipeline import RFPPipeline  # noqa: E402


class FakeGenerator:
    """Generation capability that records its calls."""

    def __init__(
        self,
        provider: ProviderKind = ProviderKind.OPENAI,
        reply: str = "Generated analysis",
        error: Exception | None = None,
    ):
        self.provider = provider
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def generate(self, prompt, *, system_prompt=None, max_tokens, temperature):
        self.calls.append(
            {
                "prompt": prompt,
                "system_prompt": system_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


def build_pdf(*pages: str) -> bytes:
    """Build an in-memory PDF with one page per string."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def make_pdf():
    """Factory for PDF bytes."""
    return build_pdf


@pytest.fixture
def sample_pdf() -> bytes:
    """A one-page RFP."""
    return build_pdf("Budget: $50,000, Due: June 1")


@pytest.fixture
def uploaded_pdf(sample_pdf) -> UploadedDocument:
    """The sample RFP as an upload."""
    return UploadedDocument(original_name="rfp.pdf", content=sample_pdf)


@pytest.fixture
def sample_rfp_text() -> str:
    """Sample RFP document content for testing."""
    return """
    REQUEST FOR PROPOSAL
    Project: Municipal Records Digitization

    Section 1: Scope of Work
    The contractor shall scan and index 2 million paper records.

    Section 2: Submission
    Proposals are due June 1 at 2:00 PM Eastern.
    Budget: $50,000
    """


@pytest.fixture
def openai_generator() -> FakeGenerator:
    """Fake OpenAI capability."""
    return FakeGenerator(ProviderKind.OPENAI, reply="OpenAI analysis")


@pytest.fixture
def gemini_generator() -> FakeGenerator:
    """Fake Gemini capability."""
    return FakeGenerator(ProviderKind.GEMINI, reply="Gemini filled text")


@pytest.fixture
def web_loader() -> MagicMock:
    """Mock web page loader returning a fixed page."""
    loader = MagicMock(spec=WebPageLoader)
    loader.load.return_value = ExtractedDocument(
        original_name="https://example.gov/rfp",
        text="Request for proposals. Responses due June 1.",
    )
    return loader


@pytest.fixture
def dispatchers(openai_generator, gemini_generator) -> dict:
    """Dispatchers backed by the fake generators."""
    return {
        ProviderKind.OPENAI: AnalysisDispatcher(openai_generator),
        ProviderKind.GEMINI: AnalysisDispatcher(gemini_generator),
    }


@pytest.fixture
def pipeline(web_loader, dispatchers) -> RFPPipeline:
    """Pipeline with fake providers and a mock web loader."""
    return RFPPipeline(
        extractor=ContentExtractor(max_workers=1),
        web_loader=web_loader,
        dispatchers=dispatchers,
    )


@pytest.fixture
def refused_url() -> str:
    """URL of a local port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/rfp"
