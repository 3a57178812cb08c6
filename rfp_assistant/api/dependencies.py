"""API dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from rfp_assistant.catalog import FormFieldCatalog
from rfp_assistant.config import Settings, get_settings
from rfp_assistant.llm.dispatcher import AnalysisDispatcher
from rfp_assistant.llm.prompts import ProviderKind
from rfp_assistant.llm.providers import build_gemini_generator, build_openai_generator
from rfp_assistant.loaders.extractor import ContentExtractor
from rfp_assistant.loaders.web_loader import WebPageLoader
from rfp_assistant.pipeline import RFPPipeline


@lru_cache()
def get_content_extractor() -> ContentExtractor:
    """Get or create the content extractor."""
    return ContentExtractor(max_workers=get_settings().extraction_workers)


@lru_cache()
def get_web_loader() -> WebPageLoader:
    """Get or create the web page loader."""
    settings = get_settings()
    return WebPageLoader(
        timeout=settings.fetch_timeout_seconds,
        user_agent=settings.fetch_user_agent,
    )


@lru_cache()
def get_dispatchers() -> dict[ProviderKind, AnalysisDispatcher | None]:
    """Get a dispatcher per provider. Providers without a key map to None."""
    settings = get_settings()
    generators = {
        ProviderKind.OPENAI: build_openai_generator(settings),
        ProviderKind.GEMINI: build_gemini_generator(settings),
    }
    return {
        provider: AnalysisDispatcher(generator, temperature=settings.temperature)
        if generator is not None
        else None
        for provider, generator in generators.items()
    }


@lru_cache()
def get_pipeline() -> RFPPipeline:
    """Get or create the analysis pipeline."""
    return RFPPipeline(
        extractor=get_content_extractor(),
        web_loader=get_web_loader(),
        dispatchers=get_dispatchers(),
    )


@lru_cache()
def get_form_field_catalog() -> FormFieldCatalog:
    """Load the form field catalog once."""
    return FormFieldCatalog.load(get_settings().form_field_catalog_path)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
PipelineDep = Annotated[RFPPipeline, Depends(get_pipeline)]
CatalogDep = Annotated[FormFieldCatalog, Depends(get_form_field_catalog)]
