"""Combine extracted documents into one labeled, length-bounded corpus."""

from collections.abc import Sequence

from rfp_assistant.models.documents import (
    TRUNCATION_MARKER,
    AggregatedCorpus,
    ExtractedDocument,
)
from rfp_assistant.utils.logging import get_logger


logger = get_logger(__name__)

BLOCK_SEPARATOR = "\n\n"


def format_block(document: ExtractedDocument) -> str:
    """Render one document as a labeled corpus section."""
    return f"=== DOCUMENT: {document.original_name} ===\n{document.text}"


def truncate_text(text: str, max_length: int) -> tuple[str, bool]:
    """Clip text to ``max_length`` characters, marking the cut.

    Truncation only ever removes the tail. Applying it again with the same
    ``max_length`` returns the same text.

    Args:
        text: Text to bound.
        max_length: Maximum characters kept before the marker.

    Returns:
        The bounded text and whether it was clipped.
    """
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")

    if len(text) <= max_length:
        return text, False
    return text[:max_length] + TRUNCATION_MARKER, True


def aggregate(documents: Sequence[ExtractedDocument], max_length: int) -> AggregatedCorpus:
    """Concatenate documents as labeled blocks in input order.

    Args:
        documents: Extracted documents, in upload order.
        max_length: Character budget for the selected task.

    Returns:
        The corpus, with the document names in block order.
    """
    full_text = BLOCK_SEPARATOR.join(format_block(doc) for doc in documents)
    text, truncated = truncate_text(full_text, max_length)

    if truncated:
        logger.info(
            "Corpus truncated",
            documents=len(documents),
            full_length=len(full_text),
            max_length=max_length,
        )

    return AggregatedCorpus(
        text=text,
        truncated=truncated,
        source_order=[doc.original_name for doc in documents],
    )
