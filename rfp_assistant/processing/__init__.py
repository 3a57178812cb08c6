"""Corpus aggregation and form field merging."""

from rfp_assistant.processing.aggregator import aggregate, format_block, truncate_text
from rfp_assistant.processing.field_merger import merge_fields, parse_field_responses

__all__ = [
    "aggregate",
    "format_block",
    "truncate_text",
    "merge_fields",
    "parse_field_responses",
]
