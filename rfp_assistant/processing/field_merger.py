"""Parse and merge user-supplied form field responses."""

import re
from collections.abc import Iterable, Mapping

from rfp_assistant.models.documents import FieldType, FormFieldResponse
from rfp_assistant.utils.logging import get_logger


logger = get_logger(__name__)

FIELD_COUNT_KEY = "formFieldsCount"
FIELD_KEY_PATTERN = re.compile(r"field_(0|[1-9]\d*)(?:_name|_type)?")


def _coerce_field_type(raw: str | None) -> FieldType:
    if not raw:
        return FieldType.TEXT
    try:
        return FieldType(raw.strip().lower())
    except ValueError:
        logger.warning("Unknown form field type, using text", field_type=raw)
        return FieldType.TEXT


def _field_count(form: Mapping[str, str]) -> int:
    try:
        return max(int(form.get(FIELD_COUNT_KEY) or 0), 0)
    except (TypeError, ValueError):
        logger.warning("Invalid form field count", value=form.get(FIELD_COUNT_KEY))
        return 0


def _present_indices(form: Mapping[str, str], count: int) -> list[int]:
    indices = set()
    for key in form:
        match = FIELD_KEY_PATTERN.fullmatch(key)
        if match and int(match.group(1)) < count:
            indices.add(int(match.group(1)))
    return sorted(indices)


def parse_field_responses(form: Mapping[str, str]) -> list[FormFieldResponse]:
    """Read the indexed field list from form-encoded input.

    Entries ``field_<i>_name``, ``field_<i>`` and ``field_<i>_type`` are read
    for each index below ``formFieldsCount`` that has at least one key in the
    form. Keys beyond the declared count are ignored, and indices with no keys
    produce nothing, so the work is bounded by the size of the request.

    Args:
        form: Form values from the request.

    Returns:
        Field responses in index order. Partially filled entries keep empty
        strings for their missing parts.
    """
    count = _field_count(form)
    responses = []
    for i in _present_indices(form, count):
        responses.append(
            FormFieldResponse(
                name=form.get(f"field_{i}_name") or "",
                value=form.get(f"field_{i}") or "",
                type=_coerce_field_type(form.get(f"field_{i}_type")),
            )
        )

    if len(responses) < count:
        logger.debug(
            "Form field count exceeds submitted fields",
            declared=count,
            submitted=len(responses),
        )
    return responses


def merge_fields(responses: Iterable[FormFieldResponse]) -> dict[str, FormFieldResponse]:
    """Merge field responses keyed by lower-cased name.

    Entries with an empty name or value are dropped. For duplicate names the
    last value wins and keeps the position of the first occurrence.

    Args:
        responses: Field responses in the order supplied.

    Returns:
        Mapping of normalized name to response.
    """
    merged: dict[str, FormFieldResponse] = {}
    dropped = 0

    for response in responses:
        if not response.name.strip() or not response.value.strip():
            dropped += 1
            continue
        merged[response.normalized_name] = response

    logger.debug("Form fields merged", fields=len(merged), dropped=dropped)
    return merged
