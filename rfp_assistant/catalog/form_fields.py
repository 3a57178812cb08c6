"""Catalog of fields commonly found on government procurement forms."""

import json
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter

from rfp_assistant.models.documents import FieldType, FormFieldDefinition
from rfp_assistant.utils.logging import get_logger


logger = get_logger(__name__)

PACKAGED_CATALOG = "form_fields.json"

_DEFINITIONS = TypeAdapter(list[FormFieldDefinition])


class FormFieldCatalog:
    """Ordered, read-only set of form field definitions."""

    def __init__(self, fields: list[FormFieldDefinition]):
        keys = [field.key for field in fields]
        duplicates = sorted({key for key in keys if keys.count(key) > 1})
        if duplicates:
            raise ValueError(f"Duplicate form field keys: {', '.join(duplicates)}")
        self._fields = tuple(fields)

    @classmethod
    def load(cls, path: Path | None = None) -> "FormFieldCatalog":
        """Load a catalog from a JSON file.

        Args:
            path: JSON file holding a list of field definitions. The catalog
                shipped with the package is used when omitted.

        Returns:
            The parsed catalog.
        """
        if path is None:
            raw = resources.files("rfp_assistant.data").joinpath(PACKAGED_CATALOG).read_text(
                encoding="utf-8"
            )
            source = PACKAGED_CATALOG
        else:
            raw = Path(path).read_text(encoding="utf-8")
            source = str(path)

        fields = _DEFINITIONS.validate_python(json.loads(raw))
        logger.info("Loaded form field catalog", source=source, field_count=len(fields))
        return cls(fields)

    @property
    def fields(self) -> list[FormFieldDefinition]:
        return list(self._fields)

    def get(self, key: str) -> FormFieldDefinition | None:
        """Look up a field by its key."""
        for field in self._fields:
            if field.key == key:
                return field
        return None

    def by_type(self, field_type: FieldType) -> list[FormFieldDefinition]:
        return [field for field in self._fields if field.type == field_type]

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self):
        return iter(self._fields)
