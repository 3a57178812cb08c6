"""Form field catalog."""

from rfp_assistant.catalog.form_fields import FormFieldCatalog

__all__ = ["FormFieldCatalog"]
