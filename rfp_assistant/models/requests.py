"""Request models for RFP Assistant."""

from pydantic import BaseModel, Field


class UrlAnalysisRequest(BaseModel):
    """Request body for analyzing an RFP published as a web page."""

    url: str | None = Field(
        default=None,
        max_length=2048,
        description="Address of the RFP page",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://www.example.gov/procurement/rfp-2024-017"},
            ]
        }
    }
