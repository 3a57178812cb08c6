"""RFP Assistant - document ingestion and LLM analysis for government RFPs."""

__version__ = "1.0.0"
