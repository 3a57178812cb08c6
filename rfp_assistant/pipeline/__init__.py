"""Analysis pipeline."""

from rfp_assistant.pipeline.nodes import PipelineNodes
from rfp_assistant.pipeline.state import PipelineState
from rfp_assistant.pipeline.workflow import RFPPipeline

__all__ = ["PipelineNodes", "PipelineState", "RFPPipeline"]
