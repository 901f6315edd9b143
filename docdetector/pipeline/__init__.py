from docdetector.pipeline.orchestrator import (
    LayerOutputs,
    PipelineError,
    RetryPolicy,
    run_pipeline,
)
from docdetector.pipeline.stages import STAGES, StageDescriptor

__all__ = [
    "LayerOutputs",
    "PipelineError",
    "RetryPolicy",
    "STAGES",
    "StageDescriptor",
    "run_pipeline",
]
