"""Application services for modeling operations.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .moisture_pipeline_service import MoisturePipelineService

__all__ = [
    "MoisturePipelineService",
]
