"""Dependency injection providers for FastAPI."""

from functools import lru_cache

from agentstudio.pipeline.orchestrator import PipelineOrchestrator


@lru_cache
def get_orchestrator() -> PipelineOrchestrator:
    # Holds no per-run state, so one instance serves concurrent requests
    return PipelineOrchestrator()
