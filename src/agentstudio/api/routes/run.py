"""Pipeline run endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from agentstudio.api.dependencies import get_orchestrator
from agentstudio.api.middleware import get_status_code
from agentstudio.pipeline.orchestrator import PipelineOrchestrator
from agentstudio.pipeline.tracker import StepTracker

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["run"])


@router.post("/run")
async def run_pipeline(
    request: Request,
    orchestrator: PipelineOrchestrator = Depends(get_orchestrator),
):
    """Run the full pipeline for one request and return the stage log."""
    try:
        payload = await request.json()
    except ValueError:
        # Let the orchestrator report it like any other malformed request
        logger.info("Request body is not valid JSON")
        payload = None

    response = await orchestrator.run(payload)
    status_code = 200 if response.success else get_status_code(response.error_type)
    return JSONResponse(status_code=status_code, content=response.to_payload())


@router.get("/stages")
async def list_stages():
    """Canonical stage list, all idle, for rendering progress before a run."""
    return [stage.model_dump(mode="json", exclude_none=True) for stage in StepTracker.initialize()]
