"""
SPARC generation endpoints.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from sparc_scaffolder import __version__
from sparc_scaffolder.agents.content_service import list_providers
from sparc_scaffolder.api.schemas import (
    ErrorResponse,
    FeatureRequestModel,
    HealthResponse,
    ProvidersResponse,
    SparcOutputResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["SPARC"])

GENERIC_FAILURE = "Something went wrong"


def error_response(status_code: int, **fields) -> JSONResponse:
    body = ErrorResponse(**fields).model_dump(by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post("/generate", response_model=SparcOutputResponse)
async def generate(body: FeatureRequestModel, request: Request):
    """Generate the SPARC documents and scaffold files for a description."""
    if not body.description or not body.description.strip():
        return error_response(400, error="Feature description is required")

    config = request.app.state.config
    orchestrator = request.app.state.orchestrator

    result = await orchestrator.generate(body.to_feature_request())

    if result.errors:
        return error_response(400, error="Invalid input", details=result.errors)

    if not result.success:
        # Unexpected exception text is only exposed in development
        message = result.error
        if result.internal and config.environment != "development":
            message = GENERIC_FAILURE
        logger.error(f"Generation {result.request_id} failed: {result.error}")
        return error_response(
            500,
            error="Generation failed",
            message=message or GENERIC_FAILURE,
            generation_time=result.generation_time,
        )

    return SparcOutputResponse.from_output(result.output)


@router.get("/health", response_model=HealthResponse)
async def health():
    """Liveness check."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=__version__,
    )


@router.get("/providers", response_model=ProvidersResponse)
async def providers(request: Request):
    """List content providers and whether credentials are configured."""
    return ProvidersResponse(providers=list_providers(request.app.state.config))
