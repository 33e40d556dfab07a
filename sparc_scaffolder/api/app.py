"""
SPARC Scaffolder API
FastAPI server exposing the generation pipeline over HTTP
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sparc_scaffolder import __version__
from sparc_scaffolder.api.routes import error_response, router
from sparc_scaffolder.config import ScaffolderConfig
from sparc_scaffolder.orchestrator.orchestrator import GenerationOrchestrator

logger = logging.getLogger(__name__)

DEVELOPMENT_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def allowed_origins(config: ScaffolderConfig) -> list[str]:
    if config.is_production:
        return [config.frontend_url] if config.frontend_url else []
    return list(DEVELOPMENT_ORIGINS)


def create_app(
    config: Optional[ScaffolderConfig] = None,
    orchestrator: Optional[GenerationOrchestrator] = None,
) -> FastAPI:
    """Build the FastAPI application."""
    config = config or ScaffolderConfig.from_env()

    app = FastAPI(
        title="SPARC Scaffolder API",
        description="Generate SPARC documentation and project scaffolding from feature descriptions",
        version=__version__,
    )
    app.state.config = config
    app.state.orchestrator = orchestrator or GenerationOrchestrator(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(config),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        return error_response(400, error="Invalid request", details=jsonable_encoder(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return error_response(
                404,
                error="Not found",
                message=f"Cannot {request.method} {request.url.path}",
            )
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    app.include_router(router)

    logger.info(f"API ready ({config.environment}), CORS origins: {allowed_origins(config)}")
    return app
