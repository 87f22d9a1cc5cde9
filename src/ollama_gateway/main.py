"""
FastAPI application entry point for Ollama Gateway.
"""

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from ollama_gateway.api.dependencies import get_inference_client
from ollama_gateway.api.error_handlers import EXCEPTION_HANDLERS
from ollama_gateway.api.middleware import RequestTracingMiddleware
from ollama_gateway.api.models import ServiceInfoResponse
from ollama_gateway.api.routes import router
from ollama_gateway.config import settings
from ollama_gateway.logging_config import configure_logging

# Configure structured logging before the app starts emitting events
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Thin gateway forwarding prompts to a local Ollama server",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (must be first for request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router)


@app.on_event("startup")
async def startup():
    """Application startup - probe the Ollama backend."""
    backend = settings.backend_config()
    policy = settings.retry_policy()
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        ollama_api_url=backend.endpoint_url,
        core_default_model=backend.default_model,
        api_default_model=settings.API_DEFAULT_MODEL,
        timeout=backend.timeout,
        retry_max_attempts=policy.max_attempts,
    )
    
    # Unreachable backend is logged, not fatal: Ollama may start later
    if await get_inference_client().health_check():
        logger.info("Ollama connection successful")
    else:
        logger.warning("Ollama not reachable at startup", ollama_api_url=backend.endpoint_url)


@app.on_event("shutdown")
async def shutdown():
    """Application shutdown - close pooled connections."""
    logger.info("Application shutdown")
    await get_inference_client().close()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/", response_model=ServiceInfoResponse)
async def root() -> ServiceInfoResponse:
    """Root endpoint with API documentation links."""
    return ServiceInfoResponse(
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        metrics="/metrics" if settings.PROMETHEUS_ENABLED else None,
    )


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "ollama_gateway.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,  # keep the structlog handler installed above
    )


if __name__ == "__main__":
    run()
