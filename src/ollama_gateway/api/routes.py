"""
API routes for the gateway.

- GET /api/ai/ask: forward a prompt to Ollama and return the generated text
- GET /health: backend reachability
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, Response

from ollama_gateway.api.dependencies import (
    get_inference_client,
    get_request_handler,
    get_settings,
)
from ollama_gateway.api.handler import RequestHandler
from ollama_gateway.api.models import ErrorResponse, HealthResponse
from ollama_gateway.config import Settings
from ollama_gateway.llm.base_client import BaseInferenceClient

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/api/ai/ask",
    response_class=Response,
    summary="Ask the model",
    description="""
    Send a prompt to the Ollama backend and return the generated text.
    
    Transient backend failures (network errors, timeouts, non-2xx) are
    retried with exponential backoff before an error is returned.
    """,
    responses={
        200: {"description": "Generated text", "content": {"text/plain": {}}},
        400: {"description": "Empty prompt or invalid parameters", "model": ErrorResponse},
        500: {"description": "Backend failure after retries", "model": ErrorResponse},
    },
)
async def ask(
    prompt: str = Query(..., description="Input text for the model"),
    model: Optional[str] = Query(
        default=None,
        description="Model identifier; defaults to the gateway's boundary default",
    ),
    handler: RequestHandler = Depends(get_request_handler),
) -> Response:
    """
    Forward a prompt to the model.
    
    Args:
        prompt: Prompt text (required)
        model: Optional model override
        handler: Request handler (injected)
    
    Returns:
        Text response or structured error
    """
    return await handler.handle(prompt, model)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={
        200: {"description": "Ollama reachable"},
        503: {"description": "Ollama unreachable"},
    },
)
async def health_check(
    client: BaseInferenceClient = Depends(get_inference_client),
    settings: Settings = Depends(get_settings),
):
    """
    Check health of the Ollama backend.
    
    Args:
        client: Inference client (injected)
        settings: Application settings (injected)
    
    Returns:
        HealthResponse with backend status
    """
    healthy = await client.health_check()
    
    response = HealthResponse(
        status="healthy" if healthy else "unhealthy",
        version=settings.APP_VERSION,
        services={"ollama": "ok" if healthy else "unreachable"},
        timestamp=datetime.utcnow(),
    )
    
    logger.info(
        "Health check",
        extra={"status": response.status, "services": response.services},
    )
    
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response.model_dump(mode="json"),
    )
