"""
FastAPI API layer.

- routes.py: GET /api/ai/ask, GET /health
- handler.py: RequestHandler mapping pipeline outcomes to responses
- dependencies.py: Dependency injection for client, executor, handler
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request ID tracing
"""

from ollama_gateway.api import dependencies, error_handlers, models
from ollama_gateway.api.handler import RequestHandler
from ollama_gateway.api.routes import router

__all__ = [
    "router",
    "RequestHandler",
    "dependencies",
    "error_handlers",
    "models",
]
