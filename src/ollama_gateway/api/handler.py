"""
Boundary request handler.

Turns raw query parameters into a call through RetryExecutor(InferenceClient)
and maps the outcome onto an HTTP response:

- success -> 200, raw text body
- ValidationError -> 400 {"error": "Invalid request", "message": ...}
- anything else -> 500 {"error": "Error processing your request", "message": ...}
"""

from functools import partial
from typing import Optional

import structlog
from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ollama_gateway.api.models import ErrorResponse
from ollama_gateway.llm.base_client import BaseInferenceClient
from ollama_gateway.exceptions import ValidationError
from ollama_gateway.monitoring.metrics import gateway_requests_total
from ollama_gateway.retry.executor import RetryExecutor
from ollama_gateway.retry.policy import RetryPolicy

logger = structlog.get_logger(__name__)


class RequestHandler:
    """
    Validates inbound parameters and runs one retried inference call.

    The boundary default model applies only when `model` is absent or empty;
    a whitespace-only model is passed through and the client replaces it with
    its own configured default.

    Attributes:
        client: Inference client (prepare + send)
        executor: Retry executor wrapping `client.send`
        policy: Retry policy for every call
        default_model: Boundary-level default model
    """

    def __init__(
        self,
        client: BaseInferenceClient,
        executor: RetryExecutor,
        policy: RetryPolicy,
        default_model: str,
    ):
        self.client = client
        self.executor = executor
        self.policy = policy
        self.default_model = default_model

    async def handle(self, prompt: Optional[str], model: Optional[str] = None) -> Response:
        """
        Process one ask request.
        
        Args:
            prompt: Raw `prompt` query parameter
            model: Raw `model` query parameter, None when omitted
        
        Returns:
            PlainTextResponse on success, JSONResponse with ErrorResponse otherwise
        """
        if not model:
            model = self.default_model

        try:
            # Validation runs once, outside the retry wrapper
            request = self.client.prepare(prompt, model)
            result = await self.executor.execute(
                partial(self.client.send, request), self.policy
            )

        except ValidationError as e:
            gateway_requests_total.labels(outcome="bad_request").inc()
            logger.info("Rejected invalid prompt", reason=e.message)
            return self._error(status.HTTP_400_BAD_REQUEST, "Invalid request", e.message)

        except Exception as e:
            gateway_requests_total.labels(outcome="error").inc()
            logger.error(
                "Ask request failed",
                model=model,
                error_type=type(e).__name__,
                error=str(e),
            )
            return self._error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Error processing your request",
                str(e),
            )

        gateway_requests_total.labels(outcome="success").inc()
        logger.info("Ask request completed", model=result.model, response_length=len(result.text))
        return PlainTextResponse(result.text, status_code=status.HTTP_200_OK)

    @staticmethod
    def _error(status_code: int, error: str, message: str) -> JSONResponse:
        body = ErrorResponse(error=error, message=message)
        return JSONResponse(status_code=status_code, content=body.model_dump())
