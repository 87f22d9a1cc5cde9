"""
Ollama client implementation for LLM inference.

Communicates with the Ollama API using httpx AsyncClient. Supports:
- Single non-streaming generate call per attempt
- One timeout value for connection establishment and response read
- Failure classification (transient / protocol) for the retry executor
- Health checks against the server's model list
"""

import json
import time
from typing import Optional

import httpx
import structlog

from ollama_gateway.llm.base_client import BaseInferenceClient
from ollama_gateway.exceptions import (
    BackendTimeoutError,
    ProtocolError,
    TransientIOError,
)
from ollama_gateway.models.inference_models import (
    BackendConfig,
    InferenceResult,
    PromptRequest,
)
from ollama_gateway.monitoring.metrics import inference_attempts_total, llm_latency_seconds


logger = structlog.get_logger(__name__)

INVALID_RESPONSE_MESSAGE = "Invalid response format from Ollama API"


class OllamaClient(BaseInferenceClient):
    """
    Ollama-specific inference client using httpx for async HTTP communication.

    API Endpoints:
    - POST <endpoint_url> (normally /api/generate): generate a completion
    - GET /api/tags on the same origin: health check

    Each attempt opens a scoped stream on a pooled AsyncClient; the
    connection goes back to the pool on every exit path. No retries happen
    here, RetryExecutor decides whether to call `send()` again.
    """

    def __init__(
        self,
        config: BackendConfig,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Ollama client.

        Args:
            config: Backend endpoint, default model and timeout
            connection_limits: httpx connection pool limits (default: 10 max connections)
            transport: Custom httpx transport (stub backends in tests)
        """
        super().__init__(config)

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                # connect, read, write and pool wait all share one value
                timeout=httpx.Timeout(self.config.timeout),
                limits=self._connection_limits,
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    async def send(self, request: PromptRequest) -> InferenceResult:
        """
        Send one generate request to Ollama.

        POST payload:
        {
            "model": "deepseek-coder:1.3b",
            "prompt": "...",
            "stream": false
        }

        Expected response:
        {
            "model": "deepseek-coder:1.3b",
            "created_at": "...",
            "response": "...",
            "done": true
        }
        """
        start_time = time.perf_counter()
        payload = request.to_payload()

        logger.info(
            "Sending generation request to Ollama",
            model=request.model,
            prompt_length=len(request.prompt),
            endpoint_url=self.config.endpoint_url,
        )

        client = await self._get_client()
        try:
            async with client.stream(
                "POST",
                self.config.endpoint_url,
                json=payload,
                headers={"Content-Type": "application/json"},
            ) as response:
                body = await response.aread()

                if not response.is_success:
                    self._record_attempt(request.model, "transient_error", start_time)
                    logger.warning(
                        "Ollama HTTP error",
                        status_code=response.status_code,
                        error_text=body[:500].decode("utf-8", errors="replace"),
                    )
                    raise TransientIOError(
                        f"HTTP error code: {response.status_code}",
                        status_code=response.status_code,
                        details={"model": request.model},
                    )

        except httpx.TimeoutException as e:
            self._record_attempt(request.model, "transient_error", start_time)
            logger.warning(
                "Ollama request timeout",
                timeout=self.config.timeout,
                error_type=type(e).__name__,
            )
            raise BackendTimeoutError(
                f"Request timeout after {self.config.timeout}s",
                details={"timeout": self.config.timeout, "error_type": type(e).__name__},
            ) from e

        except httpx.RequestError as e:
            self._record_attempt(request.model, "transient_error", start_time)
            logger.warning(
                "Ollama network error",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransientIOError(
                f"Network error: {e}",
                details={"error_type": type(e).__name__},
            ) from e

        text = self._parse_response(body, request.model, start_time)
        self._record_attempt(request.model, "success", start_time)

        logger.info(
            "Ollama generation successful",
            model=request.model,
            latency_ms=int((time.perf_counter() - start_time) * 1000),
            response_length=len(text),
        )

        return InferenceResult(text=text, model=request.model)

    def _parse_response(self, body: bytes, model: str, start_time: float) -> str:
        """Extract the `response` field or raise ProtocolError."""
        try:
            data = json.loads(body)
        except ValueError as e:
            self._record_attempt(model, "protocol_error", start_time)
            logger.error("Failed to parse Ollama response JSON", error=str(e))
            raise ProtocolError(
                INVALID_RESPONSE_MESSAGE,
                details={"parse_error": str(e)},
            ) from e

        if not isinstance(data, dict) or not isinstance(data.get("response"), str):
            self._record_attempt(model, "protocol_error", start_time)
            logger.error(
                "Ollama response missing 'response' field",
                keys=sorted(data) if isinstance(data, dict) else type(data).__name__,
            )
            raise ProtocolError(INVALID_RESPONSE_MESSAGE, details={"model": model})

        return data["response"]

    @staticmethod
    def _record_attempt(model: str, outcome: str, start_time: float) -> None:
        inference_attempts_total.labels(outcome=outcome).inc()
        llm_latency_seconds.labels(
            model=model, success="true" if outcome == "success" else "false"
        ).observe(time.perf_counter() - start_time)

    async def health_check(self) -> bool:
        """
        Check Ollama server health via GET /api/tags on the endpoint's origin.

        Returns True if server responds with 2xx, False otherwise.
        """
        tags_url = httpx.URL(self.config.endpoint_url).join("/api/tags")
        try:
            client = await self._get_client()
            response = await client.get(tags_url, timeout=5.0)
            response.raise_for_status()
            logger.debug("Ollama health check passed")
            return True
        except httpx.HTTPError as e:
            logger.warning("Ollama health check failed", error=str(e))
            return False

    async def close(self):
        """Close the HTTP client connection pool."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Ollama client connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
