"""
Abstract base client for LLM inference.

Defines the interface the request handler and retry executor rely on.
Validation (`prepare`) is split from the network call (`send`) so that a bad
prompt is rejected before any retry wrapping.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from ollama_gateway.models.inference_models import (
    BackendConfig,
    InferenceResult,
    PromptRequest,
)


logger = structlog.get_logger(__name__)


class BaseInferenceClient(ABC):
    """
    Abstract base class for inference clients.

    Responsibilities:
    - Validate the prompt and resolve the effective model
    - Send exactly one generation request per `send()` call
    - Classify failures into ValidationError / TransientIOError / ProtocolError

    Does NOT handle:
    - Retries (that's RetryExecutor's job)
    - Mapping failures to HTTP responses (that's RequestHandler's job)
    """

    def __init__(self, config: BackendConfig):
        """
        Initialize base client.

        Args:
            config: Immutable backend configuration
        """
        self.config = config

        logger.info(
            "Initialized inference client",
            client_class=self.__class__.__name__,
            endpoint_url=config.endpoint_url,
            default_model=config.default_model,
            timeout=config.timeout,
        )

    def prepare(self, prompt: Optional[str], model: Optional[str] = None) -> PromptRequest:
        """
        Validate the prompt and resolve the model against the configured default.

        Raises:
            ValidationError: Prompt is empty or whitespace-only
        """
        return PromptRequest.resolve(prompt, model, self.config.default_model)

    @abstractmethod
    async def send(self, request: PromptRequest) -> InferenceResult:
        """
        Perform one outbound generation attempt.

        Args:
            request: Validated prompt request

        Returns:
            InferenceResult with the generated text

        Raises:
            TransientIOError: Network fault, timeout or non-2xx status
            ProtocolError: 2xx response without the expected field
        """
        pass

    async def infer(self, prompt: Optional[str], model: Optional[str] = None) -> InferenceResult:
        """Validate, then send a single request."""
        request = self.prepare(prompt, model)
        return await self.send(request)

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the inference server is reachable.

        Returns:
            True if server is healthy, False otherwise

        Note:
            This should NOT raise exceptions - return False on error.
        """
        pass

    async def close(self):
        """Release pooled connections. Default implementation does nothing."""
        logger.debug("Closing inference client", client_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"endpoint_url={self.config.endpoint_url}, "
            f"timeout={self.config.timeout}s)"
        )
