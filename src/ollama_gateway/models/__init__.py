"""
Data models for Ollama Gateway.

Includes:
- PromptRequest (validated prompt + effective model)
- InferenceResult (generated text)
- BackendConfig (frozen dataclass, endpoint/model/timeout)
"""

from ollama_gateway.models.inference_models import (
    BackendConfig,
    InferenceResult,
    PromptRequest,
)

__all__ = [
    "BackendConfig",
    "InferenceResult",
    "PromptRequest",
]
