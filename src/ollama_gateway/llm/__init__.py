"""
Inference client abstraction and implementations.

Components:
- BaseInferenceClient: Abstract base class (prepare / send / infer)
- OllamaClient: Implementation for the Ollama inference server
- Failure taxonomy re-exported from ollama_gateway.exceptions
"""

from ollama_gateway.llm.base_client import BaseInferenceClient
from ollama_gateway.llm.ollama_client import OllamaClient
from ollama_gateway.exceptions import (
    BackendTimeoutError,
    GatewayError,
    ProtocolError,
    TransientIOError,
    ValidationError,
)

__all__ = [
    "BaseInferenceClient",
    "OllamaClient",
    "GatewayError",
    "ValidationError",
    "TransientIOError",
    "BackendTimeoutError",
    "ProtocolError",
]
