"""
Ollama Gateway.

Thin HTTP gateway that forwards prompts to a locally-hosted Ollama server
and returns the generated text:
- Prompt validation and model defaulting
- Single outbound generate call with connect/read timeouts
- Bounded retry with exponential backoff on transient failures
- Failure classification mapped to 400/500 boundary responses

Architecture: FastAPI boundary + RetryExecutor + httpx-based Ollama client
"""

__version__ = "0.1.0"
