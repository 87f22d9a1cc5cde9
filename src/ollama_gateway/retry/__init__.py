"""
Retry executor with exponential backoff.

Replaces implicit retry interception with an explicit higher-order call:
the caller hands RetryExecutor an operation and a RetryPolicy, and gets back
either the first successful result or the last error observed.

Main Components:
    - RetryExecutor: Runs an async operation with bounded attempts
    - RetryPolicy: Immutable attempts/backoff configuration
    - DEFAULT_RETRY_POLICY: 3 attempts, 1s initial delay, x2, capped at 10s

Usage:
    >>> from ollama_gateway.retry import RetryExecutor
    >>> executor = RetryExecutor()
    >>> result = await executor.execute(lambda: client.infer("Hello world"))
"""

from ollama_gateway.retry.executor import RetryExecutor
from ollama_gateway.retry.policy import DEFAULT_RETRY_POLICY, RetryPolicy

__all__ = [
    "RetryExecutor",
    "RetryPolicy",
    "DEFAULT_RETRY_POLICY",
]
