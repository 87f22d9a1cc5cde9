"""Monitoring and metrics instrumentation for Ollama Gateway.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from ollama_gateway.monitoring.metrics import (
    gateway_requests_total,
    inference_attempts_total,
    llm_latency_seconds,
    retries_total,
    retry_backoff_seconds,
)

__all__ = [
    "gateway_requests_total",
    "inference_attempts_total",
    "retries_total",
    "retry_backoff_seconds",
    "llm_latency_seconds",
]
