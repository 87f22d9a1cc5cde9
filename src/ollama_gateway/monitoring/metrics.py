"""Custom Prometheus metrics for Ollama Gateway.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- gateway_requests_total (rising error outcomes)
- retries_total (high retry rate indicates an unstable backend)
- llm_latency_seconds (slow generations)
"""

from prometheus_client import Counter, Histogram

# === Boundary Metrics ===

gateway_requests_total = Counter(
    "gateway_requests_total",
    "Total /api/ai/ask requests by outcome",
    ["outcome"],
)
"""
Boundary outcome counter.

Labels:
- outcome: success, bad_request, error
"""

# === Attempt / Retry Metrics ===

inference_attempts_total = Counter(
    "inference_attempts_total",
    "Total outbound generate attempts by outcome",
    ["outcome"],
)
"""
Outbound attempt counter.

Labels:
- outcome: success, transient_error, protocol_error
"""

retries_total = Counter(
    "retries_total",
    "Total retries scheduled by the triggering error type",
    ["error_type"],
)

retry_backoff_seconds = Histogram(
    "retry_backoff_seconds",
    "Backoff waited before a retry in seconds",
    buckets=[0.5, 1.0, 2.0, 4.0, 8.0, 10.0],
)

# === LLM Performance Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "LLM generation latency in seconds",
    ["model", "success"],
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 120.0, 300.0],
)
"""
LLM generation latency histogram.

Labels:
- model: Model name (e.g., deepseek-coder:1.3b, llama3:8b)
- success: true (generation succeeded), false (attempt failed)

Upper bucket matches the default 300s backend timeout.
"""
