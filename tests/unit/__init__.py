"""
Unit tests for Ollama Gateway.

Test individual components in isolation:
- Data models (prompt validation, model defaulting, config invariants)
- Ollama client (payload, timeouts, failure classification)
- Retry policy and executor (attempt counting, backoff sequence)
- Request handler (status mapping)
"""
