"""Integration test fixtures.

Provides a TestClient whose request handler talks to a stub backend, and a
check that skips real-server tests when Ollama is not running.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from ollama_gateway.api.dependencies import get_inference_client, get_request_handler
from ollama_gateway.api.handler import RequestHandler
from ollama_gateway.main import app
from ollama_gateway.retry.executor import RetryExecutor
from ollama_gateway.retry.policy import RetryPolicy

OLLAMA_URL = "http://localhost:11434"


@pytest.fixture(scope="session")
def check_ollama():
    """Check if Ollama is available at localhost:11434.
    
    Skips tests if Ollama is not reachable.
    """
    try:
        response = httpx.get(f"{OLLAMA_URL}/api/tags", timeout=5)
        if response.status_code != 200:
            pytest.skip("Ollama not available (non-200 status)")
    except httpx.HTTPError as e:
        pytest.skip(f"Ollama not available: {e}")


@pytest.fixture
def api_client(make_client, recording_sleep):
    """Factory fixture returning (backend, TestClient) for a stub responder.
    
    Dependency overrides are removed after the test.
    """
    def _create(responder, default_model: str = "llama3:8b"):
        backend, client = make_client(responder)
        handler = RequestHandler(
            client=client,
            executor=RetryExecutor(sleep=recording_sleep),
            policy=RetryPolicy(),
            default_model=default_model,
        )
        app.dependency_overrides[get_request_handler] = lambda: handler
        app.dependency_overrides[get_inference_client] = lambda: client
        return backend, TestClient(app)
    
    yield _create
    app.dependency_overrides.clear()
