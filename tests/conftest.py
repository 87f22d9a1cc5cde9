"""Shared test fixtures and configuration for all tests.

This conftest.py provides settings with safe defaults, backend config, a
recording sleep for the retry executor and a factory wiring OllamaClient to
a stub backend (see stubs.py).
"""

import pytest

from ollama_gateway.config import Settings
from ollama_gateway.llm.ollama_client import OllamaClient
from ollama_gateway.models.inference_models import BackendConfig
from ollama_gateway.retry.executor import RetryExecutor
from ollama_gateway.retry.policy import RetryPolicy
from stubs import (
    TEST_DEFAULT_MODEL,
    TEST_ENDPOINT,
    RecordingSleep,
    Responder,
    StubBackend,
)


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing."""
    return Settings(
        APP_NAME="Ollama Gateway (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        OLLAMA_API_URL=TEST_ENDPOINT,
        OLLAMA_MODEL=TEST_DEFAULT_MODEL,
        OLLAMA_TIMEOUT=5,
        API_DEFAULT_MODEL="llama3:8b",
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def backend_config() -> BackendConfig:
    return BackendConfig(
        endpoint_url=TEST_ENDPOINT,
        default_model=TEST_DEFAULT_MODEL,
        timeout=5.0,
    )


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def executor(recording_sleep: RecordingSleep) -> RetryExecutor:
    """RetryExecutor with the default policy and no real waiting."""
    return RetryExecutor(policy=RetryPolicy(), sleep=recording_sleep)


@pytest.fixture
def make_client(backend_config: BackendConfig):
    """Factory fixture building an OllamaClient wired to a StubBackend.
    
    Usage:
        async def test_something(make_client):
            backend, client = make_client(ok("Hi there"))
    """
    def _create(responder: Responder, config: BackendConfig = backend_config):
        backend = StubBackend(responder)
        client = OllamaClient(config=config, transport=backend.transport())
        return backend, client
    
    return _create
