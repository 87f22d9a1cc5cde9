"""
FastAPI dependency injection for Ollama Gateway.

Provides singleton instances of expensive resources (settings, pooled
inference client, retry executor) and a per-request factory for the
request handler. Tests swap any of these via `app.dependency_overrides`.
"""

from functools import lru_cache

from fastapi import Depends

from ollama_gateway.api.handler import RequestHandler
from ollama_gateway.config import Settings, settings
from ollama_gateway.llm.base_client import BaseInferenceClient
from ollama_gateway.llm.ollama_client import OllamaClient
from ollama_gateway.retry.executor import RetryExecutor


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    
    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_inference_client() -> BaseInferenceClient:
    """
    Get singleton inference client with connection pooling.
    
    Uses @lru_cache to ensure only one client instance is created, so all
    requests share one httpx connection pool.
    
    Returns:
        OllamaClient instance
    """
    return OllamaClient(config=get_settings().backend_config())


@lru_cache()
def get_retry_executor() -> RetryExecutor:
    """
    Get singleton retry executor.
    
    The executor is stateless between calls; the policy is immutable.
    
    Returns:
        RetryExecutor instance
    """
    return RetryExecutor(policy=get_settings().retry_policy())


def get_request_handler(
    client: BaseInferenceClient = Depends(get_inference_client),
    executor: RetryExecutor = Depends(get_retry_executor),
    settings: Settings = Depends(get_settings),
) -> RequestHandler:
    """
    Create request handler with injected dependencies.
    
    Note: RequestHandler is NOT cached because it's lightweight.
    All heavy resources (client, executor) are singletons.
    
    Returns:
        RequestHandler instance
    """
    return RequestHandler(
        client=client,
        executor=executor,
        policy=executor.policy,
        default_model=settings.API_DEFAULT_MODEL,
    )
