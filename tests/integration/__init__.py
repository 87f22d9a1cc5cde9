"""
Integration tests for Ollama Gateway.

- Full FastAPI app through TestClient with a stub backend
- Client + retry executor against a stub backend with real sleeps
- Ollama client against a real server (marked with @pytest.mark.integration)
"""
