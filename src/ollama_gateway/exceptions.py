"""
Failure taxonomy for the inference pipeline.

Every failure the core can produce is one of three kinds, and the kind alone
decides whether the retry executor tries again and which status the boundary
returns:

- ValidationError: caller input is malformed (never retried, 400)
- TransientIOError: network fault, timeout or non-2xx status (retried, 500)
- ProtocolError: backend answered with an unexpected payload (never retried, 500)
"""


class GatewayError(Exception):
    """
    Base exception for all gateway errors.
    
    Carries a caller-visible message plus optional structured details
    for logging.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(GatewayError):
    """
    Raised when the inbound prompt is unusable (empty or whitespace-only).
    
    Raised before any network call is attempted.
    """
    pass


class TransientIOError(GatewayError):
    """
    Raised when the backend could not be reached or answered with a non-2xx status.
    
    Connection refused, socket reset, DNS failures and elapsed timeouts all
    land here. Backend overload commonly shows up as 5xx, so non-2xx
    responses are treated the same way. This is the only retryable kind.
    """
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class BackendTimeoutError(TransientIOError):
    """Raised when connecting to or reading from the backend exceeds the configured timeout."""
    pass


class ProtocolError(GatewayError):
    """
    Raised when a 2xx response does not carry the expected `response` field.
    
    Asking again would return the same malformed shape, so this is not retried.
    """
    pass
