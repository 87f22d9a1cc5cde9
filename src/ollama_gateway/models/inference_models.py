"""
Data models for the prompt -> generated text cycle.

PromptRequest and InferenceResult are per-call values; BackendConfig is built
once at startup from Settings and shared read-only by every request.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ollama_gateway.exceptions import ValidationError


class PromptRequest(BaseModel):
    """
    A validated prompt with its effective model.
    
    Build it through `resolve()` so the non-blank prompt invariant and the
    model defaulting are applied consistently.
    """
    model_config = ConfigDict(frozen=True)
    
    prompt: str = Field(..., description="User prompt, at least one non-whitespace character")
    model: str = Field(..., description="Effective model identifier (e.g., 'deepseek-coder:1.3b')")
    
    @classmethod
    def resolve(
        cls,
        prompt: Optional[str],
        model: Optional[str],
        default_model: str,
    ) -> "PromptRequest":
        """
        Validate the prompt and pick the effective model.
        
        Args:
            prompt: Raw prompt text
            model: Caller-supplied model, may be None or blank
            default_model: Model used when the caller did not name one
            
        Returns:
            PromptRequest ready to be sent
            
        Raises:
            ValidationError: Prompt is None, empty or whitespace-only
        """
        if prompt is None or not prompt.strip():
            raise ValidationError("Prompt cannot be empty or null")
        
        effective_model = model if model and model.strip() else default_model
        return cls(prompt=prompt, model=effective_model)
    
    def to_payload(self) -> Dict[str, Any]:
        """Ollama /api/generate body. Streaming is always off."""
        return {
            "model": self.model,
            "prompt": self.prompt,
            "stream": False,
        }


class InferenceResult(BaseModel):
    """Generated text returned by a successful call."""
    model_config = ConfigDict(frozen=True)
    
    text: str = Field(..., description="Generated output (Ollama `response` field)")
    model: str = Field(..., description="Model the request was sent with")


@dataclass(frozen=True)
class BackendConfig:
    """
    Where and how to reach the inference backend.
    
    Attributes:
        endpoint_url: Full generate URL (e.g., http://localhost:11434/api/generate)
        default_model: Model used when the caller supplies none
        timeout: Seconds allowed for connection establishment and for the
            response read (one value governs both phases)
    """

    endpoint_url: str
    default_model: str
    timeout: float

    def __post_init__(self) -> None:
        """Validate config invariants."""
        if not self.endpoint_url:
            raise ValueError("endpoint_url must not be empty")
        
        if not self.default_model or not self.default_model.strip():
            raise ValueError("default_model must not be blank")
        
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
