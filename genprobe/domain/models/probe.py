from __future__ import annotations
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator


class ProviderName(str, Enum):
    GOOGLE = "google"
    GROQ = "groq"
    OPENAI = "openai"


class ErrorKind(str, Enum):
    AUTH_ERROR = "auth_error"
    MODEL_NOT_FOUND = "model_not_found"
    RATE_LIMITED = "rate_limited"
    TRANSPORT_ERROR = "transport_error"
    UNKNOWN_PROVIDER_ERROR = "unknown_provider_error"


def mask_secret(secret: Optional[str]) -> str:
    """Display form of a credential: '****' plus the last 4 characters, nothing more."""
    if not secret or len(secret) <= 4:
        return "****"
    return f"****{secret[-4:]}"


class ProviderConfig(BaseModel):
    provider_name: ProviderName
    model_id: str
    api_key: str = Field(repr=False)
    prompt: str
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)

    model_config = {"frozen": True, "protected_namespaces": ()}  # immuable = safe

    @field_validator("model_id", "api_key", "prompt")
    @classmethod
    def _not_blank(cls, v: str, info) -> str:
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} must be a non-empty string")
        return v

    @property
    def masked_key(self) -> str:
        return mask_secret(self.api_key)


class ChatMessage(BaseModel):
    role: Literal["user"] = "user"
    content: str
    model_config = {"frozen": True}


class GenerationRequest(BaseModel):
    """Single-turn request handed to a provider adapter."""
    model_id: str
    messages: List[ChatMessage]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    model_config = {"frozen": True, "protected_namespaces": ()}

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "GenerationRequest":
        return cls(
            model_id=config.model_id,
            messages=[ChatMessage(content=config.prompt)],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )

    @property
    def prompt(self) -> str:
        return self.messages[0].content


class ProbeSuccess(BaseModel):
    status: Literal["success"] = "success"
    text: str
    provider: Optional[ProviderName] = None
    model_id: Optional[str] = None
    latency_ms: Optional[float] = None
    model_config = {"frozen": True, "protected_namespaces": ()}


class ProbeFailure(BaseModel):
    status: Literal["failure"] = "failure"
    kind: ErrorKind
    message: str = Field(min_length=1)
    provider: Optional[ProviderName] = None
    model_id: Optional[str] = None
    latency_ms: Optional[float] = None
    model_config = {"frozen": True, "protected_namespaces": ()}


ProbeResult = Annotated[Union[ProbeSuccess, ProbeFailure], Field(discriminator="status")]


class ModelListing(BaseModel):
    status: Literal["success"] = "success"
    provider: ProviderName
    models: List[str]
    model_config = {"frozen": True}


class SweepAttempt(BaseModel):
    model_id: str
    result: ProbeResult
    model_config = {"frozen": True, "protected_namespaces": ()}


class SweepReport(BaseModel):
    provider: ProviderName
    working_model: Optional[str] = None
    attempts: List[SweepAttempt] = Field(default_factory=list)
    model_config = {"frozen": True}
