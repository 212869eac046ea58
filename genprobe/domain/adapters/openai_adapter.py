# genprobe/domain/adapters/openai_adapter.py
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

import openai
from openai import AsyncOpenAI

from genprobe.domain.adapters.base import ProviderAdapter
from genprobe.domain.errors import ProviderError, ProviderTransportError
from genprobe.domain.models.probe import GenerationRequest, ProviderName

logger = logging.getLogger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


def translate_openai_error(err: openai.APIError) -> ProviderError:
    """Map an OpenAI-SDK exception onto the provider error contract."""
    if isinstance(err, openai.APIConnectionError):  # also covers APITimeoutError
        return ProviderTransportError(err.message or "connection error")
    status_code = err.status_code if isinstance(err, openai.APIStatusError) else None
    # body.error.code, e.g. "invalid_api_key", "model_not_found", "rate_limit_exceeded"
    reason = getattr(err, "code", None)
    return ProviderError(err.message or str(err), status_code=status_code, reason=reason)


class OpenAIAdapter(ProviderAdapter):
    """Chat-completions adapter for OpenAI and any OpenAI-compatible endpoint."""

    provider = ProviderName.OPENAI
    base_url: Optional[str] = None

    def __init__(self, api_key: str, client: Optional[AsyncOpenAI] = None):
        # max_retries=0: the SDK retries 429/5xx twice by default, a probe is one attempt
        self.client = client or AsyncOpenAI(api_key=api_key, base_url=self.base_url, max_retries=0)

    async def generate(self, request: GenerationRequest) -> str:
        kwargs: Dict[str, Any] = {
            "model": request.model_id,
            "messages": [m.model_dump() for m in request.messages],
        }
        if request.max_tokens is not None:
            kwargs["max_tokens"] = request.max_tokens
        if request.temperature is not None:
            kwargs["temperature"] = request.temperature

        logger.debug(f"{self.provider.value} chat.completions.create model={request.model_id}")
        try:
            resp = await self.client.chat.completions.create(**kwargs)
        except openai.APIError as e:
            raise translate_openai_error(e) from e
        return resp.choices[0].message.content or ""

    async def list_models(self) -> List[str]:
        try:
            return sorted([m.id async for m in self.client.models.list()])
        except openai.APIError as e:
            raise translate_openai_error(e) from e


class GroqAdapter(OpenAIAdapter):
    """Groq through its OpenAI-compatible endpoint."""

    provider = ProviderName.GROQ
    base_url = GROQ_BASE_URL
