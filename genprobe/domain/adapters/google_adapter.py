# genprobe/domain/adapters/google_adapter.py
from __future__ import annotations
from typing import List, Optional
import logging

import httpx
from google import genai
from google.genai import errors, types

from genprobe.domain.adapters.base import ProviderAdapter
from genprobe.domain.errors import ProviderError, ProviderTransportError
from genprobe.domain.models.probe import GenerationRequest, ProviderName

logger = logging.getLogger(__name__)

# Google answers a bad key with 400 INVALID_ARGUMENT, not 401
_INVALID_KEY_MARKERS = ("API_KEY_INVALID", "API key not valid")


def translate_google_error(err: errors.APIError) -> ProviderError:
    """Map a google-genai APIError onto the provider error contract."""
    code = getattr(err, "code", None)
    reason = getattr(err, "status", None)  # e.g. "NOT_FOUND", "RESOURCE_EXHAUSTED"
    message = getattr(err, "message", None) or str(err)
    raw = f"{message} {getattr(err, 'details', '')}"
    if any(marker in raw for marker in _INVALID_KEY_MARKERS):
        reason = "API_KEY_INVALID"
    return ProviderError(message, status_code=code, reason=reason)


class GoogleAdapter(ProviderAdapter):
    """Gemini models through the google-genai SDK (async surface)."""

    provider = ProviderName.GOOGLE

    def __init__(self, api_key: str, client: Optional[genai.Client] = None):
        self.client = client or genai.Client(api_key=api_key)

    async def generate(self, request: GenerationRequest) -> str:
        config = types.GenerateContentConfig(
            max_output_tokens=request.max_tokens,
            temperature=request.temperature,
        )
        logger.debug(f"google generate_content model={request.model_id}")
        try:
            resp = await self.client.aio.models.generate_content(
                model=request.model_id,
                contents=request.prompt,
                config=config,
            )
        except errors.APIError as e:
            raise translate_google_error(e) from e
        except (httpx.TransportError, OSError) as e:
            raise ProviderTransportError(str(e) or type(e).__name__) from e
        return resp.text or ""

    async def list_models(self) -> List[str]:
        names: List[str] = []
        try:
            pager = await self.client.aio.models.list()
            async for m in pager:
                if "generateContent" in (m.supported_actions or []):
                    names.append((m.name or "").removeprefix("models/"))
        except errors.APIError as e:
            raise translate_google_error(e) from e
        except (httpx.TransportError, OSError) as e:
            raise ProviderTransportError(str(e) or type(e).__name__) from e
        return sorted(n for n in names if n)
