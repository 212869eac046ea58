# genprobe/domain/adapters/base.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, List

from genprobe.domain.models.probe import GenerationRequest, ProviderName


class ProviderAdapter(ABC):
    """
    One generative-AI provider behind a single capability: send one request, get text back.

    Implementations translate every vendor SDK failure into
    `ProviderError` (with the HTTP status and vendor reason when known)
    or `ProviderTransportError`. Nothing vendor-specific leaks past here.
    """

    provider: ProviderName

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> str:
        """Return the plain-text completion for a single-turn request."""
        raise NotImplementedError

    @abstractmethod
    async def list_models(self) -> List[str]:
        """Return the model ids usable for text generation with this credential."""
        raise NotImplementedError


AdapterFactory = Callable[[str], ProviderAdapter]
