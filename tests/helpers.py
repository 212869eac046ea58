# tests/helpers.py

"""Stub provider adapters and small builders shared by the test modules."""

import asyncio
from typing import Dict, List, Optional, Union

from genprobe.domain.adapters.base import ProviderAdapter
from genprobe.domain.models.probe import GenerationRequest, ProviderConfig, ProviderName
from genprobe.domain.services.probe_svc import ProviderProbe

Outcome = Union[str, BaseException]


class StubAdapter(ProviderAdapter):
    """Adapter returning canned text or raising a canned error, per model id if asked."""

    def __init__(
        self,
        api_key: str,
        outcome: Outcome = "Hi there",
        by_model: Optional[Dict[str, Outcome]] = None,
        models: Optional[List[str]] = None,
    ) -> None:
        self.api_key = api_key
        self.outcome = outcome
        self.by_model = by_model or {}
        self.models = models or []
        self.requests: List[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        outcome = self.by_model.get(request.model_id, self.outcome)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def list_models(self) -> List[str]:
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return list(self.models)


class SlowAdapter(ProviderAdapter):
    """Adapter that never answers in time; used for cancellation."""

    async def generate(self, request: GenerationRequest) -> str:
        await asyncio.sleep(30)
        return "too late"

    async def list_models(self) -> List[str]:
        return []


class StubFactory:
    """Adapter factory that records every adapter it builds."""

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs
        self.built: List[StubAdapter] = []

    def __call__(self, api_key: str) -> StubAdapter:
        adapter = StubAdapter(api_key, **self.kwargs)
        self.built.append(adapter)
        return adapter

    @property
    def requests(self) -> List[GenerationRequest]:
        return [r for a in self.built for r in a.requests]


def stub_probe(factory: StubFactory) -> ProviderProbe:
    """A probe whose every provider is served by *factory*."""
    return ProviderProbe({p: factory for p in ProviderName})


def make_config(
    provider: ProviderName = ProviderName.GOOGLE,
    model_id: str = "gemini-1.5-flash",
    api_key: str = "AIzaSyTESTKEYcwyE",
    prompt: str = "Hello",
    **kwargs,
) -> ProviderConfig:
    return ProviderConfig(
        provider_name=provider,
        model_id=model_id,
        api_key=api_key,
        prompt=prompt,
        **kwargs,
    )


def run(coro):
    """Drive a coroutine to completion from synchronous test code."""
    return asyncio.run(coro)
