# genprobe/domain/adapters/registry.py
from typing import Dict

from genprobe.domain.adapters.base import AdapterFactory
from genprobe.domain.adapters.google_adapter import GoogleAdapter
from genprobe.domain.adapters.openai_adapter import GroqAdapter, OpenAIAdapter
from genprobe.domain.models.probe import ProviderName

# Provider -> adapter factory. Extend by registering, never by branching in the probe.
ADAPTERS: Dict[ProviderName, AdapterFactory] = {
    ProviderName.GOOGLE: GoogleAdapter,
    ProviderName.GROQ: GroqAdapter,
    ProviderName.OPENAI: OpenAIAdapter,
}


def register_adapter(provider: ProviderName | str, factory: AdapterFactory) -> None:
    """Install (or replace) the adapter factory used for a provider."""
    ADAPTERS[ProviderName(provider)] = factory
