# genprobe/api/v1/routers/providers.py
from fastapi import APIRouter, Depends, HTTPException
from typing import Union
import time
import logging

from genprobe.api.deps import probe_dep, settings_dep
from genprobe.api.v1.schemas.probe import ProbeIn, SweepIn
from genprobe.core.config import Settings
from genprobe.domain.errors import ConfigurationError
from genprobe.domain.models.probe import (
    ModelListing,
    ProbeFailure,
    ProbeResult,
    ProviderConfig,
    ProviderName,
    SweepReport,
)
from genprobe.domain.services.probe_svc import ProviderProbe, usable_candidates
from pydantic import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/providers", tags=["providers"])


def _config_for(
    settings: Settings,
    provider: ProviderName,
    model_id: str,
    prompt: str | None,
    max_tokens: int | None = None,
    temperature: float | None = None,
) -> ProviderConfig:
    """Build an explicit ProviderConfig from the settings credential; 400 when unusable."""
    try:
        return ProviderConfig(
            provider_name=provider,
            model_id=model_id,
            api_key=settings.api_key_for(provider.value),
            prompt=prompt or settings.DEFAULT_PROMPT,
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise HTTPException(status_code=400, detail=f"Invalid provider configuration for '{provider.value}': {', '.join(fields)}")


@router.post("/{provider}/probe", response_model=ProbeResult)
async def probe_provider(
    provider: ProviderName,
    body: ProbeIn,
    settings: Settings = Depends(settings_dep),
    probe: ProviderProbe = Depends(probe_dep),
):
    """
    One generation request against the provider.
    Provider failures are a normal 200 response with status="failure".
    """
    logger.info(f"Request: probe provider={provider.value} model={body.model_id}")
    config = _config_for(settings, provider, body.model_id, body.prompt, body.max_tokens, body.temperature)
    start_time = time.perf_counter()
    try:
        res = await probe.probe(config)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Response: probe provider={provider.value} status={res.status} elapsed_time={time.perf_counter() - start_time:.4f}s")
    return res


@router.get("/{provider}/models", response_model=Union[ModelListing, ProbeFailure])
async def list_provider_models(
    provider: ProviderName,
    settings: Settings = Depends(settings_dep),
    probe: ProviderProbe = Depends(probe_dep),
):
    """Model ids the configured credential can use for text generation."""
    logger.info(f"Request: list_models provider={provider.value}")
    try:
        return await probe.list_models(provider, settings.api_key_for(provider.value))
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/{provider}/sweep", response_model=SweepReport)
async def sweep_provider_models(
    provider: ProviderName,
    body: SweepIn,
    settings: Settings = Depends(settings_dep),
    probe: ProviderProbe = Depends(probe_dep),
):
    """Probe candidate models in order and report the first one that answers."""
    logger.info(f"Request: sweep provider={provider.value} candidates={body.candidates}")
    candidates = usable_candidates(body.candidates)
    if not candidates:
        raise HTTPException(status_code=400, detail="at least one candidate model id is required")
    config = _config_for(settings, provider, candidates[0], body.prompt, body.max_tokens)
    try:
        return await probe.find_working_model(config, candidates)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
