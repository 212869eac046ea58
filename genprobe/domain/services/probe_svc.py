# genprobe/domain/services/probe_svc.py

from __future__ import annotations
from typing import Iterable, List, Mapping, Optional, Union
import logging
from time import monotonic as _now

from genprobe.domain.adapters.base import AdapterFactory
from genprobe.domain.adapters.registry import ADAPTERS
from genprobe.domain.errors import ConfigurationError, ProviderError, ProviderTransportError
from genprobe.domain.models.probe import (
    ErrorKind,
    GenerationRequest,
    ModelListing,
    ProbeFailure,
    ProbeResult,
    ProbeSuccess,
    ProviderConfig,
    ProviderName,
    SweepAttempt,
    SweepReport,
    mask_secret,
)

logger = logging.getLogger(__name__)

# =============================================================================
#                               CLASSIFICATION
# =============================================================================

_STATUS_KINDS = {
    401: ErrorKind.AUTH_ERROR,
    403: ErrorKind.AUTH_ERROR,
    404: ErrorKind.MODEL_NOT_FOUND,
    429: ErrorKind.RATE_LIMITED,
}

# Vendor reason codes (Google RPC status / OpenAI-style error.code)
_REASON_KINDS = {
    "API_KEY_INVALID": ErrorKind.AUTH_ERROR,
    "PERMISSION_DENIED": ErrorKind.AUTH_ERROR,
    "UNAUTHENTICATED": ErrorKind.AUTH_ERROR,
    "invalid_api_key": ErrorKind.AUTH_ERROR,
    "NOT_FOUND": ErrorKind.MODEL_NOT_FOUND,
    "model_not_found": ErrorKind.MODEL_NOT_FOUND,
    "RESOURCE_EXHAUSTED": ErrorKind.RATE_LIMITED,
    "rate_limit_exceeded": ErrorKind.RATE_LIMITED,
}

# Kinds where the masked key / model hint helps the operator
_HINTED_KINDS = {ErrorKind.AUTH_ERROR, ErrorKind.MODEL_NOT_FOUND}


def classify_error(err: BaseException) -> ErrorKind:
    """Map an adapter failure onto the closed ErrorKind set."""
    if isinstance(err, ProviderTransportError):
        return ErrorKind.TRANSPORT_ERROR
    if isinstance(err, ProviderError):
        if err.status_code in _STATUS_KINDS:
            return _STATUS_KINDS[err.status_code]
        if err.reason in _REASON_KINDS:
            return _REASON_KINDS[err.reason]
    return ErrorKind.UNKNOWN_PROVIDER_ERROR


def _failure_message(err: BaseException, kind: ErrorKind, api_key: str, model_id: Optional[str] = None) -> str:
    """
    Human-readable failure text derived from the provider's own message.
    The raw key is scrubbed; only its masked suffix may appear.
    """
    text = (getattr(err, "message", None) or str(err)).strip() or type(err).__name__
    masked = mask_secret(api_key)
    if api_key:
        text = text.replace(api_key, masked)
    if kind in _HINTED_KINDS:
        hint = f"key {masked}" + (f", model {model_id}" if model_id else "")
        text = f"{text} ({hint})"
    return text


def _require_usable(config: ProviderConfig) -> None:
    for field in ("api_key", "model_id", "prompt"):
        value = getattr(config, field, None)
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError(f"{field} must be a non-empty string")


def usable_candidates(candidates: Iterable[str]) -> List[str]:
    """Candidate model ids with blanks dropped and whitespace trimmed, order kept."""
    return [c.strip() for c in candidates if isinstance(c, str) and c.strip()]

# =============================================================================
#                               PROBE
# =============================================================================

class ProviderProbe:
    """
    Issues exactly one request against a provider and returns a ProbeResult.

    Provider failures never escape: they come back as ProbeFailure.
    Only caller mistakes (ConfigurationError) and task cancellation propagate.
    No retry, no caching, no state kept between calls.
    """

    def __init__(self, adapters: Optional[Mapping[ProviderName, AdapterFactory]] = None):
        self.adapters = ADAPTERS if adapters is None else adapters

    def _factory_for(self, provider: Union[ProviderName, str]) -> AdapterFactory:
        try:
            return self.adapters[ProviderName(provider)]
        except (KeyError, ValueError):
            raise ConfigurationError(f"No adapter registered for provider '{provider}'") from None

    async def probe(self, config: ProviderConfig) -> ProbeResult:
        _require_usable(config)
        factory = self._factory_for(config.provider_name)
        provider = ProviderName(config.provider_name)
        request = GenerationRequest.from_config(config)

        t0 = _now()
        try:
            adapter = factory(config.api_key)
            text = await adapter.generate(request)
        except Exception as e:
            dt_ms = (_now() - t0) * 1000.0
            kind = classify_error(e)
            logger.warning(
                f"probe failed provider={provider.value} model={config.model_id} "
                f"key={config.masked_key} kind={kind.value} duration={dt_ms:.1f}ms"
            )
            logger.debug(f"probe failure detail: {e!r}")
            return ProbeFailure(
                kind=kind,
                message=_failure_message(e, kind, config.api_key, config.model_id),
                provider=provider,
                model_id=config.model_id,
                latency_ms=dt_ms,
            )

        dt_ms = (_now() - t0) * 1000.0
        logger.info(
            f"probe ok provider={provider.value} model={config.model_id} "
            f"key={config.masked_key} duration={dt_ms:.1f}ms chars={len(text or '')}"
        )
        return ProbeSuccess(text=text or "", provider=provider, model_id=config.model_id, latency_ms=dt_ms)

    async def list_models(self, provider: Union[ProviderName, str], api_key: str) -> Union[ModelListing, ProbeFailure]:
        """Model ids the credential can generate with, or a classified failure."""
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigurationError("api_key must be a non-empty string")
        factory = self._factory_for(provider)
        provider = ProviderName(provider)

        t0 = _now()
        try:
            models = await factory(api_key).list_models()
        except Exception as e:
            dt_ms = (_now() - t0) * 1000.0
            kind = classify_error(e)
            logger.warning(f"list_models failed provider={provider.value} key={mask_secret(api_key)} kind={kind.value}")
            return ProbeFailure(
                kind=kind,
                message=_failure_message(e, kind, api_key),
                provider=provider,
                latency_ms=dt_ms,
            )
        logger.info(f"list_models ok provider={provider.value} key={mask_secret(api_key)} count={len(models)}")
        return ModelListing(provider=provider, models=list(models))

    async def find_working_model(self, config: ProviderConfig, candidates: Iterable[str]) -> SweepReport:
        """
        Probe candidate model ids in order and stop at the first that answers.
        Each attempt targets a different model; an auth failure ends the sweep
        since no other model will accept the same key.
        """
        model_ids = usable_candidates(candidates)
        if not model_ids:
            raise ConfigurationError("at least one candidate model id is required")
        _require_usable(config)
        provider = ProviderName(config.provider_name)

        attempts: list[SweepAttempt] = []
        for model_id in model_ids:
            result = await self.probe(config.model_copy(update={"model_id": model_id}))
            attempts.append(SweepAttempt(model_id=model_id, result=result))
            if isinstance(result, ProbeSuccess):
                logger.info(f"sweep found working model provider={provider.value} model={model_id}")
                return SweepReport(provider=provider, working_model=model_id, attempts=attempts)
            if result.kind == ErrorKind.AUTH_ERROR:
                break

        logger.warning(f"sweep found no working model provider={provider.value} tried={len(attempts)}")
        return SweepReport(provider=provider, attempts=attempts)


async def probe(config: ProviderConfig) -> ProbeResult:
    """One-shot probe through the default adapter registry."""
    return await ProviderProbe().probe(config)
