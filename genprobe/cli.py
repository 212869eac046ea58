# genprobe/cli.py

"""Command-line probes: check a key/model against a provider without starting the API.

    genprobe probe  --provider google --model gemini-1.5-flash --prompt "Hello"
    genprobe models --provider google
    genprobe sweep  --provider google --candidates gemini-1.5-flash gemini-2.0-flash

Exit codes: 0 success, 1 provider failure, 2 configuration error.
"""

from __future__ import annotations
import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from genprobe.core.config import Settings, get_settings
from genprobe.core.logging import configure_logging
from genprobe.domain.errors import ConfigurationError
from genprobe.domain.models.probe import (
    ModelListing,
    ProbeFailure,
    ProbeSuccess,
    ProviderConfig,
    ProviderName,
    SweepReport,
    mask_secret,
)
from genprobe.domain.services.probe_svc import ProviderProbe, usable_candidates

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PROVIDER_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="genprobe", description="Probe generative-AI providers.")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    providers = [p.value for p in ProviderName]

    p_probe = sub.add_parser("probe", help="Send one prompt to one model")
    p_probe.add_argument("--provider", required=True, choices=providers)
    p_probe.add_argument("--model", required=True, help="Model id, passed through as-is")
    p_probe.add_argument("--prompt", default=None)
    p_probe.add_argument("--max-tokens", type=int, default=None)
    p_probe.add_argument("--temperature", type=float, default=None)

    p_models = sub.add_parser("models", help="List the models the key can generate with")
    p_models.add_argument("--provider", required=True, choices=providers)

    p_sweep = sub.add_parser("sweep", help="Try candidate models in order, stop at the first that answers")
    p_sweep.add_argument("--provider", required=True, choices=providers)
    p_sweep.add_argument("--candidates", required=True, nargs="+")
    p_sweep.add_argument("--prompt", default=None)

    return parser


def _config(settings: Settings, args: argparse.Namespace, model_id: str) -> ProviderConfig:
    try:
        return ProviderConfig(
            provider_name=args.provider,
            model_id=model_id,
            api_key=settings.api_key_for(args.provider),
            prompt=args.prompt or settings.DEFAULT_PROMPT,
            max_tokens=getattr(args, "max_tokens", None),
            temperature=getattr(args, "temperature", None),
        )
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise ConfigurationError(f"invalid configuration for {args.provider}: {', '.join(fields)}") from None


def _print_result(result, as_json: bool) -> None:
    if as_json:
        print(result.model_dump_json(indent=2))
        return
    if isinstance(result, ProbeSuccess):
        print(f"✅ SUCCESS {result.provider.value}/{result.model_id} ({result.latency_ms:.0f} ms): {result.text}")
    elif isinstance(result, ProbeFailure):
        print(f"❌ FAILED [{result.kind.value}]: {result.message}")
    elif isinstance(result, ModelListing):
        print(f"✅ {len(result.models)} model(s) available for {result.provider.value}:")
        for name in result.models:
            print(f"• {name}")
    elif isinstance(result, SweepReport):
        for attempt in result.attempts:
            r = attempt.result
            outcome = "ok" if isinstance(r, ProbeSuccess) else r.kind.value
            print(f"👉 {attempt.model_id:<35} {outcome}")
        if result.working_model:
            print(f"🎉 Working model: {result.working_model}")
        else:
            print("💀 No working model found for this key.")


async def _run(args: argparse.Namespace, settings: Settings, probe: ProviderProbe) -> int:
    key = settings.api_key_for(args.provider)
    print(f"🔑 Using {args.provider} key ending in: {mask_secret(key)}", file=sys.stderr)

    if args.command == "probe":
        result = await probe.probe(_config(settings, args, args.model))
        _print_result(result, args.json)
        return EXIT_OK if isinstance(result, ProbeSuccess) else EXIT_PROVIDER_FAILURE

    if args.command == "models":
        result = await probe.list_models(args.provider, key)
        _print_result(result, args.json)
        return EXIT_OK if isinstance(result, ModelListing) else EXIT_PROVIDER_FAILURE

    if args.command == "sweep":
        candidates = usable_candidates(args.candidates)
        if not candidates:
            raise ConfigurationError("at least one candidate model id is required")
        report = await probe.find_working_model(_config(settings, args, candidates[0]), candidates)
        _print_result(report, args.json)
        return EXIT_OK if report.working_model else EXIT_PROVIDER_FAILURE

    raise ConfigurationError(f"unknown command {args.command!r}")


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    settings: Optional[Settings] = None,
    probe: Optional[ProviderProbe] = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    configure_logging(
        level=logging.DEBUG if (args.verbose or settings.DEBUG) else logging.WARNING,
        stream=sys.stderr,
    )
    try:
        return asyncio.run(_run(args, settings, probe or ProviderProbe()))
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())
