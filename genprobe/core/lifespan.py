# genprobe/core/lifespan.py
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from genprobe.core.config import get_settings
from genprobe.domain.models.probe import ProviderName, mask_secret

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # Nothing to connect: providers are contacted per request only.
    for provider in ProviderName:
        key = settings.api_key_for(provider.value)
        if key:
            logger.info(f"{provider.value} key configured ({mask_secret(key)})")
        else:
            logger.warning(f"No {provider.value} key configured, probes for it will be rejected")

    yield

    # --- Shutdown ---
    logger.info(f"{settings.APP_NAME} shutting down")
