from fastapi import FastAPI
from genprobe.core.config import get_settings
from genprobe.core.lifespan import lifespan
from genprobe.api.v1.routers.health import router as health_router
from genprobe.api.v1.routers.providers import router as providers_router
from genprobe.api.v1.routers.products import router as products_router
from genprobe.core.logging import configure_logging

from fastapi.middleware.cors import CORSMiddleware
import logging

settings = get_settings()
configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ------- CORS -------
# ALLOWED_ORIGINS is a CSV, e.g. "https://shop.example.com,https://admin.example.com"
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins(),
    allow_credentials=False,                        # keeps the preflight simple
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# ------- Routes -------
app.include_router(health_router)
app.include_router(providers_router)         # probe / models / sweep
app.include_router(products_router)          # catalog projections
