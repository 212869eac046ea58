# genprobe/api/v1/routers/health.py
import time
import subprocess
from fastapi import APIRouter, Depends
from genprobe.api.deps import settings_dep
from genprobe.core.config import Settings
from genprobe.domain.models.probe import ProviderName

router = APIRouter(tags=["health"])
START_TIME = time.time()


def _git_sha(short: bool = True) -> str:
    try:
        cmd = ["git", "rev-parse", "--short" if short else "HEAD"]
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


@router.get("/health")
async def health(settings: Settings = Depends(settings_dep)):
    """
    Liveness only: no provider is contacted here (use /providers/{provider}/probe).
    - exposes basic app info
    - reports which provider credentials are configured (booleans, never the keys)
    """
    version = settings.GIT_SHA if settings.GIT_SHA not in ("", "unknown") else _git_sha()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": version,
        "uptime_seconds": int(time.time() - START_TIME),
    }

    keys = {p.value: bool(settings.api_key_for(p.value)) for p in ProviderName}
    checks["api_keys_set"] = keys

    # At least one provider must be usable for the service to be useful
    status = "ok" if any(keys.values()) else "degraded"

    return {"status": status, "checks": checks, "timestamp": int(time.time())}
