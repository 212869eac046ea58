# genprobe/api/deps.py
from genprobe.core.config import Settings, get_settings
from genprobe.domain.services.probe_svc import ProviderProbe

# Dependency for injecting the settings into endpoints (overridden in tests)
def settings_dep() -> Settings:
    return get_settings()

# Dependency for injecting the probe; stateless, so one per request is fine
def probe_dep() -> ProviderProbe:
    return ProviderProbe()
