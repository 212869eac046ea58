from functools import lru_cache
from typing import Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "GenProbe"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Provider credentials (opaque, only ever surfaced masked)
    GOOGLE_API_KEY: str = ""
    GROQ_API_KEY: str = ""
    OPENAI_API_KEY: str = ""

    # Probe defaults
    DEFAULT_PROMPT: str = "Hello! Are you working?"

    # API
    ALLOWED_ORIGINS: str = ""  # CSV

    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    def api_key_for(self, provider: str) -> str:
        """Credential configured for a provider name ('google', 'groq', 'openai')."""
        return {
            "google": self.GOOGLE_API_KEY,
            "groq": self.GROQ_API_KEY,
            "openai": self.OPENAI_API_KEY,
        }.get(str(provider), "")

    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
