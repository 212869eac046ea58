# genprobe/domain/errors.py
from __future__ import annotations
from typing import Optional


class GenprobeError(Exception):
    """Base class for errors raised by genprobe."""


class ConfigurationError(GenprobeError, ValueError):
    """Caller supplied an unusable configuration (empty key/model/prompt, unknown provider)."""


class ProviderError(GenprobeError):
    """
    Failure reported by a provider, as translated by its adapter.
    Only adapters raise it and only the probe catches it.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.reason = reason

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, reason={self.reason!r}, message={self.message!r})"


class ProviderTransportError(ProviderError):
    """The request never got a provider answer (DNS, connection reset, timeout)."""
