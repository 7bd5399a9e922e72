"""
Client Settings

Central configuration for endpoint selection and request defaults.

Connection pooling, TLS, proxies and timeouts are NOT configured here: they
belong to the requests Session / httpx AsyncClient the caller supplies.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Optional

from owo import constants


@dataclass(frozen=True)
class OwoConfig:
    """
    Endpoint configuration shared by every requester.

    Can be loaded from:
    - Programmatic construction
    - A plain dict (e.g. parsed from the caller's own config file)
    """
    api_base: str = constants.API_BASE
    upload_path: str = constants.UPLOAD_PATH
    shorten_path: str = constants.SHORTEN_PATH
    user_agent: str = constants.USER_AGENT
    max_files: int = constants.MAX_FILES

    def __post_init__(self) -> None:
        if self.max_files < 1:
            raise ValueError(f"max_files must be positive, got {self.max_files}")

    @property
    def upload_url(self) -> str:
        """Absolute URL of the upload endpoint."""
        return _join(self.api_base, self.upload_path)

    @property
    def shorten_url(self) -> str:
        """Absolute URL of the shorten endpoint."""
        return _join(self.api_base, self.shorten_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OwoConfig":
        """
        Create configuration from a dictionary.

        Unknown keys are ignored so a larger application config section can
        be passed through as-is.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_CONFIG = OwoConfig()


def resolve(config: Optional[OwoConfig]) -> OwoConfig:
    """Return `config`, or the defaults when None."""
    return config if config is not None else DEFAULT_CONFIG


def _join(base: str, path: str) -> str:
    return base.rstrip("/") + "/" + path.lstrip("/")
