from __future__ import annotations

import os
from dataclasses import dataclass, field

from uscurrency.core.logging import resolve_level


@dataclass(slots=True)
class Settings:
    app_name: str = "USCurrency GraphQL"
    host: str = field(default_factory=lambda: os.getenv("USC_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("USC_PORT", "8000")))
    environment: str = field(default_factory=lambda: os.getenv("USC_ENV", "dev"))
    log_level: str = field(default_factory=lambda: os.getenv("USC_LOG_LEVEL", "INFO"))
    graphql_path: str = "/graphql"

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def get_settings() -> Settings:
    settings = Settings()
    if not 0 < settings.port < 65536:
        raise ValueError(f"USC_PORT out of range: {settings.port}")
    resolve_level(settings.log_level)
    return settings
