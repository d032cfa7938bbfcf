from __future__ import annotations

import os
from dataclasses import dataclass

from clients.admins_client_sdk.config import DEFAULT_BASE_URL, SDKConfig, load_dotenv, normalize_base_url, parse_bool

DEFAULT_PAGE_SIZE = 6
DEFAULT_SEARCH_DELAY_MS = 1000
DEFAULT_ALERT_SECONDS = 3.5


@dataclass(frozen=True)
class AppConfig:
    base_url: str
    timeout_seconds: float
    verify_ssl: bool
    page_size: int = DEFAULT_PAGE_SIZE
    search_delay_ms: int = DEFAULT_SEARCH_DELAY_MS
    alert_seconds: float = DEFAULT_ALERT_SECONDS

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "AppConfig":
        load_dotenv(env_file)
        config = cls(
            base_url=normalize_base_url(os.getenv("ADMINS_API_BASE_URL", DEFAULT_BASE_URL)),
            timeout_seconds=float(os.getenv("ADMINS_API_TIMEOUT_SECONDS", "30")),
            verify_ssl=parse_bool(os.getenv("ADMINS_API_VERIFY_SSL", "true"), default=True),
            page_size=int(os.getenv("ADMIN_PANEL_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))),
            search_delay_ms=int(os.getenv("ADMIN_PANEL_SEARCH_DELAY_MS", str(DEFAULT_SEARCH_DELAY_MS))),
            alert_seconds=float(os.getenv("ADMIN_PANEL_ALERT_SECONDS", str(DEFAULT_ALERT_SECONDS))),
        )
        config.validate()
        return config

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("ADMINS_API_BASE_URL cannot be empty")
        if self.timeout_seconds <= 0:
            raise ValueError("ADMINS_API_TIMEOUT_SECONDS must be greater than 0")
        if self.page_size < 1:
            raise ValueError("ADMIN_PANEL_PAGE_SIZE must be >= 1")
        if self.search_delay_ms < 0:
            raise ValueError("ADMIN_PANEL_SEARCH_DELAY_MS must be >= 0")
        if self.alert_seconds <= 0:
            raise ValueError("ADMIN_PANEL_ALERT_SECONDS must be greater than 0")

    def sdk_config(self) -> SDKConfig:
        return SDKConfig(base_url=self.base_url, timeout_seconds=self.timeout_seconds, verify_ssl=self.verify_ssl)
