from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.domain.enums import ProductGroup
from .urls import DEFAULT_BASE_URL


class AppConfig(BaseSettings):
    """Application configuration with automatic environment variable loading.

    All settings can be overridden via environment variables with the CRPT_API_ prefix
    (or a local .env file). For example:
        - CRPT_API_TOKEN=eyJhbGciOi...
        - CRPT_API_BASE_URL=https://markirovka.sandbox.crptech.ru/api/v3
        - CRPT_API_REQUEST_LIMIT=100
        - CRPT_API_WINDOW_SECONDS=60

    Alternatively, settings can be provided programmatically when creating the client:
        client = CrptClient(request_limit=100, time_unit=TimeUnit.MINUTES, token="...")
    """

    model_config = SettingsConfigDict(
        env_prefix="CRPT_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Registry API base URL; /lk/documents/create is appended",
    )

    token: Optional[str] = Field(
        default=None,
        description="Bearer token for the registry API. Ignored when a token provider is injected",
    )

    # Validated by the rate limiter itself so a bad value raises ConfigurationError
    request_limit: int = Field(
        default=10,
        description="Maximum number of requests per window",
    )

    window_seconds: float = Field(
        default=1.0,
        description="Sliding window length in seconds",
    )

    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout for registry calls in seconds",
    )

    product_group: ProductGroup = Field(
        default=ProductGroup.CLOTHES,
        description="Product group sent with every document",
    )
